from datetime import datetime
from typing import Dict, List, Optional
import pytest
from src.leadflow.errors import ConfigError, MessagingError, StoreError
from src.leadflow.models import CreatedTask, Lead, LeadStage, Task
from src.leadflow.workflow import LeadToTaskWorkflow

FIXED_NOW = datetime(2026, 3, 10, 10, 30)


class FakeDirectory:
    def __init__(self, lists: Optional[Dict[int, str]] = None, assignees=None, mentions=None, channel="C-FRONT"):
        self.lists = lists if lists is not None else {4: "L4", 3: "L3", 2: "L2", 1: "L1"}
        self.assignees = assignees if assignees is not None else ["101", "102"]
        self.mentions = mentions if mentions is not None else ["U1", "U2"]
        self.channel = channel
        self.calls: List[str] = []

    async def list_id_for_tier(self, tier: int) -> str:
        self.calls.append("list_id_for_tier")
        list_id = self.lists.get(tier, "")
        if list_id is None:
            raise ConfigError(f"no destination configured for tier {tier}")
        return list_id

    async def assignee_ids(self) -> List[str]:
        self.calls.append("assignee_ids")
        return list(self.assignees)

    async def mention_ids(self) -> List[str]:
        self.calls.append("mention_ids")
        return list(self.mentions)

    async def notification_channel_id(self) -> str:
        self.calls.append("notification_channel_id")
        return self.channel


class FakeTaskStore:
    def __init__(self, fail_for: Optional[set] = None):
        self.fail_for = fail_for or set()
        self.created: List[Task] = []

    async def create_task(self, task: Task) -> CreatedTask:
        if task.name in self.fail_for:
            raise StoreError("ClickUp create task failed (400): invalid list")
        self.created.append(task)
        task_id = f"task-{len(self.created)}"
        return CreatedTask(id=task_id, name=task.name, url=f"https://app.clickup.com/t/{task_id}")


class FakeMessenger:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[Dict] = []

    async def notify_task_created(self, lead, task, mention_ids, channel_id) -> None:
        if self.fail:
            raise MessagingError("Slack API error: channel_not_found")
        self.sent.append({"lead": lead.id, "task": task.id, "mentions": mention_ids, "channel": channel_id})


@pytest.fixture
def directory():
    return FakeDirectory()


@pytest.fixture
def store():
    return FakeTaskStore()


@pytest.fixture
def messenger():
    return FakeMessenger()


@pytest.fixture
def workflow(store, messenger, directory):
    return LeadToTaskWorkflow(store, messenger, directory, clock=lambda: FIXED_NOW)


@pytest.fixture
def sarah():
    return Lead(
        id="lead-sarah",
        tier=4,
        stage=LeadStage.ACTION_READY,
        first_name="Sarah",
        last_name="Johnson",
        condition="Severe back pain",
    )
