from typing import List, Protocol
from .models import CreatedTask, Lead, Task


class TeamDirectory(Protocol):
    async def list_id_for_tier(self, tier: int) -> str:
        """Destination list for a tier. Raises ConfigError when none is set."""

    async def assignee_ids(self) -> List[str]: ...

    async def mention_ids(self) -> List[str]: ...

    async def notification_channel_id(self) -> str:
        """Channel to notify, or an empty string to skip notification."""


class TaskStore(Protocol):
    async def create_task(self, task: Task) -> CreatedTask: ...


class Messenger(Protocol):
    async def notify_task_created(
        self,
        lead: Lead,
        task: CreatedTask,
        mention_ids: List[str],
        channel_id: str,
    ) -> None: ...
