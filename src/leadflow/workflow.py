from datetime import datetime
from typing import Callable, Optional
from .config import Config
from .directory import ConfigDirectory
from .errors import ConfigError
from .interfaces import Messenger, TaskStore, TeamDirectory
from .logger import get_logger
from .models import CreatedTask, Lead, Outcome, WorkflowState
from .readiness import is_action_ready
from .slack_client import SlackMessenger
from .task_builder import build_task_from_lead
from .task_client import ClickUpTaskClient

NOT_READY_MESSAGE = "lead not yet at action stage"


class LeadToTaskWorkflow:
    """Lead -> ClickUp task -> Slack notification.

    ``process_lead`` never raises: every failure is reported through the
    returned :class:`Outcome`.
    """

    def __init__(
        self,
        task_store: TaskStore,
        messenger: Messenger,
        directory: TeamDirectory,
        clock: Optional[Callable[[], datetime]] = None,
        log_level: str = "INFO",
    ):
        self.task_store = task_store
        self.messenger = messenger
        self.directory = directory
        self.clock = clock or datetime.now
        self.logger = get_logger(self.__class__.__name__, log_level)

    async def process_lead(self, lead: Lead) -> Outcome:
        state = WorkflowState.START
        created: Optional[CreatedTask] = None
        try:
            ready = is_action_ready(lead)
            state = WorkflowState.GATE_CHECKED
            if not ready:
                self.logger.info(f"Lead {lead.id} (tier {lead.tier}, stage {lead.stage.value}) not ready for a task")
                return Outcome(
                    success=True,
                    task_created=False,
                    error=NOT_READY_MESSAGE,
                    state=WorkflowState.NOT_READY,
                )

            list_id = await self._resolve_list_id(lead.tier)
            state = WorkflowState.LIST_RESOLVED

            assignees = await self.directory.assignee_ids()
            if not assignees:
                self.logger.warning("No front desk assignees configured, creating unassigned task")

            task = build_task_from_lead(lead, list_id, assignees, now=self.clock())
            state = WorkflowState.TASK_BUILT

            created = await self.task_store.create_task(task)
            state = WorkflowState.TASK_CREATED
            self.logger.info(f"ClickUp task created: {created.id} - {created.name}")

            channel_id = await self.directory.notification_channel_id()
            if not channel_id:
                self.logger.warning("No Slack channel configured, skipping notification")
                return self._created_outcome(created, notified=False, state=WorkflowState.NOTIFY_SKIPPED)

            mention_ids = await self.directory.mention_ids()
            if not mention_ids:
                self.logger.warning("No Slack users configured, posting without mentions")

            await self.messenger.notify_task_created(lead, created, mention_ids, channel_id)
            self.logger.info(f"Slack notification sent to {channel_id} for task {created.id}")
            return self._created_outcome(created, notified=True, state=WorkflowState.NOTIFIED)
        except Exception as e:
            return self._failure(lead, state, created, e)

    async def _resolve_list_id(self, tier: int) -> str:
        list_id = await self.directory.list_id_for_tier(tier)
        if not list_id:
            raise ConfigError(f"no destination configured for tier {tier}")
        return list_id

    def _created_outcome(self, created: CreatedTask, notified: bool, state: WorkflowState) -> Outcome:
        return Outcome(
            success=True,
            task_created=True,
            task_id=created.id,
            task_url=created.url,
            slack_notified=notified,
            state=state,
        )

    def _failure(self, lead: Lead, state: WorkflowState, created: Optional[CreatedTask], error: Exception) -> Outcome:
        message = str(error) or error.__class__.__name__
        if created is not None:
            # The task exists; keep its reference even though a later step failed.
            self.logger.error(
                f"Lead {lead.id}: task {created.id} created, then failed after {state.value}: "
                f"{error.__class__.__name__}: {message}"
            )
            return Outcome(
                success=False,
                task_created=True,
                task_id=created.id,
                task_url=created.url,
                slack_notified=False,
                error=message,
                state=WorkflowState.NOTIFY_FAILED,
            )
        self.logger.error(f"Lead-to-task workflow failed for lead {lead.id} at {state.value}: {message}")
        return Outcome(
            success=False,
            task_created=False,
            slack_notified=False,
            error=message,
            state=WorkflowState.FAILED,
        )


def build_workflow(cfg: Config) -> LeadToTaskWorkflow:
    return LeadToTaskWorkflow(
        task_store=ClickUpTaskClient(cfg),
        messenger=SlackMessenger(cfg),
        directory=ConfigDirectory(cfg),
        log_level=cfg.log_level,
    )
