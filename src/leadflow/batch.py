import asyncio
from typing import Awaitable, Callable, Iterable, List, Optional
from .logger import get_logger
from .models import Lead, Outcome, WorkflowState
from .workflow import LeadToTaskWorkflow

Sleep = Callable[[float], Awaitable[None]]


class FixedIntervalGate:
    """Waits a fixed interval between items; the sleep function is swappable for tests."""

    def __init__(self, interval: float = 1.0, sleep: Optional[Sleep] = None):
        if interval < 0:
            raise ValueError("interval must be >= 0")
        self.interval = interval
        self.sleep = sleep or asyncio.sleep

    async def wait(self) -> None:
        if self.interval:
            await self.sleep(self.interval)


class BatchRunner:
    def __init__(self, workflow: LeadToTaskWorkflow, gate: Optional[FixedIntervalGate] = None, log_level: str = "INFO"):
        self.workflow = workflow
        self.gate = gate or FixedIntervalGate()
        self.logger = get_logger(self.__class__.__name__, log_level)

    async def run(self, leads: Iterable[Lead]) -> List[Outcome]:
        outcomes: List[Outcome] = []
        for index, lead in enumerate(leads):
            if index:
                await self.gate.wait()
            try:
                outcome = await self.workflow.process_lead(lead)
            except Exception as e:
                self.logger.error(f"Batch item {index} (lead {lead.id}) raised: {repr(e)}")
                outcome = Outcome(
                    success=False,
                    task_created=False,
                    error=str(e) or e.__class__.__name__,
                    state=WorkflowState.FAILED,
                )
            outcomes.append(outcome)
        created = sum(1 for o in outcomes if o.task_created)
        failed = sum(1 for o in outcomes if not o.success)
        self.logger.info(f"Batch complete: {len(outcomes)} leads, {created} tasks created, {failed} failed")
        return outcomes


async def process_multiple_leads(
    workflow: LeadToTaskWorkflow, leads: Iterable[Lead], interval: float = 1.0
) -> List[Outcome]:
    return await BatchRunner(workflow, FixedIntervalGate(interval)).run(leads)
