from datetime import datetime
from functools import lru_cache
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from .config import Config
from .logger import get_logger
from .samples import sample_leads
from .webhooks import GHLLeadWebhook, transform_contact_to_lead
from .workflow import LeadToTaskWorkflow, build_workflow

app = FastAPI(title="Practice Lead Flow")
cfg = Config()
logger = get_logger("app", cfg.log_level)


@lru_cache(maxsize=1)
def get_workflow() -> LeadToTaskWorkflow:
    return build_workflow(cfg)


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "integrations": {
            "clickup": bool(cfg.clickup_api_token),
            "slack": bool(cfg.slack_bot_token),
        },
        "missing_config": cfg.missing(),
        "optional_config_unset": cfg.missing_optional(),
    }


@app.post("/webhooks/ghl-lead-action")
async def ghl_lead_action(payload: GHLLeadWebhook, workflow: LeadToTaskWorkflow = Depends(get_workflow)):
    lead = transform_contact_to_lead(payload)
    logger.info(f"Lead {lead.id}: tier {lead.tier}, stage {lead.stage.value}, temperature {lead.temperature.value}")
    outcome = await workflow.process_lead(lead)

    if outcome.success and outcome.task_created:
        return {
            "success": True,
            "message": "Lead processed and task created",
            "taskId": outcome.task_id,
            "taskUrl": outcome.task_url,
            "slackNotified": outcome.slack_notified,
        }
    if outcome.success:
        return {
            "success": True,
            "message": "Lead received but not ready for task creation",
            "reason": outcome.error,
        }
    logger.error(f"Error processing lead {lead.id}: {outcome.error}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": outcome.error,
            "taskCreated": outcome.task_created,
            "taskId": outcome.task_id,
        },
    )


@app.post("/test-workflow")
async def test_workflow(workflow: LeadToTaskWorkflow = Depends(get_workflow)):
    lead = sample_leads()[0]
    outcome = await workflow.process_lead(lead)
    status_code = 200 if outcome.success else 500
    return JSONResponse(
        status_code=status_code,
        content={
            "success": outcome.success,
            "result": outcome.as_dict(),
            "testLead": {"name": lead.display_name, "tier": lead.tier, "condition": lead.condition},
        },
    )
