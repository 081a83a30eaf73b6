import argparse
import asyncio
from .batch import BatchRunner, FixedIntervalGate
from .config import Config
from .logger import get_logger
from .samples import sample_leads
from .workflow import build_workflow


def main():
    parser = argparse.ArgumentParser(description="Practice lead flow CLI")
    parser.add_argument("command", choices=["serve", "validate", "demo"], help="Run the webhook API server, check configuration, or push sample leads through the workflow")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    cfg = Config()
    logger = get_logger("cli", cfg.log_level)

    if args.command == "serve":
        import uvicorn
        uvicorn.run("leadflow.app:app", host=args.host, port=args.port, reload=False)
    elif args.command == "validate":
        missing = cfg.missing()
        if missing:
            for key in missing:
                logger.error(f"Missing config value: {key}")
            logger.error("Validation failed. Fix .env and retry.")
            raise SystemExit(1)
        logger.info("Configuration complete: ClickUp lists, Slack channel and tokens are set.")
    elif args.command == "demo":
        cfg.validate()
        runner = BatchRunner(build_workflow(cfg), FixedIntervalGate(cfg.batch_interval_seconds), cfg.log_level)
        leads = sample_leads()
        outcomes = asyncio.run(runner.run(leads))
        for lead, outcome in zip(leads, outcomes):
            if outcome.task_created:
                logger.info(f"{lead.display_name} (Tier {lead.tier}): task {outcome.task_id} {outcome.task_url}, slack={outcome.slack_notified}")
            elif outcome.success:
                logger.info(f"{lead.display_name} (Tier {lead.tier}): {outcome.error}")
            else:
                logger.error(f"{lead.display_name} (Tier {lead.tier}): failed: {outcome.error}")


if __name__ == "__main__":
    main()
