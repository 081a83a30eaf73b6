from dataclasses import dataclass
import os
from typing import Dict, List
from dotenv import load_dotenv

load_dotenv()


def _split_ids(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


REQUIRED_KEYS = (
    "clickup_api_token",
    "clickup_tier4_list_id",
    "clickup_tier3_list_id",
    "clickup_tier2_list_id",
    "clickup_tier1_list_id",
    "slack_bot_token",
)
# An empty channel means notifications are skipped.
OPTIONAL_KEYS = ("slack_front_desk_channel_id", "front_desk_clickup_ids", "front_desk_slack_ids")


@dataclass
class Config:
    clickup_api_token: str = os.getenv("CLICKUP_API_TOKEN", "")
    clickup_tier4_list_id: str = os.getenv("CLICKUP_TIER4_LIST_ID", "")
    clickup_tier3_list_id: str = os.getenv("CLICKUP_TIER3_LIST_ID", "")
    clickup_tier2_list_id: str = os.getenv("CLICKUP_TIER2_LIST_ID", "")
    clickup_tier1_list_id: str = os.getenv("CLICKUP_TIER1_LIST_ID", "")

    slack_bot_token: str = os.getenv("SLACK_BOT_TOKEN", "")
    slack_front_desk_channel_id: str = os.getenv("SLACK_FRONT_DESK_CHANNEL_ID", "")

    front_desk_clickup_ids: str = os.getenv("FRONT_DESK_CLICKUP_IDS", "")
    front_desk_slack_ids: str = os.getenv("FRONT_DESK_SLACK_IDS", "")

    batch_interval_seconds: float = float(os.getenv("BATCH_INTERVAL_SECONDS", "1.0"))
    http_timeout_seconds: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "20"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def list_ids_by_tier(self) -> Dict[int, str]:
        return {
            4: self.clickup_tier4_list_id,
            3: self.clickup_tier3_list_id,
            2: self.clickup_tier2_list_id,
            1: self.clickup_tier1_list_id,
        }

    def clickup_assignee_ids(self) -> List[str]:
        return _split_ids(self.front_desk_clickup_ids)

    def slack_mention_ids(self) -> List[str]:
        return _split_ids(self.front_desk_slack_ids)

    def missing(self) -> List[str]:
        return [key for key in REQUIRED_KEYS if not getattr(self, key)]

    def missing_optional(self) -> List[str]:
        return [key for key in OPTIONAL_KEYS if not getattr(self, key)]

    def validate(self) -> None:
        missing = self.missing()
        if missing:
            raise ValueError(f"Missing required config values: {', '.join(missing)}")
