from typing import List, Optional
from .config import Config
from .errors import ConfigError
from .team import Team


class ConfigDirectory:
    """TeamDirectory backed by an explicit Config and team roster."""

    def __init__(self, cfg: Config, team: Optional[Team] = None):
        self.cfg = cfg
        self.team = team if team is not None else Team.from_config(cfg)

    async def list_id_for_tier(self, tier: int) -> str:
        list_id = self.cfg.list_ids_by_tier().get(tier, "")
        if not list_id:
            raise ConfigError(f"no destination configured for tier {tier}")
        return list_id

    async def assignee_ids(self) -> List[str]:
        return self.team.front_desk_clickup_ids()

    async def mention_ids(self) -> List[str]:
        return self.team.front_desk_slack_ids()

    async def notification_channel_id(self) -> str:
        return self.cfg.slack_front_desk_channel_id
