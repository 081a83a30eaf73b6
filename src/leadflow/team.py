from dataclasses import dataclass, field
from typing import List, Optional
from .config import Config


@dataclass
class TeamMember:
    name: str
    clickup_id: Optional[str] = None
    slack_id: Optional[str] = None


@dataclass
class Team:
    """Front desk roster used to pick task assignees and Slack mentions."""

    members: List[TeamMember] = field(default_factory=list)

    @classmethod
    def from_config(cls, cfg: Config) -> "Team":
        # Only ids are configured; pair them up positionally.
        clickup_ids = cfg.clickup_assignee_ids()
        slack_ids = cfg.slack_mention_ids()
        members = []
        for i in range(max(len(clickup_ids), len(slack_ids))):
            members.append(
                TeamMember(
                    name=f"Front Desk {i + 1}",
                    clickup_id=clickup_ids[i] if i < len(clickup_ids) else None,
                    slack_id=slack_ids[i] if i < len(slack_ids) else None,
                )
            )
        return cls(members)

    def front_desk_clickup_ids(self) -> List[str]:
        return [m.clickup_id for m in self.members if m.clickup_id]

    def front_desk_slack_ids(self) -> List[str]:
        return [m.slack_id for m in self.members if m.slack_id]
