import logging
import pytest
from src.leadflow.config import Config
from src.leadflow.directory import ConfigDirectory
from src.leadflow.errors import ConfigError
from src.leadflow.logger import PHIRedactionFilter
from src.leadflow.team import Team, TeamMember


def _cfg(**overrides) -> Config:
    values = dict(
        clickup_api_token="pk",
        clickup_tier4_list_id="L4",
        clickup_tier3_list_id="L3",
        clickup_tier2_list_id="L2",
        clickup_tier1_list_id="",
        slack_bot_token="xoxb",
        slack_front_desk_channel_id="C1",
        front_desk_clickup_ids="101, 102,",
        front_desk_slack_ids="U1",
    )
    values.update(overrides)
    return Config(**values)


def test_missing_and_validate():
    cfg = _cfg()
    assert cfg.missing() == ["clickup_tier1_list_id"]
    with pytest.raises(ValueError, match="clickup_tier1_list_id"):
        cfg.validate()
    _cfg(clickup_tier1_list_id="L1").validate()


def test_team_from_config_pairs_ids():
    team = Team.from_config(_cfg())
    assert team.front_desk_clickup_ids() == ["101", "102"]
    assert team.front_desk_slack_ids() == ["U1"]
    assert team.members[1] == TeamMember("Front Desk 2", clickup_id="102", slack_id=None)


def test_team_skips_members_without_ids():
    team = Team([TeamMember("Lou Ann", clickup_id="1"), TeamMember("Tricia", slack_id="U9")])
    assert team.front_desk_clickup_ids() == ["1"]
    assert team.front_desk_slack_ids() == ["U9"]


def test_empty_channel_is_optional():
    cfg = _cfg(clickup_tier1_list_id="L1", slack_front_desk_channel_id="", front_desk_slack_ids="")
    cfg.validate()
    assert cfg.missing() == []
    assert cfg.missing_optional() == ["slack_front_desk_channel_id", "front_desk_slack_ids"]


@pytest.mark.asyncio
async def test_config_directory():
    directory = ConfigDirectory(_cfg())
    assert await directory.list_id_for_tier(4) == "L4"
    assert await directory.assignee_ids() == ["101", "102"]
    assert await directory.mention_ids() == ["U1"]
    assert await directory.notification_channel_id() == "C1"
    with pytest.raises(ConfigError, match="tier 1"):
        await directory.list_id_for_tier(1)
    with pytest.raises(ConfigError, match="tier 5"):
        await directory.list_id_for_tier(5)


def test_phi_redaction_filter():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "Lead %s at %s", ("sarah@example.com", "+1 555 123 4567"), None)
    assert PHIRedactionFilter().filter(record) is True
    assert record.getMessage() == "Lead ***REDACTED*** at ***REDACTED***"


def test_phi_redaction_leaves_plain_messages():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "Task %s created", ("86abc",), None)
    PHIRedactionFilter().filter(record)
    assert record.getMessage() == "Task 86abc created"


def test_phi_redaction_tolerates_bad_format_args():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "Lead %s and %s", ("only-one",), None)
    assert PHIRedactionFilter().filter(record) is True
    assert record.msg == "Lead %s and %s"
