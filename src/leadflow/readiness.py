from typing import Callable, Dict
from .models import Lead, LeadStage


def _tier4_ready(lead: Lead) -> bool:
    # Full intake: any engagement at all is enough.
    return lead.stage in (LeadStage.ENGAGED, LeadStage.ACTION_READY)


def _tier3_ready(lead: Lead) -> bool:
    return lead.emails_opened >= 2 and lead.emails_clicked >= 1


def _tier2_ready(lead: Lead) -> bool:
    return lead.emails_opened >= 3 or lead.emails_clicked >= 1


def _tier1_ready(lead: Lead) -> bool:
    # No usable telemetry; the CRM flags the stage after unanswered DMs.
    return lead.stage == LeadStage.ACTION_READY


READINESS_RULES: Dict[int, Callable[[Lead], bool]] = {
    4: _tier4_ready,
    3: _tier3_ready,
    2: _tier2_ready,
    1: _tier1_ready,
}


def is_action_ready(lead: Lead) -> bool:
    """Return True when the lead should get a follow-up task now.

    Unknown tiers are never ready.
    """
    rule = READINESS_RULES.get(lead.tier)
    if rule is None:
        return False
    return rule(lead)
