from typing import Callable, Iterable, List, Tuple
from .models import Lead, LeadSource, LeadStage, LeadTemperature


def _has_contact(lead: Lead) -> bool:
    return bool(lead.phone and lead.email)


def _has_identity(lead: Lead) -> bool:
    return bool(lead.first_name and lead.last_name) and _has_contact(lead)


def _is_full_intake(lead: Lead) -> bool:
    return (
        _has_identity(lead)
        and bool(lead.specific_condition)
        and (lead.is_pregnant is not None or lead.birth_date is not None)
    )


def _is_named_with_condition(lead: Lead) -> bool:
    return _has_identity(lead) and bool(lead.condition)


# Checked top-down, first match wins. Anything that matches nothing is tier 1.
TIER_RULES: List[Tuple[Callable[[Lead], bool], int]] = [
    (_is_full_intake, 4),
    (_is_named_with_condition, 3),
    (_has_contact, 2),
]
DEFAULT_TIER = 1


def calculate_lead_tier(lead: Lead) -> int:
    for predicate, tier in TIER_RULES:
        if predicate(lead):
            return tier
    return DEFAULT_TIER


def calculate_temperature(emails_opened: int, emails_clicked: int, sms_replied: bool) -> LeadTemperature:
    if emails_clicked >= 2 or sms_replied:
        return LeadTemperature.HOT
    if emails_opened >= 2 or emails_clicked >= 1:
        return LeadTemperature.WARM
    return LeadTemperature.COLD


STAGE_TAGS: List[Tuple[Tuple[str, ...], LeadStage]] = [
    (("converted", "patient"), LeadStage.CONVERTED),
    (("scheduled",), LeadStage.SCHEDULED),
    (("action-ready", "action ready"), LeadStage.ACTION_READY),
    (("engaged",), LeadStage.ENGAGED),
    (("contacted",), LeadStage.CONTACTED),
    (("lost", "not interested"), LeadStage.LOST),
]


def determine_stage(tags: Iterable[str]) -> LeadStage:
    tag_set = {t.strip().lower() for t in tags}
    for names, stage in STAGE_TAGS:
        if tag_set.intersection(names):
            return stage
    return LeadStage.NEW


SOURCE_KEYWORDS: List[Tuple[str, LeadSource]] = [
    ("facebook", LeadSource.FACEBOOK_AD),
    ("instagram", LeadSource.INSTAGRAM_DM),
    ("website", LeadSource.WEBSITE_FORM),
    ("pdf", LeadSource.PDF_DOWNLOAD),
    ("referral", LeadSource.REFERRAL),
    ("walk", LeadSource.WALK_IN),
    ("event", LeadSource.EVENT),
]


def parse_source(raw: str) -> LeadSource:
    normalized = "-".join((raw or "").lower().split())
    for keyword, source in SOURCE_KEYWORDS:
        if keyword in normalized:
            return source
    return LeadSource.MANUAL_ENTRY
