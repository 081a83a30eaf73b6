from datetime import datetime, timedelta
from typing import List, Optional
from .mapping import PRIORITY_BY_TIER
from .models import Lead, Task, TaskCustomFields, TaskPriority, TaskStatus

GHL_CONTACT_URL = "https://app.gohighlevel.com/contacts/{contact_id}"
END_OF_DAY_HOUR = 17
SAME_DAY_CUTOFF_HOUR = 15


def generate_task_name(lead: Lead) -> str:
    return f"Follow up with {lead.display_name} (Tier {lead.tier})"


def format_contact_date(value: datetime) -> str:
    return value.strftime("%m/%d/%Y")


def generate_task_description(lead: Lead) -> str:
    parts: List[str] = []
    if lead.phone:
        parts.append(f"📞 {lead.phone}")
    if lead.email:
        parts.append(f"📧 {lead.email}")
    if lead.social_handle:
        parts.append(f"📱 {lead.social_handle}")
    if lead.condition_text:
        parts.append(f"\n🏥 Condition: {lead.condition_text}")
    if lead.source:
        parts.append(f"\n📍 Source: {lead.source.value}")
    if lead.emails_opened or lead.emails_clicked:
        parts.append(f"\n📊 Engagement: {lead.emails_opened} opens, {lead.emails_clicked} clicks")
    if lead.last_engagement:
        parts.append(f"\n🕒 Last contact: {format_contact_date(lead.last_engagement)}")
    if lead.notes:
        parts.append(f"\n📝 Notes: {lead.notes}")
    if lead.ghl_contact_id:
        url = GHL_CONTACT_URL.format(contact_id=lead.ghl_contact_id)
        parts.append(f"\n🔗 [View in GHL]({url})")
    return "\n".join(parts)


def calculate_task_priority(tier: int) -> TaskPriority:
    return PRIORITY_BY_TIER.get(tier, TaskPriority.NORMAL)


def _at_end_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=END_OF_DAY_HOUR, minute=0, second=0, microsecond=0)


def calculate_due_date(tier: int, now: Optional[datetime] = None) -> Optional[datetime]:
    """Due date for a tier, relative to ``now``.

    Tier 4 is due in two hours, tier 3 by 5pm today (tomorrow once it is
    3pm or later), tier 2 by 5pm tomorrow and tier 1 by 5pm in two days.
    Any other tier has no due date.
    """
    now = now or datetime.now()
    if tier == 4:
        return now + timedelta(hours=2)
    if tier == 3:
        if now.hour < SAME_DAY_CUTOFF_HOUR:
            return _at_end_of_day(now)
        return _at_end_of_day(now + timedelta(days=1))
    if tier == 2:
        return _at_end_of_day(now + timedelta(days=1))
    if tier == 1:
        return _at_end_of_day(now + timedelta(days=2))
    return None


def build_task_from_lead(
    lead: Lead,
    list_id: str,
    assignees: List[str],
    now: Optional[datetime] = None,
) -> Task:
    return Task(
        list_id=list_id,
        name=generate_task_name(lead),
        description=generate_task_description(lead),
        priority=calculate_task_priority(lead.tier),
        status=TaskStatus.OPEN,
        assignees=list(assignees),
        due_date=calculate_due_date(lead.tier, now),
        custom_fields=TaskCustomFields(
            lead_source=lead.source.value,
            lead_tier=str(lead.tier),
            lead_temperature=lead.temperature.value,
            phone=lead.phone,
            email=lead.email,
            condition=lead.condition or lead.specific_condition,
            last_contact=lead.last_engagement.isoformat() if lead.last_engagement else None,
        ),
        tags=list(lead.tags),
    )
