from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LeadSource(str, Enum):
    FACEBOOK_AD = "facebook-ad"
    INSTAGRAM_DM = "instagram-dm"
    WEBSITE_FORM = "website-form"
    PDF_DOWNLOAD = "pdf-download"
    MANUAL_ENTRY = "manual-entry"
    REFERRAL = "referral"
    WALK_IN = "walk-in"
    EVENT = "event"


class LeadTemperature(str, Enum):
    HOT = "hot"
    WARM = "warm"
    COLD = "cold"


class LeadStage(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    ENGAGED = "engaged"
    ACTION_READY = "action-ready"
    SCHEDULED = "scheduled"
    CONVERTED = "converted"
    LOST = "lost"


class TaskPriority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class TaskStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class WorkflowState(str, Enum):
    START = "start"
    GATE_CHECKED = "gate-checked"
    NOT_READY = "not-ready"
    LIST_RESOLVED = "list-resolved"
    TASK_BUILT = "task-built"
    TASK_CREATED = "task-created"
    NOTIFY_SKIPPED = "notify-skipped"
    NOTIFIED = "notified"
    NOTIFY_FAILED = "notify-failed"
    FAILED = "failed"


class Lead(BaseModel):
    """A prospective patient somewhere in the contact lifecycle.

    ``tier`` and ``temperature`` are derived values. They are carried on the
    record so the gate and the task builder see what the lead was classified
    with; :meth:`with_derived_fields` recomputes both from source data.
    """

    id: str
    ghl_contact_id: Optional[str] = None

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    social_handle: Optional[str] = None

    tier: int = 1
    source: LeadSource = LeadSource.MANUAL_ENTRY
    temperature: LeadTemperature = LeadTemperature.COLD
    stage: LeadStage = LeadStage.NEW

    condition: Optional[str] = None
    specific_condition: Optional[str] = None
    is_pregnant: Optional[bool] = None
    birth_date: Optional[date] = None

    emails_opened: int = 0
    emails_clicked: int = 0
    sms_replied: bool = False
    last_engagement: Optional[datetime] = None

    campaign_name: Optional[str] = None

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    converted_at: Optional[datetime] = None

    notes: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, tags: List[str]) -> List[str]:
        return list(dict.fromkeys(tags))

    @field_validator("emails_opened", "emails_clicked", mode="before")
    @classmethod
    def _none_counter_is_zero(cls, value):
        return 0 if value is None else value

    @property
    def display_name(self) -> str:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.email or self.phone or self.social_handle or "Unknown Lead"

    @property
    def condition_text(self) -> Optional[str]:
        return self.specific_condition or self.condition or None

    def with_derived_fields(self) -> "Lead":
        from .classification import calculate_lead_tier, calculate_temperature

        return self.model_copy(
            update={
                "tier": calculate_lead_tier(self),
                "temperature": calculate_temperature(
                    self.emails_opened, self.emails_clicked, self.sms_replied
                ),
            }
        )


class TaskCustomFields(BaseModel):
    lead_source: Optional[str] = None
    lead_tier: Optional[str] = None
    lead_temperature: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    condition: Optional[str] = None
    last_contact: Optional[str] = None


class Task(BaseModel):
    list_id: str
    name: str
    description: str
    priority: TaskPriority
    status: TaskStatus = TaskStatus.OPEN
    assignees: List[str] = Field(default_factory=list)
    due_date: Optional[datetime] = None
    custom_fields: TaskCustomFields = Field(default_factory=TaskCustomFields)
    tags: List[str] = Field(default_factory=list)


class CreatedTask(BaseModel):
    id: str
    name: str
    url: str


class Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    task_created: bool
    task_id: Optional[str] = None
    task_url: Optional[str] = None
    slack_notified: bool = False
    error: Optional[str] = None
    state: WorkflowState

    def as_dict(self) -> Dict:
        return self.model_dump(mode="json", exclude_none=True)
