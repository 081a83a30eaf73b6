from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .classification import determine_stage, parse_source
from .models import Lead


class GHLCustomFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    social_handle: Optional[str] = Field(default=None, alias="socialHandle")
    condition: Optional[str] = None
    specific_condition: Optional[str] = None
    is_pregnant: Optional[bool] = None
    birth_date: Optional[date] = None
    lead_source: Optional[str] = None
    emails_opened: Optional[int] = None
    emails_clicked: Optional[int] = None
    sms_replied: Optional[bool] = None
    last_engagement: Optional[datetime] = None

    @field_validator(
        "social_handle", "condition", "specific_condition", "is_pregnant", "birth_date",
        "lead_source", "emails_opened", "emails_clicked", "sms_replied", "last_engagement",
        mode="before",
    )
    @classmethod
    def _blank_is_missing(cls, value):
        # GHL sends "" for custom fields that were never filled in.
        if isinstance(value, str) and not value.strip():
            return None
        return value


class GHLContact(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    phone: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    custom_fields: GHLCustomFields = Field(default_factory=GHLCustomFields, alias="customFields")

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value):
        return [] if value is None else value

    @field_validator("custom_fields", mode="before")
    @classmethod
    def _null_custom_fields(cls, value):
        return {} if value is None else value


class GHLLeadWebhook(BaseModel):
    """Lead action event posted by Go High Level."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str = ""
    contact_id: Optional[str] = Field(default=None, alias="contactId")
    contact: GHLContact
    timestamp: datetime = Field(default_factory=datetime.now)


def transform_contact_to_lead(payload: GHLLeadWebhook) -> Lead:
    contact = payload.contact
    fields = contact.custom_fields
    lead = Lead(
        id=contact.id,
        ghl_contact_id=contact.id,
        first_name=contact.first_name,
        last_name=contact.last_name,
        email=contact.email,
        phone=contact.phone,
        social_handle=fields.social_handle,
        source=parse_source(fields.lead_source or ""),
        stage=determine_stage(contact.tags),
        condition=fields.condition,
        specific_condition=fields.specific_condition,
        is_pregnant=fields.is_pregnant,
        birth_date=fields.birth_date,
        emails_opened=fields.emails_opened or 0,
        emails_clicked=fields.emails_clicked or 0,
        sms_replied=bool(fields.sms_replied),
        last_engagement=fields.last_engagement,
        created_at=payload.timestamp,
        updated_at=payload.timestamp,
        tags=contact.tags,
    )
    return lead.with_derived_fields()
