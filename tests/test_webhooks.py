from datetime import date
from src.leadflow.models import LeadSource, LeadStage, LeadTemperature
from src.leadflow.webhooks import GHLLeadWebhook, transform_contact_to_lead


def _payload(**custom_fields):
    return {
        "type": "ContactTagUpdate",
        "contactId": "ghl-42",
        "contact": {
            "id": "ghl-42",
            "firstName": "Sarah",
            "lastName": "Johnson",
            "email": "sarah@example.com",
            "phone": "+15551234567",
            "tags": ["Action Ready", "facebook"],
            "customFields": custom_fields,
        },
        "timestamp": "2026-03-10T10:00:00Z",
    }


def test_transform_full_intake_contact():
    payload = GHLLeadWebhook.model_validate(
        _payload(
            specific_condition="Pregnancy back pain",
            is_pregnant=True,
            lead_source="Facebook Ad",
            emails_opened=4,
            emails_clicked=2,
            last_engagement="2026-03-09T15:00:00Z",
        )
    )
    lead = transform_contact_to_lead(payload)

    assert lead.id == "ghl-42"
    assert lead.ghl_contact_id == "ghl-42"
    assert lead.tier == 4
    assert lead.stage == LeadStage.ACTION_READY
    assert lead.temperature == LeadTemperature.HOT
    assert lead.source == LeadSource.FACEBOOK_AD
    assert lead.emails_opened == 4
    assert lead.tags == ["Action Ready", "facebook"]


def test_transform_sparse_contact_defaults():
    payload = GHLLeadWebhook.model_validate(
        {"contact": {"id": "c1", "customFields": {"socialHandle": "@sarah", "birth_date": "1990-05-01"}}}
    )
    lead = transform_contact_to_lead(payload)

    assert lead.tier == 1
    assert lead.social_handle == "@sarah"
    assert lead.birth_date == date(1990, 5, 1)
    assert lead.stage == LeadStage.NEW
    assert lead.temperature == LeadTemperature.COLD
    assert lead.source == LeadSource.MANUAL_ENTRY
    assert lead.emails_opened == 0


def test_blank_custom_fields_and_null_lists_are_treated_as_missing():
    payload = GHLLeadWebhook.model_validate(
        {
            "contact": {
                "id": "c2",
                "tags": None,
                "customFields": {"birth_date": "", "last_engagement": " ", "is_pregnant": "", "emails_opened": ""},
            }
        }
    )
    lead = transform_contact_to_lead(payload)

    assert lead.tags == []
    assert lead.birth_date is None
    assert lead.last_engagement is None
    assert lead.is_pregnant is None
    assert lead.emails_opened == 0


def test_null_custom_fields_defaults():
    payload = GHLLeadWebhook.model_validate({"contact": {"id": "c3", "customFields": None}})
    assert transform_contact_to_lead(payload).condition is None
