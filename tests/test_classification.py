from datetime import date
import pytest
from src.leadflow.classification import calculate_lead_tier, calculate_temperature, determine_stage, parse_source
from src.leadflow.models import Lead, LeadSource, LeadStage, LeadTemperature

FULL_CONTACT = dict(first_name="Sarah", last_name="Johnson", phone="+15551234567", email="sarah@example.com")


def test_social_handle_only_is_tier_1():
    assert calculate_lead_tier(Lead(id="1", social_handle="@sarah")) == 1
    assert calculate_lead_tier(Lead(id="1")) == 1


def test_phone_and_email_is_tier_2():
    assert calculate_lead_tier(Lead(id="1", phone="+15551234567", email="a@example.com")) == 2


def test_name_contact_and_condition_is_tier_3():
    assert calculate_lead_tier(Lead(id="1", condition="Neck pain", **FULL_CONTACT)) == 3


@pytest.mark.parametrize("extra", [{"is_pregnant": True}, {"is_pregnant": False}, {"birth_date": date(1990, 5, 1)}])
def test_full_intake_is_tier_4(extra):
    lead = Lead(id="1", specific_condition="Sciatica, left leg", **FULL_CONTACT, **extra)
    assert calculate_lead_tier(lead) == 4


def test_tier_4_wins_over_tier_3():
    lead = Lead(
        id="1",
        condition="Back pain",
        specific_condition="Lower back pain after fall",
        is_pregnant=False,
        **FULL_CONTACT,
    )
    assert calculate_lead_tier(lead) == 4


def test_specific_condition_without_pregnancy_or_birth_date_is_not_tier_4():
    lead = Lead(id="1", specific_condition="Sciatica", **FULL_CONTACT)
    assert calculate_lead_tier(lead) == 2
    lead = Lead(id="1", condition="Back pain", specific_condition="Sciatica", **FULL_CONTACT)
    assert calculate_lead_tier(lead) == 3


def test_empty_strings_count_as_missing():
    assert calculate_lead_tier(Lead(id="1", phone="", email="a@example.com")) == 1


def test_with_derived_fields_recomputes_tier_and_temperature():
    lead = Lead(id="1", tier=4, phone="+15551234567", email="a@example.com", emails_clicked=2)
    derived = lead.with_derived_fields()
    assert derived.tier == 2
    assert derived.temperature == LeadTemperature.HOT
    assert lead.tier == 4


def test_temperature():
    assert calculate_temperature(0, 2, False) == LeadTemperature.HOT
    assert calculate_temperature(0, 0, True) == LeadTemperature.HOT
    assert calculate_temperature(2, 0, False) == LeadTemperature.WARM
    assert calculate_temperature(0, 1, False) == LeadTemperature.WARM
    assert calculate_temperature(1, 0, False) == LeadTemperature.COLD


def test_determine_stage_from_tags():
    assert determine_stage(["Patient", "engaged"]) == LeadStage.CONVERTED
    assert determine_stage(["Action Ready"]) == LeadStage.ACTION_READY
    assert determine_stage(["engaged", "contacted"]) == LeadStage.ENGAGED
    assert determine_stage(["not interested"]) == LeadStage.LOST
    assert determine_stage([]) == LeadStage.NEW


def test_parse_source():
    assert parse_source("Facebook Lead Ad") == LeadSource.FACEBOOK_AD
    assert parse_source("Walk In") == LeadSource.WALK_IN
    assert parse_source("free PDF guide") == LeadSource.PDF_DOWNLOAD
    assert parse_source("") == LeadSource.MANUAL_ENTRY
