from datetime import datetime
from typing import List
from .models import Lead, LeadSource, LeadStage, LeadTemperature


def sample_leads() -> List[Lead]:
    """One lead per tier 4/3/2; the tier 2 lead is not yet ready."""
    now = datetime.now()
    stamp = now.strftime("%Y%m%d%H%M%S")
    return [
        Lead(
            id=f"test-tier4-{stamp}",
            tier=4,
            first_name="Sarah",
            last_name="Johnson",
            email="sarah.johnson@example.com",
            phone="+15551234567",
            source=LeadSource.WEBSITE_FORM,
            temperature=LeadTemperature.HOT,
            stage=LeadStage.ACTION_READY,
            condition="Severe back pain - can barely walk",
            emails_opened=5,
            emails_clicked=3,
        ),
        Lead(
            id=f"test-tier3-{stamp}",
            tier=3,
            first_name="Michael",
            last_name="Rodriguez",
            email="michael.r@example.com",
            phone="+15559876543",
            source=LeadSource.REFERRAL,
            temperature=LeadTemperature.WARM,
            stage=LeadStage.ENGAGED,
            condition="Neck pain and headaches",
            emails_opened=2,
            emails_clicked=1,
        ),
        Lead(
            id=f"test-tier2-{stamp}",
            tier=2,
            first_name="Jessica",
            last_name="Chen",
            email="jchen@example.com",
            phone="+15554567890",
            source=LeadSource.REFERRAL,
            temperature=LeadTemperature.WARM,
            stage=LeadStage.ENGAGED,
            condition="General wellness check",
            emails_opened=1,
            emails_clicked=0,
        ),
    ]
