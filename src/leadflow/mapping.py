from .models import LeadSource, TaskPriority

PRIORITY_BY_TIER = {
    4: TaskPriority.URGENT,
    3: TaskPriority.HIGH,
    2: TaskPriority.NORMAL,
    1: TaskPriority.LOW,
}

# ClickUp priorities: 1 = urgent ... 4 = low
CLICKUP_PRIORITY_VALUES = {
    TaskPriority.URGENT: 1,
    TaskPriority.HIGH: 2,
    TaskPriority.NORMAL: 3,
    TaskPriority.LOW: 4,
}

PRIORITY_LABELS = {
    TaskPriority.URGENT: "🔴 Urgent",
    TaskPriority.HIGH: "🟠 High",
    TaskPriority.NORMAL: "🟡 Normal",
    TaskPriority.LOW: "🟢 Low",
}

DUE_LABELS_BY_TIER = {
    4: "Within 2 hours",
    3: "Today by 5pm",
    2: "Next business day",
    1: "2 days",
}

SOURCE_LABELS = {
    LeadSource.FACEBOOK_AD: "Facebook Ad",
    LeadSource.INSTAGRAM_DM: "Instagram DM",
    LeadSource.WEBSITE_FORM: "Website Form",
    LeadSource.PDF_DOWNLOAD: "PDF Download",
    LeadSource.MANUAL_ENTRY: "Manual Entry",
    LeadSource.REFERRAL: "Referral",
    LeadSource.WALK_IN: "Walk-in",
    LeadSource.EVENT: "Event",
}
