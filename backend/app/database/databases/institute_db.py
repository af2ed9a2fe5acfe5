"""
Institute database configuration.
Stores institutes and the marketing, media and group data around them.

Structure:
- Institutes: institute documents, with nested arrays (courses, batches, ...)
- AudioClips: uploaded audio clip metadata
- FormSubmissions: enquiry / contact form submissions
- MarketingCampaigns: campaign definitions
- MarketingData: campaign data points
- Groups: groups with a required name and category
- StudentGroups: student groupings
"""

DB_NAME = "Institutelist"


class Collections:
    """Collection names in the institute database."""
    INSTITUTES = "Institutes"
    AUDIO_CLIPS = "AudioClips"
    FORM_SUBMISSIONS = "FormSubmissions"
    MARKETING_CAMPAIGNS = "MarketingCampaigns"
    MARKETING_DATA = "MarketingData"
    GROUPS = "Groups"
    STUDENT_GROUPS = "StudentGroups"


class Resources:
    """Logical resource names, as they appear in URL paths."""
    INSTITUTES = "institutes"
    AUDIO_CLIPS = "audioclips"
    FORM_SUBMISSIONS = "formSubmissions"
    MARKETING_CAMPAIGNS = "marketingCampaigns"
    MARKETING_DATA = "marketingData"
    GROUPS = "groups"
    STUDENT_GROUPS = "studentGroups"


# Logical resource name -> backing collection name
RESOURCE_COLLECTIONS = {
    Resources.INSTITUTES: Collections.INSTITUTES,
    Resources.AUDIO_CLIPS: Collections.AUDIO_CLIPS,
    Resources.FORM_SUBMISSIONS: Collections.FORM_SUBMISSIONS,
    Resources.MARKETING_CAMPAIGNS: Collections.MARKETING_CAMPAIGNS,
    Resources.MARKETING_DATA: Collections.MARKETING_DATA,
    Resources.GROUPS: Collections.GROUPS,
    Resources.STUDENT_GROUPS: Collections.STUDENT_GROUPS,
}


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Institutes and their marketing, media and group data",
    "resources": RESOURCE_COLLECTIONS,
}
