"""Job match schemas (job-matches collection).

Written by the queue worker after AI analysis, read by the frontend.
"""

from enum import StrEnum

from pydantic import Field

from .base import BaseSchema, DateLike, JsonObject, Number, StringList, Text


class MatchPriority(StrEnum):
    """How urgently the candidate should apply."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class JobMatch(BaseSchema):
    """AI evaluation of how well a job fits the candidate."""

    id: Text | None = None
    url: Text
    company_name: Text
    company_id: Text | None = None
    job_title: Text
    location: Text | None = None
    salary_range: Text | None = None
    job_description: Text

    # Scoring
    match_score: Number = Field(..., description="Overall fit score")
    experience_match: Number = Field(..., description="Experience fit score")
    application_priority: MatchPriority

    # Rationale (present even when empty)
    matched_skills: StringList
    missing_skills: StringList
    match_reasons: StringList
    key_strengths: StringList
    potential_concerns: StringList
    customization_recommendations: StringList
    requirements: StringList

    # Free-form intake data for resume generation; contents are not checked
    resume_intake_data: JsonObject | None = None

    analyzed_at: DateLike
    created_at: DateLike
    submitted_by: Text | None = Field(..., description="User UID, null for automated scans")
    queue_item_id: Text = Field(..., description="Originating queue item")
