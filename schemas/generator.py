"""Resume and cover letter generation schemas."""

from enum import StrEnum

from pydantic import Field

from .base import BaseSchema, DateLike, EmailAddress, Integer, JsonObject, StringList, Text


class GenerationType(StrEnum):
    """What to generate."""

    RESUME = "resume"
    COVER_LETTER = "coverLetter"
    BOTH = "both"


class GenerationStepStatus(StrEnum):
    """Status of one generation step."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


class TokenUsage(BaseSchema):
    """Token counts for one AI call."""

    prompt_tokens: Integer = Field(..., alias="promptTokens")
    completion_tokens: Integer = Field(..., alias="completionTokens")
    total_tokens: Integer = Field(..., alias="totalTokens")


class PersonalInfo(BaseSchema):
    """Contact details printed on generated documents."""

    name: Text
    email: EmailAddress
    phone: Text | None = None
    location: Text | None = None
    website: Text | None = None
    github: Text | None = None
    linkedin: Text | None = None
    avatar: Text | None = None
    logo: Text | None = None
    accent_color: Text | None = Field(None, alias="accentColor")


class JobInfo(BaseSchema):
    """Target job for tailored generation."""

    role: Text
    company: Text
    company_website: Text | None = Field(None, alias="companyWebsite")
    job_description_url: Text | None = Field(None, alias="jobDescriptionUrl")
    job_description_text: Text | None = Field(None, alias="jobDescriptionText")


class StepError(BaseSchema):
    """Failure recorded on a generation step."""

    message: Text
    code: Text | None = None


class GenerationStep(BaseSchema):
    """Progress record for one stage of a generation request."""

    id: Text
    name: Text
    description: Text
    status: GenerationStepStatus
    started_at: DateLike | None = Field(None, alias="startedAt")
    completed_at: DateLike | None = Field(None, alias="completedAt")
    duration: Integer | None = Field(None, description="Milliseconds")
    result: JsonObject | None = None
    error: StepError | None = None


class GenerationPreferences(BaseSchema):
    """Caller hints for generation."""

    style: Text | None = None
    emphasize: StringList | None = None


class GenerateDocumentsRequest(BaseSchema):
    """Request payload from the frontend to start a generation."""

    generate_type: GenerationType = Field(..., alias="generateType")
    provider: Text | None = None
    job: JobInfo
    preferences: GenerationPreferences | None = None
