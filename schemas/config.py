"""Worker configuration document schemas (job-finder-config collection)."""

from enum import StrEnum

from pydantic import Field

from .base import BaseSchema, DateLike, Integer, Number, StringList, Text


class AIProvider(StrEnum):
    """Supported AI providers."""

    CLAUDE = "claude"
    OPENAI = "openai"
    GEMINI = "gemini"


class ConfigDocument(BaseSchema):
    """Audit fields shared by config documents."""

    updated_at: DateLike | None = Field(None, alias="updatedAt")
    updated_by: Text | None = Field(None, alias="updatedBy", description="User email")


# --- Stop list (job-finder-config/stop-list) ---


class StopList(ConfigDocument):
    """Companies, keywords and domains the worker must never queue."""

    excluded_companies: StringList = Field(..., alias="excludedCompanies")
    excluded_keywords: StringList = Field(..., alias="excludedKeywords")
    excluded_domains: StringList = Field(..., alias="excludedDomains")


# --- Queue settings (job-finder-config/queue-settings) ---


class QueueSettings(ConfigDocument):
    """Retry and timeout parameters for queue processing."""

    max_retries: Integer = Field(..., alias="maxRetries")
    retry_delay_seconds: Integer = Field(..., alias="retryDelaySeconds")
    processing_timeout: Integer = Field(..., alias="processingTimeout")


# --- AI settings (job-finder-config/ai-settings) ---


class AISettings(ConfigDocument):
    """Provider selection and budget for AI matching."""

    provider: AIProvider
    model: Text
    min_match_score: Number = Field(..., alias="minMatchScore")
    cost_budget_daily: Number = Field(..., alias="costBudgetDaily")
