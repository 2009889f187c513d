"""Queue item schemas (job-queue collection) and queue API payloads."""

from enum import StrEnum

from pydantic import Field

from .base import (
    BaseSchema,
    DateLike,
    Flag,
    HttpUrl,
    Integer,
    JsonObject,
    Number,
    StringList,
    Text,
)


class QueueStatus(StrEnum):
    """Queue item status lifecycle.

    pending -> processing -> success | failed | skipped | filtered

    - filtered: rejected by intake filters
    - skipped: duplicate or blocked by the stop list
    """

    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    FILTERED = "filtered"


class QueueItemType(StrEnum):
    """What a queue item asks the worker to do."""

    JOB = "job"
    COMPANY = "company"
    SCRAPE = "scrape"


class JobSubTask(StrEnum):
    """Step of the granular job pipeline.

    Job items without a sub-task are processed monolithically.
    """

    SCRAPE = "scrape"
    FILTER = "filter"
    ANALYZE = "analyze"
    SAVE = "save"


class QueueSource(StrEnum):
    """Origin of a queue submission."""

    USER_SUBMISSION = "user_submission"
    AUTOMATED_SCAN = "automated_scan"
    SCRAPER = "scraper"
    WEBHOOK = "webhook"
    EMAIL = "email"


class ScrapeConfig(BaseSchema):
    """Parameters for a scrape request.

    None means "no limit" for the numeric caps and "all sources, with
    rotation" for source_ids.
    """

    target_matches: Integer | None = Field(None, description="Stop after this many matches")
    max_sources: Integer | None = Field(None, description="Maximum sources to scrape")
    source_ids: StringList | None = Field(None, description="Specific sources to scrape")
    min_match_score: Number | None = Field(None, description="Override match threshold")


class QueueItem(BaseSchema):
    """Queue item as stored in the job-queue collection.

    ``company_id`` and ``submitted_by`` must be present but may be null.
    ``scraped_data`` and ``pipeline_state`` are free-form and only checked
    for being objects.
    """

    id: Text | None = Field(None, description="Document ID, absent until persisted")
    type: QueueItemType
    status: QueueStatus
    url: Text
    company_name: Text
    company_id: Text | None
    source: QueueSource
    submitted_by: Text | None = Field(..., description="User UID for user submissions")
    retry_count: Integer
    max_retries: Integer
    result_message: Text | None = None
    error_details: Text | None = None

    created_at: DateLike
    updated_at: DateLike
    processed_at: DateLike | None = None
    completed_at: DateLike | None = None

    scrape_config: ScrapeConfig | None = None
    scraped_data: JsonObject | None = None

    # Granular pipeline fields (job items only)
    sub_task: JobSubTask | None = None
    pipeline_state: JsonObject | None = None
    parent_item_id: Text | None = None


class QueueStats(BaseSchema):
    """Per-status queue counters."""

    pending: Integer
    processing: Integer
    success: Integer
    failed: Integer
    skipped: Integer
    filtered: Integer
    total: Integer


class StopListCheckResult(BaseSchema):
    """Outcome of checking a submission against the stop list."""

    allowed: Flag
    reason: Text | None = None


# --- API payloads ---


class SubmitJobStatus(StrEnum):
    """Outcome of a job submission."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"


class SubmitScrapeStatus(StrEnum):
    """Outcome of a scrape submission."""

    SUCCESS = "success"
    ERROR = "error"


class SubmitJobRequest(BaseSchema):
    """Job submission request body."""

    url: HttpUrl
    company_name: Text | None = Field(None, alias="companyName")
    generation_id: Text | None = Field(
        None, alias="generationId", description="Linked generation request"
    )


class SubmitJobResponse(BaseSchema):
    """Job submission response body."""

    status: SubmitJobStatus
    message: Text
    queue_item_id: Text | None = Field(None, alias="queueItemId")
    queue_item: QueueItem | None = Field(None, alias="queueItem")
    job_id: Text | None = Field(None, alias="jobId")


class SubmitScrapeRequest(BaseSchema):
    """Scrape submission request body."""

    scrape_config: ScrapeConfig | None = None


class SubmitScrapeResponse(BaseSchema):
    """Scrape submission response body."""

    status: SubmitScrapeStatus
    message: Text
    queue_item_id: Text | None = Field(None, alias="queueItemId")
    queue_item: QueueItem | None = Field(None, alias="queueItem")
