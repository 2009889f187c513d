"""Entity guards and boundary parsers.

A guard takes a value of unknown provenance (a document read from the
store, a parsed JSON body) and answers whether it conforms to a schema.
Guards never raise: anything malformed, including non-objects, is False.
A True answer narrows the value to a mapping.

The matching ``parse_*`` helpers do the same check but return the frozen
model, with every date-like field normalized to an aware UTC datetime, or
raise SchemaValidationError listing what was wrong.

Fields intentionally left unchecked beyond "is an object":
``QueueItem.scraped_data``, ``QueueItem.pipeline_state``,
``JobMatch.resume_intake_data`` and ``GenerationStep.result``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard

from guards.validation import SchemaCheck
from schemas.config import AISettings, QueueSettings, StopList
from schemas.content_item import (
    CONTENT_ITEM_MODELS,
    AccomplishmentItem,
    CompanyItem,
    ContentItem,
    ContentItemType,
    EducationItem,
    ProfileSectionItem,
    ProjectItem,
    SkillGroupItem,
)
from schemas.generator import (
    GenerateDocumentsRequest,
    GenerationStep,
    JobInfo,
    PersonalInfo,
    TokenUsage,
)
from schemas.job_match import JobMatch
from schemas.queue import (
    QueueItem,
    QueueStats,
    ScrapeConfig,
    StopListCheckResult,
    SubmitJobRequest,
    SubmitJobResponse,
    SubmitScrapeRequest,
    SubmitScrapeResponse,
)

Document = Mapping[str, Any]

_SCRAPE_CONFIG = SchemaCheck[ScrapeConfig]("ScrapeConfig", ScrapeConfig)
_QUEUE_ITEM = SchemaCheck[QueueItem]("QueueItem", QueueItem)
_QUEUE_STATS = SchemaCheck[QueueStats]("QueueStats", QueueStats)
_STOP_LIST_CHECK = SchemaCheck[StopListCheckResult]("StopListCheckResult", StopListCheckResult)
_SUBMIT_JOB_REQUEST = SchemaCheck[SubmitJobRequest]("SubmitJobRequest", SubmitJobRequest)
_SUBMIT_JOB_RESPONSE = SchemaCheck[SubmitJobResponse]("SubmitJobResponse", SubmitJobResponse)
_SUBMIT_SCRAPE_REQUEST = SchemaCheck[SubmitScrapeRequest](
    "SubmitScrapeRequest", SubmitScrapeRequest
)
_SUBMIT_SCRAPE_RESPONSE = SchemaCheck[SubmitScrapeResponse](
    "SubmitScrapeResponse", SubmitScrapeResponse
)
_JOB_MATCH = SchemaCheck[JobMatch]("JobMatch", JobMatch)
_STOP_LIST = SchemaCheck[StopList]("StopList", StopList)
_QUEUE_SETTINGS = SchemaCheck[QueueSettings]("QueueSettings", QueueSettings)
_AI_SETTINGS = SchemaCheck[AISettings]("AISettings", AISettings)

# One check per variant, keyed like the discriminator.
_CONTENT_VARIANTS: dict[ContentItemType, SchemaCheck[Any]] = {
    item_type: SchemaCheck(model.__name__, model)
    for item_type, model in CONTENT_ITEM_MODELS.items()
}
_CONTENT_ITEM = SchemaCheck[Any]("ContentItem", ContentItem)

_TOKEN_USAGE = SchemaCheck[TokenUsage]("TokenUsage", TokenUsage)
_PERSONAL_INFO = SchemaCheck[PersonalInfo]("PersonalInfo", PersonalInfo)
_JOB_INFO = SchemaCheck[JobInfo]("JobInfo", JobInfo)
_GENERATION_STEP = SchemaCheck[GenerationStep]("GenerationStep", GenerationStep)
_GENERATE_DOCUMENTS_REQUEST = SchemaCheck[GenerateDocumentsRequest](
    "GenerateDocumentsRequest", GenerateDocumentsRequest
)


# --- Queue ---


def is_scrape_config(value: Any) -> TypeGuard[Document]:
    return _SCRAPE_CONFIG.conforms(value)


def is_queue_item(value: Any) -> TypeGuard[Document]:
    """True for a job-queue document.

    Requires type/status/source from their enums, string url and
    company_name, present-but-nullable company_id and submitted_by, integer
    retry counters and date-like created_at/updated_at. A present
    scrape_config is checked as a ScrapeConfig.
    """
    return _QUEUE_ITEM.conforms(value)


def parse_queue_item(value: Any) -> QueueItem:
    return _QUEUE_ITEM.parse(value)


def is_queue_stats(value: Any) -> TypeGuard[Document]:
    return _QUEUE_STATS.conforms(value)


def is_stop_list_check_result(value: Any) -> TypeGuard[Document]:
    return _STOP_LIST_CHECK.conforms(value)


def is_submit_job_request(value: Any) -> TypeGuard[Document]:
    """True for a job submission body whose url is an http(s) URL."""
    return _SUBMIT_JOB_REQUEST.conforms(value)


def is_submit_job_response(value: Any) -> TypeGuard[Document]:
    return _SUBMIT_JOB_RESPONSE.conforms(value)


def is_submit_scrape_request(value: Any) -> TypeGuard[Document]:
    return _SUBMIT_SCRAPE_REQUEST.conforms(value)


def is_submit_scrape_response(value: Any) -> TypeGuard[Document]:
    return _SUBMIT_SCRAPE_RESPONSE.conforms(value)


# --- Job matches ---


def is_job_match(value: Any) -> TypeGuard[Document]:
    """True for a job-matches document.

    Every rationale list must be present and hold only strings (empty is
    fine); application_priority must be exactly High, Medium or Low.
    """
    return _JOB_MATCH.conforms(value)


def parse_job_match(value: Any) -> JobMatch:
    return _JOB_MATCH.parse(value)


# --- Config documents ---


def is_stop_list(value: Any) -> TypeGuard[Document]:
    return _STOP_LIST.conforms(value)


def parse_stop_list(value: Any) -> StopList:
    return _STOP_LIST.parse(value)


def is_queue_settings(value: Any) -> TypeGuard[Document]:
    return _QUEUE_SETTINGS.conforms(value)


def parse_queue_settings(value: Any) -> QueueSettings:
    return _QUEUE_SETTINGS.parse(value)


def is_ai_settings(value: Any) -> TypeGuard[Document]:
    return _AI_SETTINGS.conforms(value)


def parse_ai_settings(value: Any) -> AISettings:
    return _AI_SETTINGS.parse(value)


# --- Content items ---


def is_company_item(value: Any) -> TypeGuard[Document]:
    return _CONTENT_VARIANTS[ContentItemType.COMPANY].conforms(value)


def is_project_item(value: Any) -> TypeGuard[Document]:
    return _CONTENT_VARIANTS[ContentItemType.PROJECT].conforms(value)


def is_skill_group_item(value: Any) -> TypeGuard[Document]:
    return _CONTENT_VARIANTS[ContentItemType.SKILL_GROUP].conforms(value)


def is_education_item(value: Any) -> TypeGuard[Document]:
    return _CONTENT_VARIANTS[ContentItemType.EDUCATION].conforms(value)


def is_profile_section_item(value: Any) -> TypeGuard[Document]:
    return _CONTENT_VARIANTS[ContentItemType.PROFILE_SECTION].conforms(value)


def is_accomplishment_item(value: Any) -> TypeGuard[Document]:
    return _CONTENT_VARIANTS[ContentItemType.ACCOMPLISHMENT].conforms(value)


def is_content_item(value: Any) -> TypeGuard[Document]:
    """True if value is exactly one of the six content item variants.

    Dispatches once on ``type`` and checks only that variant's fields, so
    a "project" carrying education fields is rejected, as is any
    discriminator outside ContentItemType.
    """
    return _CONTENT_ITEM.conforms(value)


def parse_content_item(
    value: Any,
) -> (
    CompanyItem
    | ProjectItem
    | SkillGroupItem
    | EducationItem
    | ProfileSectionItem
    | AccomplishmentItem
):
    return _CONTENT_ITEM.parse(value)


# --- Generator payloads ---


def is_token_usage(value: Any) -> TypeGuard[Document]:
    return _TOKEN_USAGE.conforms(value)


def is_personal_info(value: Any) -> TypeGuard[Document]:
    """True for personal info with a name and a local@domain.tld email."""
    return _PERSONAL_INFO.conforms(value)


def is_job_info(value: Any) -> TypeGuard[Document]:
    return _JOB_INFO.conforms(value)


def is_generation_step(value: Any) -> TypeGuard[Document]:
    return _GENERATION_STEP.conforms(value)


def is_generate_documents_request(value: Any) -> TypeGuard[Document]:
    return _GENERATE_DOCUMENTS_REQUEST.conforms(value)
