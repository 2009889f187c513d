"""
Pydantic schemas for the job finder shared data contract.

Contract-first design: these schemas define the documents and payloads
exchanged between the frontend, the API and the queue worker. Every
closed set of literals is declared once here as a StrEnum.
"""

from .api import ApiErrorDetail, ApiErrorResponse, ApiResponse, ApiSuccessResponse
from .config import AIProvider, AISettings, QueueSettings, StopList
from .content_item import (
    AccomplishmentItem,
    CompanyItem,
    ContentItem,
    ContentItemType,
    ContentItemVisibility,
    EducationItem,
    ProfileSectionItem,
    ProjectItem,
    SkillGroupItem,
)
from .generator import (
    GenerateDocumentsRequest,
    GenerationStep,
    GenerationStepStatus,
    GenerationType,
    JobInfo,
    PersonalInfo,
    TokenUsage,
)
from .job_match import JobMatch, MatchPriority
from .queue import (
    JobSubTask,
    QueueItem,
    QueueItemType,
    QueueSource,
    QueueStats,
    QueueStatus,
    ScrapeConfig,
    StopListCheckResult,
    SubmitJobRequest,
    SubmitJobResponse,
    SubmitJobStatus,
    SubmitScrapeRequest,
    SubmitScrapeResponse,
    SubmitScrapeStatus,
)

__all__ = [
    # Queue
    "QueueItem",
    "QueueItemType",
    "QueueStatus",
    "QueueSource",
    "JobSubTask",
    "ScrapeConfig",
    "QueueStats",
    "StopListCheckResult",
    "SubmitJobRequest",
    "SubmitJobResponse",
    "SubmitJobStatus",
    "SubmitScrapeRequest",
    "SubmitScrapeResponse",
    "SubmitScrapeStatus",
    # Matches
    "JobMatch",
    "MatchPriority",
    # Content items
    "ContentItem",
    "ContentItemType",
    "ContentItemVisibility",
    "CompanyItem",
    "ProjectItem",
    "SkillGroupItem",
    "EducationItem",
    "ProfileSectionItem",
    "AccomplishmentItem",
    # Config documents
    "AIProvider",
    "AISettings",
    "QueueSettings",
    "StopList",
    # API envelope
    "ApiResponse",
    "ApiSuccessResponse",
    "ApiErrorResponse",
    "ApiErrorDetail",
    # Generator
    "GenerateDocumentsRequest",
    "GenerationStep",
    "GenerationStepStatus",
    "GenerationType",
    "JobInfo",
    "PersonalInfo",
    "TokenUsage",
]
