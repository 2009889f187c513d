"""Membership guards for the closed string enumerations.

Each guard is built from the StrEnum that declares the literals, so the
declaration and the check cannot drift apart.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

from schemas.config import AIProvider
from schemas.content_item import ContentItemType, ContentItemVisibility
from schemas.job_match import MatchPriority
from schemas.queue import JobSubTask, QueueItemType, QueueSource, QueueStatus


def member_guard(enum_cls: type[StrEnum]) -> Callable[[Any], bool]:
    """Build a guard accepting exactly the string values of ``enum_cls``."""
    values = frozenset(member.value for member in enum_cls)

    def guard(value: Any) -> bool:
        return isinstance(value, str) and value in values

    guard.__name__ = f"is_{enum_cls.__name__.lower()}"
    guard.__doc__ = f"True if value is one of: {', '.join(sorted(values))}."
    return guard


is_queue_status = member_guard(QueueStatus)
is_queue_item_type = member_guard(QueueItemType)
is_job_sub_task = member_guard(JobSubTask)
is_queue_source = member_guard(QueueSource)
is_ai_provider = member_guard(AIProvider)
is_content_item_type = member_guard(ContentItemType)
is_content_item_visibility = member_guard(ContentItemVisibility)
is_match_priority = member_guard(MatchPriority)
