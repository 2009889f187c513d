"""Content item schemas (content-items collection).

Content items are the building blocks composed into generated resumes and
cover letters. Six variants share a base shape and are told apart by the
``type`` field. Keys are camelCase in the store; Python names are snake_case
with the stored names as aliases.
"""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field

from .base import BaseSchema, DateLike, Integer, StringList, Text


class ContentItemType(StrEnum):
    """Content item discriminator values."""

    COMPANY = "company"
    PROJECT = "project"
    SKILL_GROUP = "skill-group"
    EDUCATION = "education"
    PROFILE_SECTION = "profile-section"
    ACCOMPLISHMENT = "accomplishment"


class ContentItemVisibility(StrEnum):
    """Whether an item is shown in generated documents."""

    PUBLISHED = "published"
    DRAFT = "draft"
    ARCHIVED = "archived"


class ContentItemBase(BaseSchema):
    """Fields every content item carries."""

    id: Text
    user_id: Text = Field(..., alias="userId")
    parent_id: Text | None = Field(..., alias="parentId")
    order: Integer = Field(..., description="Sort position among siblings")
    visibility: ContentItemVisibility | None = None
    tags: StringList | None = None

    created_at: DateLike = Field(..., alias="createdAt")
    updated_at: DateLike = Field(..., alias="updatedAt")
    created_by: Text = Field(..., alias="createdBy")
    updated_by: Text = Field(..., alias="updatedBy")


class CompanyItem(ContentItemBase):
    """An employer and the role held there."""

    type: Literal["company"]
    company: Text
    role: Text | None = None
    location: Text | None = None
    website: Text | None = None
    start_date: Text | None = Field(None, alias="startDate", description="YYYY-MM")
    end_date: Text | None = Field(None, alias="endDate", description="YYYY-MM, null if current")
    summary: Text | None = None
    accomplishments: StringList | None = None
    technologies: StringList | None = None
    notes: Text | None = None


class ProjectItem(ContentItemBase):
    """A project, standalone or nested under a company."""

    type: Literal["project"]
    name: Text
    description: Text | None = None
    role: Text | None = None
    start_date: Text | None = Field(None, alias="startDate")
    end_date: Text | None = Field(None, alias="endDate")
    accomplishments: StringList | None = None
    technologies: StringList | None = None
    links: StringList | None = None


class SkillGroupItem(ContentItemBase):
    """A named category of skills."""

    type: Literal["skill-group"]
    category: Text
    skills: StringList


class EducationItem(ContentItemBase):
    """A degree, certificate or course."""

    type: Literal["education"]
    institution: Text
    degree: Text | None = None
    field: Text | None = None
    location: Text | None = None
    start_date: Text | None = Field(None, alias="startDate")
    end_date: Text | None = Field(None, alias="endDate")
    honors: Text | None = None
    description: Text | None = None


class ProfileSectionItem(ContentItemBase):
    """Free-text profile section (summary, about, ...)."""

    type: Literal["profile-section"]
    heading: Text
    content: Text


class AccomplishmentItem(ContentItemBase):
    """A single achievement."""

    type: Literal["accomplishment"]
    description: Text
    context: Text | None = None
    impact: Text | None = None
    technologies: StringList | None = None


ContentItem = Annotated[
    CompanyItem
    | ProjectItem
    | SkillGroupItem
    | EducationItem
    | ProfileSectionItem
    | AccomplishmentItem,
    Field(discriminator="type"),
]

CONTENT_ITEM_MODELS: dict[ContentItemType, type[ContentItemBase]] = {
    ContentItemType.COMPANY: CompanyItem,
    ContentItemType.PROJECT: ProjectItem,
    ContentItemType.SKILL_GROUP: SkillGroupItem,
    ContentItemType.EDUCATION: EducationItem,
    ContentItemType.PROFILE_SECTION: ProfileSectionItem,
    ContentItemType.ACCOMPLISHMENT: AccomplishmentItem,
}
