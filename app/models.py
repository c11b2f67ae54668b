from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Taxonomy models
# ---------------------------------------------------------------------------

class TechArea(BaseModel):
    """Top-level grouping such as Development or Data."""

    id: str = Field(..., description="Document ID, e.g. tech_area:DEVELOPMENT")
    area_type: str = Field(..., description="Area enum value")
    name_en: str
    name_local: str = Field(..., description="Brazilian Portuguese display name")
    description_en: str | None = None
    description_local: str | None = None
    icon: str | None = None
    color: str | None = None
    order: int = 0


class TechNiche(BaseModel):
    """Specialization within an area, e.g. frontend or machine-learning."""

    id: str = Field(..., description="Document ID, e.g. tech_niche:frontend")
    slug: str
    area_type: str = Field(..., description="Owning area enum value")
    area_id: str | None = Field(None, description="Owning area document ID")
    name_en: str
    name_local: str
    description_en: str | None = None
    description_local: str | None = None
    icon: str | None = None
    color: str | None = None
    order: int = 0


class NicheRef(BaseModel):
    """Compact niche reference embedded in skills."""

    slug: str
    name_en: str
    name_local: str


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------

class ProgrammingLanguage(BaseModel):
    id: str = Field(..., description="Document ID, e.g. programming_language:python")
    slug: str
    name_en: str
    name_local: str
    color: str | None = Field(None, description="Hex color from Linguist")
    website: str | None = None
    aliases: list[str] = Field(default_factory=list)
    file_extensions: list[str] = Field(default_factory=list, description="File extensions like .py")
    paradigms: list[str] = Field(default_factory=list)
    typing: str | None = Field(None, description="'static', 'dynamic' or null")
    popularity: int = Field(0, description="1000 - rank for ranked languages, else 0")


class TechSkill(BaseModel):
    id: str = Field(..., description="Document ID, e.g. tech_skill:react")
    slug: str
    name_en: str
    name_local: str
    type: str = Field("OTHER", description="Skill type like FRAMEWORK, DATABASE, TOOL")
    niche: NicheRef | None = Field(None, description="Resolved niche, null when unclassified")
    color: str | None = None
    icon: str | None = None
    website: str | None = None
    aliases: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    popularity: int = Field(0, description="Stack Overflow question count")


class CatalogSearchResponse(BaseModel):
    """Combined language + skill search results."""

    languages: list[ProgrammingLanguage]
    skills: list[TechSkill]
