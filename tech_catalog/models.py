from pydantic import BaseModel, Field

from tech_catalog.taxonomy import SkillType


# ---------------------------------------------------------------------------
# Parsed source records
# ---------------------------------------------------------------------------

class ParsedLanguage(BaseModel):
    """A programming language read from the Linguist dataset."""

    slug: str
    name_en: str
    name_local: str
    color: str | None = None
    website: str | None = None
    aliases: list[str] = Field(default_factory=list)
    extensions: list[str] = Field(default_factory=list, description="File extensions, e.g. '.py'")
    paradigms: list[str] = Field(default_factory=list)
    typing: str | None = Field(None, description="'static', 'dynamic' or null when unknown")
    popularity: int = Field(0, ge=0, description="1000 - rank for ranked languages, else 0")


class ParsedSkill(BaseModel):
    """A tech skill read from the tag-popularity API and classified."""

    slug: str
    name_en: str
    name_local: str
    type: SkillType = SkillType.OTHER
    niche_slug: str | None = None
    color: str | None = None
    icon: str | None = None
    website: str | None = None
    aliases: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    popularity: int = Field(0, ge=0, description="Source occurrence count")


# ---------------------------------------------------------------------------
# Sync bookkeeping
# ---------------------------------------------------------------------------

class UpsertCounts(BaseModel):
    inserted: int = 0
    updated: int = 0

    @property
    def total(self) -> int:
        return self.inserted + self.updated


class SyncResult(BaseModel):
    """Outcome of one sync run. Inspect errors to tell full, partial and failed runs apart."""

    languages_inserted: int = 0
    languages_updated: int = 0
    skills_inserted: int = 0
    skills_updated: int = 0
    areas_created: int = Field(0, description="Areas upserted (inserted + updated)")
    niches_created: int = Field(0, description="Niches upserted (inserted + updated)")
    errors: list[str] = Field(default_factory=list)
