"""
Tag classification against the static catalog tables.

Every lookup is two-tier: first the lowercased raw tag ("vue.js"), then its
slug ("vuejs"). A miss on both falls back to a fixed default, so the result
for a given tag never depends on anything but the tables.
"""

from typing import Mapping, NamedTuple

from tech_catalog.catalog_data import CatalogTables
from tech_catalog.taxonomy import SkillType


class Classification(NamedTuple):
    type: SkillType
    niche: str | None


UNCLASSIFIED = Classification(SkillType.OTHER, None)


def lookup(table: Mapping, tag_lower: str, slug: str):
    """Return table[tag_lower], else table[slug], else None."""
    if tag_lower in table:
        return table[tag_lower]
    if slug in table:
        return table[slug]
    return None


class SkillClassifier:
    def __init__(self, tables: CatalogTables):
        self.tables = tables

    def classify(self, tag_lower: str, slug: str) -> Classification:
        entry = lookup(self.tables.skill_categories, tag_lower, slug)
        if entry is None:
            return UNCLASSIFIED
        skill_type, niche = entry
        return Classification(SkillType(skill_type), niche)

    def color(self, tag_lower: str, slug: str) -> str | None:
        return lookup(self.tables.skill_colors, tag_lower, slug)

    def translation(self, tag_lower: str, slug: str, fallback: str) -> str:
        return lookup(self.tables.skill_translations, tag_lower, slug) or fallback

    def display_name(self, tag_lower: str, slug: str) -> str | None:
        return lookup(self.tables.skill_display_names, tag_lower, slug)

    def aliases(self, tag_lower: str, slug: str) -> list[str]:
        return list(lookup(self.tables.skill_aliases, tag_lower, slug) or ())

    def keywords(self, tag_lower: str, slug: str) -> list[str]:
        return list(lookup(self.tables.skill_keywords, tag_lower, slug) or ())
