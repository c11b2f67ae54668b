"""
Catalog persistence in Cloudant.

Every entity gets a deterministic _id from its natural key
(e.g. tech_skill:nodejs), so re-running a sync overwrites instead of
duplicating. Upserts are batched: one _all_docs lookup for the existing
revisions, then _bulk_docs writes in chunks.
"""

import logging
from datetime import datetime, timezone

from ibm_cloud_sdk_core import ApiException

from tech_catalog.errors import CatalogStoreError
from tech_catalog.models import ParsedLanguage, ParsedSkill, UpsertCounts
from tech_catalog.slugs import fold_accents, unique

logger = logging.getLogger(__name__)

BULK_CHUNK_SIZE = 500

AREA_DOC_TYPE = "tech_area"
NICHE_DOC_TYPE = "tech_niche"
LANGUAGE_DOC_TYPE = "programming_language"
SKILL_DOC_TYPE = "tech_skill"


def area_doc_id(area_type: str) -> str:
    return f"{AREA_DOC_TYPE}:{area_type}"


def niche_doc_id(slug: str) -> str:
    return f"{NICHE_DOC_TYPE}:{slug}"


def language_doc_id(slug: str) -> str:
    return f"{LANGUAGE_DOC_TYPE}:{slug}"


def skill_doc_id(slug: str) -> str:
    return f"{SKILL_DOC_TYPE}:{slug}"


def _enum_value(value) -> str:
    return getattr(value, "value", value)


def _chunks(items: list, size: int):
    for i in range(0, len(items), size):
        yield items[i:i + size]


def search_names(*names: str) -> list[str]:
    """Accent-folded lowercase names stored for accent-insensitive search."""
    return unique(fold_accents(n) for n in names if n)


class CatalogStore:
    def __init__(self, client, db_name: str):
        self.client = client
        self.db_name = db_name

    # ------------------------------------------------------------------
    # Low-level batch helpers
    # ------------------------------------------------------------------

    def fetch_docs(self, doc_ids: list[str]) -> dict[str, dict]:
        """Return {_id: doc} for the ids that exist (deleted docs count as missing)."""
        found: dict[str, dict] = {}
        ids = unique(doc_ids)
        for chunk in _chunks(ids, BULK_CHUNK_SIZE):
            try:
                result = self.client.post_all_docs(
                    db=self.db_name, keys=chunk, include_docs=True,
                ).get_result()
            except ApiException as e:
                raise CatalogStoreError(f"Lookup of {len(chunk)} documents failed: {e}") from e
            for row in result.get("rows", []):
                doc = row.get("doc")
                if row.get("error") or not doc or (row.get("value") or {}).get("deleted"):
                    continue
                found[row["id"]] = doc
        return found

    def _bulk_write(self, docs: list[dict]) -> None:
        for chunk in _chunks(docs, BULK_CHUNK_SIZE):
            try:
                results = self.client.post_bulk_docs(db=self.db_name, bulk_docs={"docs": chunk}).get_result()
            except ApiException as e:
                raise CatalogStoreError(f"Bulk write of {len(chunk)} documents failed: {e}") from e
            failed = [r for r in results if r.get("error")]
            if failed:
                first = failed[0]
                raise CatalogStoreError(
                    f"{len(failed)} of {len(chunk)} writes failed; "
                    f"first {first.get('id')}: {first.get('error')} ({first.get('reason', '')})"
                )

    def _upsert(self, docs: list[dict]) -> UpsertCounts:
        """
        Insert or fully overwrite docs keyed by _id.

        Only _rev, created_at and is_active carry over from an existing doc;
        every other field takes the incoming value.
        """
        deduped: dict[str, dict] = {}
        for doc in docs:
            if doc["_id"] in deduped:
                logger.debug("Duplicate %s in batch, keeping first", doc["_id"])
                continue
            deduped[doc["_id"]] = doc

        existing = self.fetch_docs(list(deduped))
        now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        counts = UpsertCounts()
        to_write: list[dict] = []
        for doc_id, doc in deduped.items():
            doc = dict(doc)
            previous = existing.get(doc_id)
            if previous is not None:
                doc["_rev"] = previous["_rev"]
                doc["created_at"] = previous.get("created_at", now)
                doc["is_active"] = previous.get("is_active", True)
                counts.updated += 1
            else:
                doc["created_at"] = now
                doc["is_active"] = True
                counts.inserted += 1
            doc["updated_at"] = now
            to_write.append(doc)

        self._bulk_write(to_write)
        return counts

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_areas(self, area_types) -> dict[str, dict]:
        """Map area type -> existing area doc."""
        docs = self.fetch_docs([area_doc_id(_enum_value(t)) for t in area_types])
        return {doc["area_type"]: doc for doc in docs.values()}

    def find_niche_ids(self, slugs) -> dict[str, str]:
        """Map niche slug -> niche _id for the niches that exist."""
        docs = self.fetch_docs([niche_doc_id(s) for s in slugs if s])
        return {doc["slug"]: doc_id for doc_id, doc in docs.items()}

    # ------------------------------------------------------------------
    # Upserts, one per entity family
    # ------------------------------------------------------------------

    def upsert_areas(self, areas: list[dict]) -> UpsertCounts:
        docs = []
        for area in areas:
            area_type = _enum_value(area["area_type"])
            docs.append({
                "_id": area_doc_id(area_type),
                "type": AREA_DOC_TYPE,
                "area_type": area_type,
                "name_en": area["name_en"],
                "name_local": area["name_local"],
                "description_en": area.get("description_en"),
                "description_local": area.get("description_local"),
                "icon": area.get("icon"),
                "color": area.get("color"),
                "order": area["order"],
            })
        return self._upsert(docs)

    def upsert_niches(self, niches: list[dict]) -> UpsertCounts:
        areas = self.find_areas({_enum_value(n["area_type"]) for n in niches})
        docs = []
        for niche in niches:
            area_type = _enum_value(niche["area_type"])
            area = areas.get(area_type)
            if area is None:
                logger.warning("Area not found for niche %s: %s", niche["slug"], area_type)
                continue
            docs.append({
                "_id": niche_doc_id(niche["slug"]),
                "type": NICHE_DOC_TYPE,
                "slug": niche["slug"],
                "area_type": area_type,
                "area_id": area["_id"],
                "area_order": area.get("order", 0),
                "name_en": niche["name_en"],
                "name_local": niche["name_local"],
                "description_en": niche.get("description_en"),
                "description_local": niche.get("description_local"),
                "icon": niche.get("icon"),
                "color": niche.get("color"),
                "order": niche["order"],
            })
        return self._upsert(docs)

    def upsert_languages(self, languages: list[ParsedLanguage]) -> UpsertCounts:
        docs = [
            {
                "_id": language_doc_id(lang.slug),
                "type": LANGUAGE_DOC_TYPE,
                "slug": lang.slug,
                "name_en": lang.name_en,
                "name_local": lang.name_local,
                "search_names": search_names(lang.name_en, lang.name_local),
                "color": lang.color,
                "website": lang.website,
                "aliases": lang.aliases,
                "file_extensions": lang.extensions,
                "paradigms": lang.paradigms,
                "typing": lang.typing,
                "popularity": lang.popularity,
            }
            for lang in languages
        ]
        return self._upsert(docs)

    def upsert_skills(self, skills: list[ParsedSkill]) -> UpsertCounts:
        niche_ids = self.find_niche_ids({s.niche_slug for s in skills if s.niche_slug})
        docs = []
        for skill in skills:
            doc = {
                "_id": skill_doc_id(skill.slug),
                "type": SKILL_DOC_TYPE,
                "slug": skill.slug,
                "name_en": skill.name_en,
                "name_local": skill.name_local,
                "search_names": search_names(skill.name_en, skill.name_local),
                "skill_type": _enum_value(skill.type),
                "color": skill.color,
                "icon": skill.icon,
                "website": skill.website,
                "aliases": skill.aliases,
                "keywords": skill.keywords,
                "popularity": skill.popularity,
            }
            # unresolved niche: leave the reference out entirely
            niche_id = niche_ids.get(skill.niche_slug) if skill.niche_slug else None
            if niche_id:
                doc["niche_id"] = niche_id
                doc["niche_slug"] = skill.niche_slug
            docs.append(doc)
        return self._upsert(docs)
