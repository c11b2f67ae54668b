"""
Cached read path over the catalog.

Every list query is cache-aside: look up the key, on a miss run a Cloudant
selector, sort in Python and store the JSON-dumped models under a per-shape
TTL. The sync pipeline calls invalidate_catalog_cache() after writing.
"""

import hashlib
import logging
import re
import time
from typing import Callable

from ibm_cloud_sdk_core import ApiException

from app.cache import CacheService, get_cache
from app.config import settings
from app.database import get_cloudant
from app.models import (
    CatalogSearchResponse,
    NicheRef,
    ProgrammingLanguage,
    TechArea,
    TechNiche,
    TechSkill,
)
from tech_catalog.slugs import fold_accents
from tech_catalog.taxonomy import AreaType, SkillType

logger = logging.getLogger(__name__)

HOUR = 60 * 60

AREAS_KEY = "tech:areas:list"
NICHES_KEY = "tech:niches:list"
NICHES_BY_AREA_KEY = "tech:niches:area:{}"
LANGUAGES_KEY = "tech:languages:list"
SKILLS_KEY = "tech:skills:list"
SKILLS_BY_NICHE_KEY = "tech:skills:niche:{}"
SKILLS_BY_TYPE_KEY = "tech:skills:type:{}:{}"
SEARCH_KEY = "tech:skills:search:{}"

AREAS_TTL = 24 * HOUR
NICHES_TTL = 24 * HOUR
LANGUAGES_TTL = 12 * HOUR
SKILLS_TTL = 12 * HOUR
SKILLS_BY_NICHE_TTL = 6 * HOUR
SEARCH_TTL = 1 * HOUR

LIST_KEYS = (AREAS_KEY, NICHES_KEY, LANGUAGES_KEY, SKILLS_KEY)
SWEEP_PATTERNS = ("tech:skills:*", "tech:niches:*")

_service: "CatalogQueryService | None" = None


def search_key(kind: str, query: str, limit: int) -> str:
    digest = hashlib.md5(f"{kind}:{query}:{limit}".encode()).hexdigest()[:8]
    return SEARCH_KEY.format(digest)


def invalidate_catalog_cache(cache: CacheService) -> int:
    """Drop every cached catalog read. Backend errors propagate."""
    for key in LIST_KEYS:
        cache.delete(key)
    swept = sum(cache.delete_pattern(p) for p in SWEEP_PATTERNS)
    logger.info("Invalidated catalog cache (%d list keys, %d swept)", len(LIST_KEYS), swept)
    return len(LIST_KEYS) + swept


def _by_popularity(doc: dict) -> tuple:
    return (-int(doc.get("popularity") or 0), doc.get("slug", ""))


def _doc_to_area(doc: dict) -> TechArea:
    return TechArea(
        id=doc["_id"],
        area_type=doc["area_type"],
        name_en=doc.get("name_en", ""),
        name_local=doc.get("name_local", ""),
        description_en=doc.get("description_en"),
        description_local=doc.get("description_local"),
        icon=doc.get("icon"),
        color=doc.get("color"),
        order=doc.get("order", 0),
    )


def _doc_to_niche(doc: dict) -> TechNiche:
    return TechNiche(
        id=doc["_id"],
        slug=doc["slug"],
        area_type=doc.get("area_type", ""),
        area_id=doc.get("area_id"),
        name_en=doc.get("name_en", ""),
        name_local=doc.get("name_local", ""),
        description_en=doc.get("description_en"),
        description_local=doc.get("description_local"),
        icon=doc.get("icon"),
        color=doc.get("color"),
        order=doc.get("order", 0),
    )


def _doc_to_language(doc: dict) -> ProgrammingLanguage:
    return ProgrammingLanguage(
        id=doc["_id"],
        slug=doc["slug"],
        name_en=doc.get("name_en", ""),
        name_local=doc.get("name_local", ""),
        color=doc.get("color"),
        website=doc.get("website"),
        aliases=doc.get("aliases") or [],
        file_extensions=doc.get("file_extensions") or [],
        paradigms=doc.get("paradigms") or [],
        typing=doc.get("typing"),
        popularity=doc.get("popularity", 0),
    )


def _doc_to_skill(doc: dict, niches: dict[str, NicheRef]) -> TechSkill:
    return TechSkill(
        id=doc["_id"],
        slug=doc["slug"],
        name_en=doc.get("name_en", ""),
        name_local=doc.get("name_local", ""),
        type=doc.get("skill_type", SkillType.OTHER.value),
        niche=niches.get(doc.get("niche_id") or ""),
        color=doc.get("color"),
        icon=doc.get("icon"),
        website=doc.get("website"),
        aliases=doc.get("aliases") or [],
        keywords=doc.get("keywords") or [],
        popularity=doc.get("popularity", 0),
    )


class CatalogQueryService:
    def __init__(
        self,
        client,
        cache: CacheService,
        db_name: str,
        cache_by_type: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.cache = cache
        self.db_name = db_name
        self.cache_by_type = cache_by_type
        self._sleep = sleep

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_all(self, selector: dict, page_size: int = 200) -> list[dict]:
        """Paginate through matching docs using Cloudant bookmarks."""
        docs: list[dict] = []
        bookmark: str | None = None
        while True:
            kwargs: dict = {"db": self.db_name, "selector": selector, "limit": page_size}
            if bookmark:
                kwargs["bookmark"] = bookmark
            for attempt in range(5):
                try:
                    result = self.client.post_find(**kwargs).get_result()
                    break
                except ApiException as exc:
                    if exc.code == 429 and attempt < 4:
                        self._sleep(1.0 * (attempt + 1))
                        continue
                    raise
            page = result.get("docs", [])
            if not page:
                break
            docs.extend(page)
            bookmark = result.get("bookmark")
            if not bookmark or len(page) < page_size:
                break
        return docs

    def _cached(self, key: str, ttl: int, model, loader):
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return [model.model_validate(item) for item in cached]
        items = loader()
        self.cache.set(key, [item.model_dump(mode="json") for item in items], ttl)
        return items

    def _niche_refs(self) -> dict[str, NicheRef]:
        """Map niche _id -> NicheRef, inactive niches included."""
        return {
            doc["_id"]: NicheRef(
                slug=doc["slug"],
                name_en=doc.get("name_en", ""),
                name_local=doc.get("name_local", ""),
            )
            for doc in self._find_all({"type": "tech_niche"})
        }

    def _load_skills(self, selector: dict) -> list[TechSkill]:
        docs = sorted(self._find_all(selector), key=_by_popularity)
        if not docs:
            return []
        niches = self._niche_refs()
        return [_doc_to_skill(doc, niches) for doc in docs]

    @staticmethod
    def _search_selector(doc_type: str, q: str, include_keywords: bool) -> dict:
        folded = re.escape(fold_accents(q))
        clauses = [
            {"search_names": {"$elemMatch": {"$regex": folded}}},
            {"slug": {"$regex": re.escape(q)}},
            {"aliases": {"$elemMatch": {"$eq": q}}},
        ]
        if include_keywords:
            clauses.append({"keywords": {"$elemMatch": {"$eq": q}}})
        return {"type": doc_type, "is_active": True, "$or": clauses}

    # ------------------------------------------------------------------
    # Areas and niches
    # ------------------------------------------------------------------

    def get_all_areas(self) -> list[TechArea]:
        def load():
            docs = self._find_all({"type": "tech_area", "is_active": True})
            docs.sort(key=lambda d: d.get("order", 0))
            return [_doc_to_area(d) for d in docs]

        return self._cached(AREAS_KEY, AREAS_TTL, TechArea, load)

    def get_all_niches(self) -> list[TechNiche]:
        def load():
            docs = self._find_all({"type": "tech_niche", "is_active": True})
            docs.sort(key=lambda d: (d.get("area_order", 0), d.get("order", 0)))
            return [_doc_to_niche(d) for d in docs]

        return self._cached(NICHES_KEY, NICHES_TTL, TechNiche, load)

    def get_niches_by_area(self, area_type: str) -> list[TechNiche]:
        """Raises ValueError for an unknown area type."""
        area = AreaType(area_type).value

        def load():
            docs = self._find_all({"type": "tech_niche", "is_active": True, "area_type": area})
            docs.sort(key=lambda d: d.get("order", 0))
            return [_doc_to_niche(d) for d in docs]

        return self._cached(NICHES_BY_AREA_KEY.format(area), NICHES_TTL, TechNiche, load)

    # ------------------------------------------------------------------
    # Languages
    # ------------------------------------------------------------------

    def get_all_languages(self) -> list[ProgrammingLanguage]:
        def load():
            docs = self._find_all({"type": "programming_language", "is_active": True})
            return [_doc_to_language(d) for d in sorted(docs, key=_by_popularity)]

        return self._cached(LANGUAGES_KEY, LANGUAGES_TTL, ProgrammingLanguage, load)

    def search_languages(self, query: str, limit: int = 20) -> list[ProgrammingLanguage]:
        q = (query or "").lower().strip()
        if not q:
            return []

        def load():
            selector = self._search_selector("programming_language", q, include_keywords=False)
            docs = sorted(self._find_all(selector), key=_by_popularity)[:limit]
            return [_doc_to_language(d) for d in docs]

        return self._cached(search_key("lang", q, limit), SEARCH_TTL, ProgrammingLanguage, load)

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    def get_all_skills(self) -> list[TechSkill]:
        return self._cached(
            SKILLS_KEY, SKILLS_TTL, TechSkill,
            lambda: self._load_skills({"type": "tech_skill", "is_active": True}),
        )

    def get_skills_by_niche(self, niche_slug: str) -> list[TechSkill]:
        return self._cached(
            SKILLS_BY_NICHE_KEY.format(niche_slug), SKILLS_BY_NICHE_TTL, TechSkill,
            lambda: self._load_skills({"type": "tech_skill", "is_active": True, "niche_slug": niche_slug}),
        )

    def get_skills_by_type(self, skill_type: str, limit: int = 50) -> list[TechSkill]:
        """Raises ValueError for an unknown skill type."""
        value = SkillType(skill_type).value

        def load():
            selector = {"type": "tech_skill", "is_active": True, "skill_type": value}
            return self._load_skills(selector)[:limit]

        if not self.cache_by_type:
            return load()
        return self._cached(SKILLS_BY_TYPE_KEY.format(value, limit), SEARCH_TTL, TechSkill, load)

    def search_skills(self, query: str, limit: int = 20) -> list[TechSkill]:
        q = (query or "").lower().strip()
        if not q:
            return []

        def load():
            selector = self._search_selector("tech_skill", q, include_keywords=True)
            return self._load_skills(selector)[:limit]

        return self._cached(search_key("skill", q, limit), SEARCH_TTL, TechSkill, load)

    def search_all(self, query: str, limit: int = 20) -> CatalogSearchResponse:
        half = limit // 2
        return CatalogSearchResponse(
            languages=self.search_languages(query, half),
            skills=self.search_skills(query, half),
        )


def get_query_service() -> CatalogQueryService:
    global _service
    if _service is None:
        _service = CatalogQueryService(get_cloudant(), get_cache(), settings.cloudant_db_name)
    return _service
