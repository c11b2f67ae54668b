"""
One full catalog sync: Areas -> Niches -> Languages -> Skills, then cache
invalidation.

Stages run in a fixed order because niches reference areas and skills
reference niches. A failing stage is logged and recorded in
SyncResult.errors; later stages still run against whatever earlier stages
managed to write. There is no rollback.
"""

import logging
from typing import Callable

from app.cache import CacheService
from app.queries import invalidate_catalog_cache
from tech_catalog.models import SyncResult
from tech_catalog.parsers.linguist import LinguistParser
from tech_catalog.parsers.tags import TagParser
from tech_catalog.store import CatalogStore
from tech_catalog.taxonomy import TECH_AREAS, TECH_NICHES

logger = logging.getLogger(__name__)


class TechCatalogSync:
    def __init__(
        self,
        store: CatalogStore,
        linguist_parser: LinguistParser,
        tag_parser: TagParser,
        cache: CacheService,
        areas: list[dict] | None = None,
        niches: list[dict] | None = None,
    ):
        self.store = store
        self.linguist_parser = linguist_parser
        self.tag_parser = tag_parser
        self.cache = cache
        self.areas = TECH_AREAS if areas is None else areas
        self.niches = TECH_NICHES if niches is None else niches

    def run_sync(self) -> SyncResult:
        """Run every stage once. Never raises; failures end up in result.errors."""
        logger.info("Starting tech catalog sync")
        result = SyncResult()

        self._run_stage(result, "areas", self._sync_areas)
        self._run_stage(result, "niches", self._sync_niches)
        self._run_stage(result, "languages", self._sync_languages)
        self._run_stage(result, "skills", self._sync_skills)
        self._run_stage(result, "cache", self._invalidate_cache)

        if result.errors:
            logger.warning("Sync finished with %d error(s): %s", len(result.errors), result.errors)
        else:
            logger.info(
                "Sync finished: %d areas, %d niches, languages +%d/~%d, skills +%d/~%d",
                result.areas_created, result.niches_created,
                result.languages_inserted, result.languages_updated,
                result.skills_inserted, result.skills_updated,
            )
        return result

    def _run_stage(self, result: SyncResult, name: str, stage: Callable[[SyncResult], None]) -> None:
        try:
            stage(result)
        except Exception as e:
            logger.exception("Sync stage %s failed", name)
            result.errors.append(f"{name}: {e}")

    def _sync_areas(self, result: SyncResult) -> None:
        counts = self.store.upsert_areas(self.areas)
        result.areas_created = counts.total
        logger.info("Upserted %d areas", counts.total)

    def _sync_niches(self, result: SyncResult) -> None:
        counts = self.store.upsert_niches(self.niches)
        result.niches_created = counts.total
        logger.info("Upserted %d niches", counts.total)

    def _sync_languages(self, result: SyncResult) -> None:
        languages = self.linguist_parser.fetch_and_parse()
        counts = self.store.upsert_languages(languages)
        result.languages_inserted = counts.inserted
        result.languages_updated = counts.updated
        logger.info("Languages: %d inserted, %d updated", counts.inserted, counts.updated)

    def _sync_skills(self, result: SyncResult) -> None:
        skills = self.tag_parser.fetch_and_parse()
        counts = self.store.upsert_skills(skills)
        result.skills_inserted = counts.inserted
        result.skills_updated = counts.updated
        logger.info("Skills: %d inserted, %d updated", counts.inserted, counts.updated)

    def _invalidate_cache(self, _result: SyncResult) -> None:
        invalidate_catalog_cache(self.cache)
