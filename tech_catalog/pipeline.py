"""Wires settings, clients and tables into a ready-to-run TechCatalogSync."""

import logging

import httpx

from app.cache import CacheService, get_cache
from app.config import Settings, settings
from app.database import get_cloudant
from tech_catalog.catalog_data import DEFAULT_TABLES, CatalogTables
from tech_catalog.classifier import SkillClassifier
from tech_catalog.models import SyncResult
from tech_catalog.parsers.linguist import LinguistParser
from tech_catalog.parsers.tags import TagParser
from tech_catalog.store import CatalogStore
from tech_catalog.sync import TechCatalogSync

logger = logging.getLogger(__name__)

USER_AGENT = "tech-catalog-sync/0.1"


def make_http_client(cfg: Settings = settings) -> httpx.Client:
    return httpx.Client(
        headers={"User-Agent": USER_AGENT},
        timeout=cfg.http_timeout,
        follow_redirects=True,
    )


def build_linguist_parser(
    http: httpx.Client, tables: CatalogTables = DEFAULT_TABLES, cfg: Settings = settings,
) -> LinguistParser:
    return LinguistParser(http, tables, cfg.linguist_url, timeout=cfg.http_timeout)


def build_tag_parser(
    http: httpx.Client,
    tables: CatalogTables = DEFAULT_TABLES,
    cfg: Settings = settings,
    max_pages: int | None = None,
) -> TagParser:
    return TagParser(
        http,
        SkillClassifier(tables),
        tables,
        cfg.stackexchange_url,
        site=cfg.stackexchange_site,
        page_size=cfg.tag_page_size,
        max_pages=max_pages or cfg.tag_max_pages,
        page_delay=cfg.tag_page_delay,
        timeout=cfg.http_timeout,
        api_key=cfg.stackexchange_key or None,
    )


def build_sync(
    http: httpx.Client,
    client=None,
    cache: CacheService | None = None,
    tables: CatalogTables = DEFAULT_TABLES,
    cfg: Settings = settings,
) -> TechCatalogSync:
    store = CatalogStore(client if client is not None else get_cloudant(), cfg.cloudant_db_name)
    return TechCatalogSync(
        store,
        build_linguist_parser(http, tables, cfg),
        build_tag_parser(http, tables, cfg),
        cache if cache is not None else get_cache(),
    )


def run_sync() -> SyncResult:
    """Run one full sync with the configured clients. Never raises."""
    with make_http_client() as http:
        try:
            sync = build_sync(http)
        except Exception as e:
            logger.exception("Could not set up the sync")
            return SyncResult(errors=[f"setup: {e}"])
        return sync.run_sync()
