"""
Programming languages from the GitHub Linguist dataset.

API: raw languages.yml from github-linguist/linguist (public, no auth).
Only entries with type: programming are kept; markup, data and prose
languages are dropped.
"""

import logging

import httpx
import yaml

from tech_catalog.catalog_data import CatalogTables
from tech_catalog.errors import SourceFetchError, SourceParseError
from tech_catalog.models import ParsedLanguage
from tech_catalog.slugs import normalize_slug, unique

logger = logging.getLogger(__name__)

POPULARITY_CEILING = 1000


def popularity_for(name: str, ranking: dict[str, int]) -> int:
    """1000 - rank for ranked languages, 0 for everything else."""
    if name in ranking:
        return POPULARITY_CEILING - ranking[name]
    return 0


def parse_languages(text: str, tables: CatalogTables) -> list[ParsedLanguage]:
    """Parse languages.yml content into ParsedLanguage records, most popular first."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SourceParseError(f"Invalid Linguist YAML: {e}") from e
    if not isinstance(data, dict):
        raise SourceParseError("Linguist YAML is not a mapping of language name to metadata")

    ranking: dict[str, int] = {}
    for index, name in enumerate(tables.language_popularity_order):
        ranking.setdefault(name, index)

    parsed: list[ParsedLanguage] = []
    seen_slugs: set[str] = set()
    for name, meta in data.items():
        if not isinstance(meta, dict) or meta.get("type") != "programming":
            continue
        name = str(name)
        slug = normalize_slug(name)
        if slug in seen_slugs:
            continue
        seen_slugs.add(slug)

        parsed.append(ParsedLanguage(
            slug=slug,
            name_en=name,
            name_local=tables.language_translations.get(name, name),
            color=meta.get("color"),
            website=tables.language_websites.get(name),
            aliases=unique(meta.get("aliases")),
            extensions=unique(meta.get("extensions")),
            paradigms=list(tables.language_paradigms.get(name, ())),
            typing=tables.language_typing.get(name),
            popularity=popularity_for(name, ranking),
        ))

    # sort() is stable: unranked languages keep dataset order
    parsed.sort(key=lambda lang: lang.popularity, reverse=True)
    return parsed


class LinguistParser:
    def __init__(self, http: httpx.Client, tables: CatalogTables, url: str, timeout: float = 30.0):
        self.http = http
        self.tables = tables
        self.url = url
        self.timeout = timeout

    def fetch_and_parse(self) -> list[ParsedLanguage]:
        """Fetch languages.yml and parse it. Any fetch or parse failure raises; nothing partial is returned."""
        logger.info("Fetching Linguist languages from %s", self.url)
        try:
            resp = self.http.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise SourceFetchError(f"Linguist fetch failed: {e}") from e

        languages = parse_languages(resp.text, self.tables)
        logger.info("Parsed %d programming languages from Linguist", len(languages))
        return languages
