"""
Tech skills from the Stack Exchange tag-popularity API.

API: https://api.stackexchange.com/2.3/tags (public; a key only raises quota)
Pagination: ?page=1&pagesize=100&order=desc&sort=popular&site=stackoverflow

Pages come back most popular first, so the first tag seen for a slug is the
one kept.
"""

import logging
import re
import time

import httpx

from tech_catalog.catalog_data import CatalogTables
from tech_catalog.classifier import SkillClassifier
from tech_catalog.errors import SourceFetchError
from tech_catalog.models import ParsedSkill
from tech_catalog.slugs import format_display_name, normalize_slug

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100
DEFAULT_MAX_PAGES = 10
DEFAULT_PAGE_DELAY = 0.1

# python-3.x, angular-17, ruby-on-rails-7: version-pinned synonyms of a base tag
_VERSION_SUFFIX = re.compile(r"-v?\d+(\.\d+)*(?P<wildcard>\.x)?$")


def should_include_tag(tag: str, tables: CatalogTables) -> bool:
    """
    Decide whether a raw tag becomes a catalog skill.

    Drops programming languages (the Linguist stage owns them), generic and
    meta tags, and version-suffixed synonyms: a ".x" suffix, or a numeric
    suffix on a known language or skill (angular-17). Tags the category table
    knows about are always kept (oauth-2.0), as are tags whose numeric part
    is the name itself (utf-8, x86-64, windows-10).
    """
    t = (tag or "").strip().lower()
    if len(t) < 2:
        return False
    if t in tables.programming_language_tags or t in tables.skip_tags:
        return False
    if t in tables.skill_categories:
        return True
    match = _VERSION_SUFFIX.search(t)
    if match is None:
        return True
    if match.group("wildcard"):
        return False
    base = t[:match.start()]
    return base not in tables.programming_language_tags and base not in tables.skill_categories


class TagParser:
    def __init__(
        self,
        http: httpx.Client,
        classifier: SkillClassifier,
        tables: CatalogTables,
        url: str,
        site: str = "stackoverflow",
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
        page_delay: float = DEFAULT_PAGE_DELAY,
        timeout: float = 30.0,
        api_key: str | None = None,
        sleep=time.sleep,
    ):
        self.http = http
        self.classifier = classifier
        self.tables = tables
        self.url = url
        self.site = site
        self.page_size = page_size
        self.max_pages = max_pages
        self.page_delay = page_delay
        self.timeout = timeout
        self.api_key = api_key
        self._sleep = sleep

    def fetch_and_parse(self) -> list[ParsedSkill]:
        logger.info("Fetching %s tags (up to %d pages)", self.site, self.max_pages)
        tags = self.fetch_tags()
        skills = self.parse_tags(tags)
        logger.info("Parsed %d skills from %d tags", len(skills), len(tags))
        return skills

    def _fetch_page(self, page: int) -> dict:
        params = {
            "page": page,
            "pagesize": self.page_size,
            "order": "desc",
            "sort": "popular",
            "site": self.site,
        }
        if self.api_key:
            params["key"] = self.api_key
        resp = self.http.get(self.url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError("tag API returned a non-object payload")
        items = data.get("items", [])
        if not isinstance(items, list):
            raise ValueError(f"tag API items is {type(items).__name__}, expected a list")

        tags = []
        for item in items:
            if not isinstance(item, dict):
                raise ValueError(f"tag API item is {type(item).__name__}, expected an object")
            name = item.get("name")
            count = item.get("count", 0)
            if not isinstance(name, str) or not name:
                raise ValueError(f"tag API item has an invalid name: {name!r}")
            # bool is an int subclass
            if isinstance(count, bool) or not isinstance(count, int):
                raise ValueError(f"tag {name!r} has an invalid count: {count!r}")
            tags.append({"name": name, "count": max(count, 0)})

        backoff = data.get("backoff") or 0
        if isinstance(backoff, bool) or not isinstance(backoff, (int, float)):
            raise ValueError(f"tag API backoff is not a number: {backoff!r}")

        return {
            "items": tags,
            "has_more": bool(data.get("has_more")),
            "backoff": float(backoff),
            "quota_remaining": data.get("quota_remaining"),
        }

    def fetch_tags(self) -> list[dict]:
        """
        Page through the tag API and return [{"name", "count"}, ...].

        Stops on has_more=false, at max_pages, or at the first failed page.
        A failure on page 1 raises; a later failure keeps what was collected.
        Malformed pages count as failures.
        """
        tags: list[dict] = []
        for page in range(1, self.max_pages + 1):
            try:
                data = self._fetch_page(page)
            except (httpx.HTTPError, ValueError) as e:
                if page == 1:
                    raise SourceFetchError(f"Tag API page 1 failed: {e}") from e
                logger.warning("Tag API page %d failed, keeping %d tags: %s", page, len(tags), e)
                break

            tags.extend(data["items"])
            if data["quota_remaining"] is not None:
                logger.debug("Tag API page %d ok, quota remaining %s", page, data["quota_remaining"])
            if not data["has_more"]:
                break
            if page < self.max_pages:
                # the API may ask clients to back off for N seconds
                self._sleep(max(self.page_delay, data["backoff"]))
        return tags

    def parse_tags(self, tags: list[dict]) -> list[ParsedSkill]:
        parsed: list[ParsedSkill] = []
        seen_slugs: set[str] = set()

        for tag in tags:
            name = tag["name"]
            tag_lower = name.lower()
            slug = normalize_slug(name)

            if slug in seen_slugs:
                continue
            if not should_include_tag(name, self.tables):
                continue
            seen_slugs.add(slug)

            category = self.classifier.classify(tag_lower, slug)
            name_en = self.classifier.display_name(tag_lower, slug) or format_display_name(name)
            parsed.append(ParsedSkill(
                slug=slug,
                name_en=name_en,
                name_local=self.classifier.translation(tag_lower, slug, name_en),
                type=category.type,
                niche_slug=category.niche,
                color=self.classifier.color(tag_lower, slug),
                aliases=self.classifier.aliases(tag_lower, slug),
                keywords=self.classifier.keywords(tag_lower, slug),
                popularity=tag["count"],
            ))
        return parsed
