"""Tests for the Stack Exchange tag parser: pagination, filtering, dedup and classification."""

import httpx
import pytest

from tech_catalog.errors import SourceFetchError
from tech_catalog.parsers.tags import TagParser, should_include_tag
from tech_catalog.taxonomy import SkillType

URL = "https://api.example.test/2.3/tags"


def _paged_handler(pages: dict, seen: list):
    """Serve pages[n] for ?page=n; a page value that is an int is returned as that status."""

    def handler(request):
        page = int(request.url.params["page"])
        seen.append(request.url.params)
        body = pages[page]
        if isinstance(body, int):
            return httpx.Response(body)
        return httpx.Response(200, json=body)

    return handler


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def build_parser(make_http, classifier, tables, sleeps):
    def build(pages, seen=None, **kwargs):
        seen = [] if seen is None else seen
        return TagParser(
            make_http(_paged_handler(pages, seen)),
            classifier,
            tables,
            URL,
            sleep=sleeps.append,
            **kwargs,
        )

    return build


class TestShouldIncludeTag:
    def test_drops_programming_languages(self, tables):
        assert not should_include_tag("python", tables)
        assert not should_include_tag("javascript", tables)

    def test_drops_meta_and_short_tags(self, tables):
        assert not should_include_tag("arrays", tables)
        assert not should_include_tag("x", tables)
        assert not should_include_tag("", tables)

    def test_drops_version_suffixed_synonyms(self, tables):
        assert not should_include_tag("angular-17", tables)
        assert not should_include_tag("ruby-on-rails-7", tables)
        assert not should_include_tag("spring-boot-3.x", tables)

    def test_keeps_known_versioned_tags(self, tables):
        assert should_include_tag("oauth-2.0", tables)

    def test_keeps_tags_whose_number_is_part_of_the_name(self, tables):
        assert should_include_tag("utf-8", tables)
        assert should_include_tag("x86-64", tables)
        assert should_include_tag("windows-10", tables)
        assert should_include_tag("ubuntu-20.04", tables)

    def test_keeps_ordinary_tags(self, tables):
        assert should_include_tag("reactjs", tables)
        assert should_include_tag("some-new-tool", tables)


class TestPagination:
    def test_stops_when_has_more_is_false(self, build_parser, make_tag_page, sleeps):
        seen = []
        pages = {
            1: make_tag_page([("reactjs", 300)]),
            2: make_tag_page([("docker", 200)]),
            3: make_tag_page([("git", 100)], has_more=False),
        }
        tags = build_parser(pages, seen).fetch_tags()

        assert len(seen) == 3
        assert [t["name"] for t in tags] == ["reactjs", "docker", "git"]
        assert sleeps == [0.1, 0.1]

    def test_stops_at_max_pages(self, build_parser, make_tag_page, sleeps):
        seen = []
        pages = {n: make_tag_page([(f"tool-{n}", 1000 - n)]) for n in range(1, 20)}
        tags = build_parser(pages, seen).fetch_tags()

        assert len(seen) == 10
        assert len(tags) == 10
        assert len(sleeps) == 9

    def test_request_parameters(self, build_parser, make_tag_page):
        seen = []
        build_parser({1: make_tag_page([], has_more=False)}, seen, api_key="k3y").fetch_tags()

        params = seen[0]
        assert params["pagesize"] == "100"
        assert params["order"] == "desc"
        assert params["sort"] == "popular"
        assert params["site"] == "stackoverflow"
        assert params["key"] == "k3y"

    def test_no_key_param_without_api_key(self, build_parser, make_tag_page):
        seen = []
        build_parser({1: make_tag_page([], has_more=False)}, seen).fetch_tags()
        assert "key" not in seen[0]

    def test_honors_backoff(self, build_parser, make_tag_page, sleeps):
        pages = {
            1: make_tag_page([("reactjs", 300)], backoff=5),
            2: make_tag_page([("docker", 200)], has_more=False),
        }
        build_parser(pages).fetch_tags()
        assert sleeps == [5.0]

    def test_later_page_failure_keeps_collected_tags(self, build_parser, make_tag_page):
        seen = []
        pages = {
            1: make_tag_page([("reactjs", 300), ("docker", 200)]),
            2: 500,
            3: make_tag_page([("git", 100)], has_more=False),
        }
        tags = build_parser(pages, seen).fetch_tags()

        assert [t["name"] for t in tags] == ["reactjs", "docker"]
        assert len(seen) == 2

    def test_first_page_failure_raises(self, build_parser):
        with pytest.raises(SourceFetchError):
            build_parser({1: 502}).fetch_tags()

    def test_malformed_later_page_is_treated_as_failure(self, make_http, classifier, tables, make_tag_page):
        def handler(request):
            if request.url.params["page"] == "1":
                return httpx.Response(200, json=make_tag_page([("reactjs", 300)]))
            return httpx.Response(200, text="<html>not json</html>")

        parser = TagParser(make_http(handler), classifier, tables, URL, sleep=lambda s: None)
        assert [t["name"] for t in parser.fetch_tags()] == ["reactjs"]

    def test_later_page_with_bad_count_keeps_collected_tags(self, build_parser, make_tag_page):
        pages = {
            1: make_tag_page([("reactjs", 300)]),
            2: {"items": [{"name": "docker", "count": "n/a"}], "has_more": True},
            3: make_tag_page([("git", 100)], has_more=False),
        }
        assert [t["name"] for t in build_parser(pages).fetch_tags()] == ["reactjs"]

    def test_first_page_with_non_list_items_raises(self, build_parser):
        with pytest.raises(SourceFetchError, match="expected a list"):
            build_parser({1: {"items": "bogus", "has_more": False}}).fetch_tags()

    def test_first_page_with_nameless_item_raises(self, build_parser):
        with pytest.raises(SourceFetchError, match="invalid name"):
            build_parser({1: {"items": [{"count": 5}], "has_more": False}}).fetch_tags()

    def test_missing_count_defaults_to_zero(self, build_parser):
        tags = build_parser({1: {"items": [{"name": "docker"}], "has_more": False}}).fetch_tags()
        assert tags == [{"name": "docker", "count": 0}]


class TestParseTags:
    def test_dedup_by_slug_first_wins(self, build_parser):
        parser = build_parser({})
        skills = parser.parse_tags([
            {"name": "node.js", "count": 900},
            {"name": "nodejs", "count": 50},
        ])
        assert len(skills) == 1
        assert skills[0].slug == "nodejs"
        assert skills[0].popularity == 900

    def test_excluded_tags_are_dropped(self, build_parser):
        skills = build_parser({}).parse_tags([
            {"name": "python", "count": 5000},
            {"name": "arrays", "count": 4000},
            {"name": "angular-17", "count": 3000},
            {"name": "reactjs", "count": 2000},
        ])
        assert [s.slug for s in skills] == ["reactjs"]

    def test_known_tag_fields(self, build_parser):
        react = build_parser({}).parse_tags([{"name": "reactjs", "count": 2000}])[0]
        assert react.name_en == "React"
        assert react.type == SkillType.FRAMEWORK
        assert react.niche_slug == "frontend"
        assert react.color == "#61DAFB"
        assert "react" in react.aliases
        assert "jsx" in react.keywords

    def test_translation_lookup(self, build_parser):
        skill = build_parser({}).parse_tags([{"name": "unit-testing", "count": 10}])[0]
        assert skill.name_local == "Testes Unitários"

    def test_unknown_tag_defaults(self, build_parser):
        skill = build_parser({}).parse_tags([{"name": "some-new-tool", "count": 7}])[0]
        assert skill.type == SkillType.OTHER
        assert skill.niche_slug is None
        assert skill.name_en == "Some New Tool"
        assert skill.name_local == "Some New Tool"
        assert skill.color is None
        assert skill.aliases == []

    def test_fetch_and_parse_end_to_end(self, build_parser, make_tag_page):
        pages = {
            1: make_tag_page([("python", 9000), ("reactjs", 300), ("node.js", 250)]),
            2: make_tag_page([("nodejs", 10), ("docker", 200)], has_more=False),
        }
        skills = build_parser(pages).fetch_and_parse()
        assert [s.slug for s in skills] == ["reactjs", "nodejs", "docker"]
