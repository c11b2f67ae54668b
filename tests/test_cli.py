"""Tests for the CLI commands and the ensure-db script."""

import pytest

from app.queries import CatalogQueryService
from tech_catalog import cli
from tech_catalog.models import ParsedSkill, SyncResult
from tech_catalog.scripts import ensure_cloudant_db
from tech_catalog.store import CatalogStore

DB = "tech_catalog_test"


class TestParser:
    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    def test_preview_skills_defaults(self):
        args = cli.build_parser().parse_args(["preview-skills"])
        assert args.limit == 20
        assert args.max_pages == 1

    def test_search_args(self):
        args = cli.build_parser().parse_args(["-v", "search", "react", "--limit", "6"])
        assert args.verbose is True
        assert args.query == "react"
        assert args.limit == 6


class TestSyncCommand:
    def test_success_exits_zero(self, monkeypatch, capsys):
        monkeypatch.setattr("tech_catalog.pipeline.run_sync", lambda: SyncResult(areas_created=9))
        with pytest.raises(SystemExit) as exc:
            cli.main(["sync"])
        assert exc.value.code == 0
        assert "Areas upserted:     9" in capsys.readouterr().out

    def test_errors_exit_one(self, monkeypatch, capsys):
        monkeypatch.setattr(
            "tech_catalog.pipeline.run_sync",
            lambda: SyncResult(errors=["languages: Linguist fetch failed"]),
        )
        with pytest.raises(SystemExit) as exc:
            cli.main(["sync"])
        assert exc.value.code == 1
        assert "languages: Linguist fetch failed" in capsys.readouterr().out


class TestSearchCommand:
    def test_prints_results(self, monkeypatch, capsys, fake_cloudant, cache):
        CatalogStore(fake_cloudant, DB).upsert_skills([
            ParsedSkill(slug="docker", name_en="Docker", name_local="Docker", popularity=10),
        ])
        service = CatalogQueryService(fake_cloudant, cache, DB)
        monkeypatch.setattr("app.queries.get_query_service", lambda: service)

        with pytest.raises(SystemExit):
            cli.main(["search", "docker"])
        out = capsys.readouterr().out
        assert "Skills (1):" in out
        assert "docker" in out


class TestCacheCommands:
    def test_stats_report_backend_and_entries(self, monkeypatch, capsys, cache):
        cache.set("tech:areas:list", [], ttl=60)
        monkeypatch.setattr("app.cache.get_cache", lambda: cache)

        with pytest.raises(SystemExit) as exc:
            cli.main(["cache-stats"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "Backend: memory" in out
        assert "Entries: 1" in out

    def test_invalidate_drops_catalog_keys_only(self, monkeypatch, capsys, cache):
        cache.set("tech:areas:list", [], ttl=60)
        cache.set("tech:skills:niche:backend", [], ttl=60)
        cache.set("unrelated:key", 1, ttl=60)
        monkeypatch.setattr("app.cache.get_cache", lambda: cache)

        with pytest.raises(SystemExit) as exc:
            cli.main(["invalidate-cache"])
        assert exc.value.code == 0
        assert cache.get("tech:areas:list") is None
        assert cache.get("tech:skills:niche:backend") is None
        assert cache.get("unrelated:key") == 1
        assert "Invalidated" in capsys.readouterr().out


class TestEnsureDb:
    def test_creates_database_and_indexes(self, monkeypatch, capsys, fake_cloudant):
        monkeypatch.setattr("app.database.get_cloudant", lambda: fake_cloudant)
        monkeypatch.setenv("CLOUDANT_DB_NAME", "fresh_db")

        ensure_cloudant_db.main()

        assert "fresh_db" in fake_cloudant.dbs
        assert {i["name"] for i in fake_cloudant.indexes} == set(ensure_cloudant_db.INDEXES)
        assert "Created database: fresh_db" in capsys.readouterr().out

    def test_existing_database_is_left_alone(self, monkeypatch, capsys, fake_cloudant):
        monkeypatch.setattr("app.database.get_cloudant", lambda: fake_cloudant)
        monkeypatch.setenv("CLOUDANT_DB_NAME", DB)

        ensure_cloudant_db.main()

        assert "Database already exists" in capsys.readouterr().out
