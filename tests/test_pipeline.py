"""Tests for sync composition from settings."""

from app.config import Settings
from tech_catalog import pipeline
from tech_catalog.sync import TechCatalogSync


class TestBuildSync:
    def test_wires_settings_into_parsers(self, make_http, fake_cloudant, cache):
        cfg = Settings(cloudant_db_name="custom_db", tag_max_pages=3, stackexchange_key="abc")
        http = make_http(lambda request: None)

        sync = pipeline.build_sync(http, client=fake_cloudant, cache=cache, cfg=cfg)

        assert isinstance(sync, TechCatalogSync)
        assert sync.store.db_name == "custom_db"
        assert sync.tag_parser.max_pages == 3
        assert sync.tag_parser.api_key == "abc"
        assert sync.linguist_parser.url == cfg.linguist_url
        assert sync.cache is cache

    def test_preview_override_of_max_pages(self, make_http):
        parser = pipeline.build_tag_parser(make_http(lambda request: None), max_pages=1)
        assert parser.max_pages == 1

    def test_empty_key_is_not_sent(self, make_http):
        parser = pipeline.build_tag_parser(make_http(lambda request: None), cfg=Settings(stackexchange_key=""))
        assert parser.api_key is None


class TestRunSync:
    def test_setup_failure_is_reported_not_raised(self, monkeypatch):
        def no_credentials():
            raise RuntimeError("Set CLOUDANT_URL and CLOUDANT_APIKEY in .env")

        monkeypatch.setattr(pipeline, "get_cloudant", no_credentials)
        result = pipeline.run_sync()

        assert result.errors == ["setup: Set CLOUDANT_URL and CLOUDANT_APIKEY in .env"]
        assert result.languages_inserted == 0
