from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    cloudant_url: str = ""
    cloudant_apikey: str = ""
    cloudant_db_name: str = "tech_catalog"
    cloudant_timeout: int = 45

    # Empty means the in-process memory cache
    redis_url: str = ""

    linguist_url: str = (
        "https://raw.githubusercontent.com/github-linguist/linguist/main/lib/linguist/languages.yml"
    )
    stackexchange_url: str = "https://api.stackexchange.com/2.3/tags"
    stackexchange_site: str = "stackoverflow"
    stackexchange_key: str = ""
    tag_page_size: int = 100
    tag_max_pages: int = 10
    tag_page_delay: float = 0.1
    http_timeout: float = 30.0

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
