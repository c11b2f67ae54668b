"""
Create the catalog database (default tech_catalog) and its query indexes.

Usage:
    python -m tech_catalog.scripts.ensure_cloudant_db

Requires CLOUDANT_URL and CLOUDANT_APIKEY in the environment (or .env).
Safe to re-run: an existing database is left alone and Cloudant treats an
identical index definition as a no-op.
"""

from dotenv import load_dotenv
from ibmcloudant.cloudant_v1 import IndexDefinition, IndexField

load_dotenv()

# Every read filters on the family discriminator "type" first.
INDEXES: dict[str, list[str]] = {
    "type-index": ["type"],
    "type-slug-index": ["type", "slug"],
    "type-area-index": ["type", "area_type"],
    "type-niche-index": ["type", "niche_slug"],
    "type-skill-type-index": ["type", "skill_type"],
}


def ensure_indexes(client, db_name: str) -> list[str]:
    """Create the JSON indexes; returns the index names."""
    for name, fields in INDEXES.items():
        index = IndexDefinition(fields=[IndexField(**{field: "asc"}) for field in fields])
        client.post_index(db=db_name, ddoc="tech-catalog", index=index, name=name, type="json").get_result()
    return list(INDEXES)


def main() -> None:
    from app.config import Settings
    from app.database import ensure_database, get_cloudant

    db_name = Settings().cloudant_db_name
    try:
        client = get_cloudant()
    except RuntimeError as e:
        raise SystemExit(str(e))

    if ensure_database(client, db_name):
        print(f"Created database: {db_name}")
    else:
        print(f"Database already exists: {db_name}")

    names = ensure_indexes(client, db_name)
    print(f"Ensured {len(names)} indexes: {', '.join(names)}")


if __name__ == "__main__":
    main()
