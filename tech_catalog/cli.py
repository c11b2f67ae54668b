"""
CLI entrypoint for the tech catalog.

Usage:
    python -m tech_catalog.cli sync
    python -m tech_catalog.cli preview-languages [--limit 20]
    python -m tech_catalog.cli preview-skills [--limit 20] [--max-pages 1]
    python -m tech_catalog.cli search QUERY [--limit 20]
    python -m tech_catalog.cli ensure-db
    python -m tech_catalog.cli cache-stats
    python -m tech_catalog.cli invalidate-cache
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()


def _cmd_sync(_args: argparse.Namespace) -> int:
    from tech_catalog.pipeline import run_sync

    result = run_sync()
    print(f"Areas upserted:     {result.areas_created}")
    print(f"Niches upserted:    {result.niches_created}")
    print(f"Languages:          {result.languages_inserted} inserted, {result.languages_updated} updated")
    print(f"Skills:             {result.skills_inserted} inserted, {result.skills_updated} updated")
    if result.errors:
        print(f"Errors ({len(result.errors)}):")
        for err in result.errors:
            print(f"  - {err}")
        return 1
    print("Done.")
    return 0


def _cmd_preview_languages(args: argparse.Namespace) -> int:
    from tech_catalog.pipeline import build_linguist_parser, make_http_client

    with make_http_client() as http:
        languages = build_linguist_parser(http).fetch_and_parse()
    print(f"{len(languages)} programming languages; top {min(args.limit, len(languages))}:")
    for lang in languages[:args.limit]:
        typing = lang.typing or "-"
        print(f"  {lang.popularity:>5}  {lang.slug:<20} {lang.name_en} ({lang.name_local}) [{typing}]")
    return 0


def _cmd_preview_skills(args: argparse.Namespace) -> int:
    from tech_catalog.pipeline import build_tag_parser, make_http_client

    with make_http_client() as http:
        skills = build_tag_parser(http, max_pages=args.max_pages).fetch_and_parse()
    print(f"{len(skills)} skills; top {min(args.limit, len(skills))}:")
    for skill in skills[:args.limit]:
        niche = skill.niche_slug or "-"
        print(f"  {skill.popularity:>8}  {skill.slug:<24} {skill.type.value:<12} {niche:<18} {skill.name_en}")
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    from app.queries import get_query_service

    results = get_query_service().search_all(args.query, limit=args.limit)
    print(f"Languages ({len(results.languages)}):")
    for lang in results.languages:
        print(f"  {lang.slug:<20} {lang.name_en}")
    print(f"Skills ({len(results.skills)}):")
    for skill in results.skills:
        niche = skill.niche.slug if skill.niche else "-"
        print(f"  {skill.slug:<24} {skill.type:<12} {niche:<18} {skill.name_en}")
    return 0


def _cmd_ensure_db(_args: argparse.Namespace) -> int:
    from tech_catalog.scripts.ensure_cloudant_db import main as ensure_main
    ensure_main()
    return 0


def _cmd_cache_stats(_args: argparse.Namespace) -> int:
    from app.cache import get_cache

    stats = get_cache().get_stats()
    print(f"Backend: {stats.pop('backend')}")
    for name, value in stats.items():
        print(f"{name.capitalize()}: {value}")
    return 0


def _cmd_invalidate_cache(_args: argparse.Namespace) -> int:
    from app.cache import get_cache
    from app.queries import invalidate_catalog_cache

    removed = invalidate_catalog_cache(get_cache())
    print(f"Invalidated {removed} catalog cache keys.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tech catalog: language and skill sync and lookup",
        prog="python -m tech_catalog.cli",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("sync", help="Fetch sources and upsert the catalog into Cloudant").set_defaults(func=_cmd_sync)

    lang_parser = subparsers.add_parser("preview-languages", help="Fetch and parse Linguist languages without writing")
    lang_parser.add_argument("--limit", type=int, default=20, help="Rows to print (default 20)")
    lang_parser.set_defaults(func=_cmd_preview_languages)

    skills_parser = subparsers.add_parser("preview-skills", help="Fetch and classify tags without writing")
    skills_parser.add_argument("--limit", type=int, default=20, help="Rows to print (default 20)")
    skills_parser.add_argument("--max-pages", type=int, default=1, help="Tag pages to fetch (default 1)")
    skills_parser.set_defaults(func=_cmd_preview_skills)

    search_parser = subparsers.add_parser("search", help="Search languages and skills in the catalog")
    search_parser.add_argument("query", type=str, help="Search text")
    search_parser.add_argument("--limit", type=int, default=20, help="Total results, split between languages and skills")
    search_parser.set_defaults(func=_cmd_search)

    subparsers.add_parser("ensure-db", help="Create Cloudant database and indexes if missing").set_defaults(func=_cmd_ensure_db)
    subparsers.add_parser("cache-stats", help="Show the cache backend and its key count").set_defaults(func=_cmd_cache_stats)
    subparsers.add_parser("invalidate-cache", help="Drop every cached catalog read").set_defaults(func=_cmd_invalidate_cache)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    exit_code = args.func(args)
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
