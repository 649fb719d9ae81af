"""CLI entry point for the internship matcher."""

import argparse
import logging
import sys
from pathlib import Path

from internmatch.core.catalog import SAMPLE_CATALOG, load_catalog, location_options
from internmatch.core.config import Settings
from internmatch.core.schemas import Profile, RankedEntry, Record
from internmatch.pipeline.exporter import format_explanation, write_csv
from internmatch.pipeline.ranker import find_entry, rank

DEFAULT_CONFIG = "config/settings.yaml"

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Internship matcher - rank internships against a student profile",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- recommend subcommand (default) ---
    recommend_parser = subparsers.add_parser("recommend", help="Rank the catalog for a profile")
    _add_common_args(recommend_parser)
    recommend_parser.add_argument(
        "--profile",
        help="Path to a profile YAML file; flags below override its fields",
    )
    recommend_parser.add_argument("--name", help="Student name")
    recommend_parser.add_argument(
        "--skill",
        action="append",
        default=[],
        help="Skill to add (repeatable)",
    )
    recommend_parser.add_argument("--interests", help="Interests, free-form")
    recommend_parser.add_argument("--location", help="Preferred location (default: Any)")
    recommend_parser.add_argument("--free-text", help="Anything else about the student")
    recommend_parser.add_argument(
        "--explain",
        type=int,
        metavar="ID",
        help="Record id to explain (default: the top-ranked record)",
    )
    recommend_parser.add_argument(
        "--export",
        choices=["csv"],
        help="Export results to format (csv)",
    )
    recommend_parser.add_argument(
        "--output",
        help="Export path (default: export.path from settings)",
    )

    # --- catalog subcommand ---
    catalog_parser = subparsers.add_parser("catalog", help="List the internship catalog")
    _add_common_args(catalog_parser)

    args = parser.parse_args(argv)

    # Default to recommend when no subcommand given
    if args.command is None:
        args = recommend_parser.parse_args([])
        args.command = "recommend"

    return args


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help=f"Path to settings YAML file (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--catalog",
        help="Path to a catalog YAML/JSON file (default: catalog.path or built-in samples)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_settings(path: str) -> Settings:
    """Load settings; a missing default config file means built-in defaults."""
    if path == DEFAULT_CONFIG and not Path(path).exists():
        logger.debug("No %s found, using default settings", path)
        return Settings()
    return Settings.from_yaml(path)


def resolve_catalog(settings: Settings, override: str | None) -> tuple[Record, ...]:
    path = override or settings.catalog.path
    if path is None:
        return SAMPLE_CATALOG
    return load_catalog(path)


def build_profile(args: argparse.Namespace, settings: Settings) -> Profile:
    """Assemble a Profile from an optional YAML file plus command-line fields.

    This is the collector: it checks the location against the configured
    options before handing the profile to the engine.
    """
    profile = Profile.from_yaml(args.profile) if args.profile else Profile()

    updates: dict[str, str] = {}
    if args.name is not None:
        updates["name"] = args.name
    if args.interests is not None:
        updates["interests"] = args.interests
    if args.location is not None:
        updates["location_preference"] = args.location
    if args.free_text is not None:
        updates["free_text"] = args.free_text
    if updates:
        profile = profile.edit(**updates)

    for skill in args.skill:
        profile = profile.with_skill(skill)

    options = settings.profile.location_options
    if profile.location_preference not in options:
        msg = f"location must be one of {options}, got '{profile.location_preference}'"
        raise ValueError(msg)
    return profile


def print_ranking(entries: list[RankedEntry]) -> None:
    if not entries:
        print("No internships in the catalog.")
        return
    for entry in entries:
        r = entry.record
        print(f"{entry.rank:>3}. [{entry.score:>3}] {r.title} - {r.org}")
        print(f"       {r.location} | {r.duration} | {r.stipend} | skills: {', '.join(r.skills)}")


def cmd_recommend(args: argparse.Namespace, settings: Settings) -> None:
    """Handle recommend subcommand."""
    catalog = resolve_catalog(settings, args.catalog)
    profile = build_profile(args, settings)

    entries = rank(profile, catalog)
    selected = entries[0] if entries and args.explain is None else None
    if args.explain is not None:
        selected = find_entry(entries, args.explain)
        if selected is None:
            msg = f"record id {args.explain} is not in the catalog"
            raise ValueError(msg)

    greeting = f" for {profile.name}" if profile.name else ""
    print(f"Recommendations{greeting} ({len(entries)} internships):")
    print_ranking(entries)

    if selected is not None:
        print()
        print("\n".join(format_explanation(selected)))

    if args.export == "csv":
        path = write_csv(entries, args.output or settings.export.path)
        print(f"\nCSV written to {path}")


def cmd_catalog(args: argparse.Namespace, settings: Settings) -> None:
    """Handle catalog subcommand."""
    catalog = resolve_catalog(settings, args.catalog)
    print(f"{len(catalog)} internships:")
    for r in catalog:
        print(f"  #{r.id} {r.title} - {r.org} ({r.location}, {r.duration}, {r.stipend})")
        print(f"      skills: {', '.join(r.skills)}")
    locations = location_options(catalog)
    if locations:
        print(f"Locations: {', '.join(locations)}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "catalog":
            cmd_catalog(args, settings)
        else:
            cmd_recommend(args, settings)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
