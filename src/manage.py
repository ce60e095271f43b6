"""FoodOrder database management CLI.

Provides commands to create and drop database schemas for all domains,
and to load the starter menu.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Add the starter menu
"""

import argparse
import sys

DOMAIN_NAMES = ["catalogue", "ordering"]


def _domains():
    from catalogue.domain import catalogue
    from ordering.domain import ordering

    return {"catalogue": catalogue, "ordering": ordering}


def _initialized(domains=None):
    # Ordering resolves prices through the catalogue, so it is always initialized first
    all_domains = _domains()
    for name in DOMAIN_NAMES:
        print(f"Initializing {name} domain...")
        all_domains[name].init()
    return {d: all_domains[d] for d in domains} if domains else all_domains


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name, domain in _initialized(domains).items():
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name, domain in _initialized(domains).items():
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def seed():
    """Load the starter menu into the catalogue."""
    from catalogue.seed import seed_menu

    _initialized()
    created = seed_menu()
    print(f"Added {len(created)} menu item(s).")
    print("Done.")


def main():
    from shared.logging import configure_logging

    parser = argparse.ArgumentParser(description="FoodOrder database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    subparsers.add_parser("seed", help="Add the starter menu")

    args = parser.parse_args()
    configure_logging(log_dir=None)

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed":
        seed()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
