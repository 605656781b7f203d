"""Brewbar management CLI.

Creates and drops database schemas for all domains, and seeds the menu from
a JSON file shaped like ``{"menu": [{"id", "title", "desc", "price"}, ...]}``.

Usage:
    python src/manage.py setup-db                 # Create all tables
    python src/manage.py drop-db                  # Drop all tables
    python src/manage.py load-menu data/menu.json # Replace the menu
"""

import argparse
import json
import sys
from pathlib import Path

from shared.logging import configure_logging

DOMAIN_NAMES = ["identity", "catalogue", "ordering"]


def _domains(names=None):
    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering

    all_domains = {
        "identity": identity,
        "catalogue": catalogue,
        "ordering": ordering,
    }
    return {name: all_domains[name] for name in names} if names else all_domains


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def load_menu(path):
    """Replace the menu with the items listed in the JSON file at ``path``."""
    from catalogue.domain import catalogue
    from catalogue.menu.management import LoadMenu

    entries = json.loads(Path(path).read_text(encoding="utf-8"))["menu"]

    catalogue.init()
    with catalogue.domain_context():
        loaded = catalogue.process(LoadMenu(items=json.dumps(entries)), asynchronous=False)

    print(f"Loaded {loaded} menu items.")
    return loaded


def main():
    configure_logging()

    parser = argparse.ArgumentParser(description="Brewbar management")
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

    load_parser = subparsers.add_parser("load-menu", help="Replace the menu from a JSON file")
    load_parser.add_argument("path", help="JSON file with a top-level 'menu' list")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "load-menu":
        load_menu(args.path)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
