"""Marketplace database management CLI.

Creates and drops the SQLAlchemy schemas of every domain, including the
unique keys that stop duplicate reviews and duplicate pending reports.
Domains on the in-memory provider are skipped.

Usage:
    python src/manage.py setup-db                    # Create all tables
    python src/manage.py drop-db --domain tips       # Drop one domain's tables
"""

import argparse

from domains import DOMAIN_NAMES, get_domain
from shared.db import drop_db, setup_db

ACTIONS = {
    "setup-db": (setup_db, "Creating", "ready"),
    "drop-db": (drop_db, "Dropping", "dropped"),
}


def run(command, domain_names=None):
    action, verb, outcome = ACTIONS[command]
    for name in domain_names or DOMAIN_NAMES:
        domain = get_domain(name)
        print(f"{verb} {name} database schema...")
        action(domain)
        print(f"  {name} schema {outcome}.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Marketplace database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (("setup-db", "Create database tables"), ("drop-db", "Drop database tables")):
        subparser = subparsers.add_parser(command, help=help_text)
        subparser.add_argument(
            "--domain",
            choices=DOMAIN_NAMES,
            nargs="*",
            help="Specific domain(s) to act on (default: all)",
        )

    args = parser.parse_args()
    run(args.command, args.domain)


if __name__ == "__main__":
    main()
