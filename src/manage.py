"""Storefront database management CLI.

Creates or drops the relational schema (Users, Products, Orders, OrderItems)
for the SQL provider selected by PROTEAN_ENV.

Usage:
    PROTEAN_ENV=sqlite python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=sqlite python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def _domain():
    from storefront.domain import storefront

    print("Initializing storefront domain...")
    storefront.init()
    return storefront


def setup_database():
    """Create the schema for every configured SQL provider."""
    from storefront.utils.db import setup_db

    created = setup_db(_domain())
    if not created:
        print("No SQL provider configured (set PROTEAN_ENV=sqlite or production); nothing to create.")
        return
    for provider in created:
        print(f"  schema ready on provider '{provider}'.")
    print("Done.")


def drop_database():
    """Drop the schema for every configured SQL provider."""
    from storefront.utils.db import drop_db

    dropped = drop_db(_domain())
    if not dropped:
        print("No SQL provider configured (set PROTEAN_ENV=sqlite or production); nothing to drop.")
        return
    for provider in dropped:
        print(f"  schema dropped on provider '{provider}'.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
