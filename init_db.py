"""
Database initialization script.

This script creates all database tables and seeds the tag catalog and the
staff roster from the configured data file. It is only useful with a
persistent DATABASE_URL; the default in-memory database is rebuilt by the
service on every start.

Usage:
    python init_db.py
    python init_db.py --reset
"""

import sys
from config.governance_config import GovernanceConfig
from database import DatabaseManager, StaffStore
from src.exceptions import GovernanceError
from src.services.staff_import import StaffImportService


def seed_database(db: DatabaseManager, config: GovernanceConfig):
    """Seed the tag catalog and, if the roster is empty, the staff records."""
    store = StaffStore(db)

    added_tags = store.add_catalog_tags(config.default_tags)
    print(f"🏷️  Catalog tags added: {added_tags}")

    if store.list_staff():
        print("📋 Staff roster already populated, skipping import")
        return

    if not config.staff_data_path:
        print("⚠️  No staff_data_path configured, skipping import")
        return

    count = StaffImportService(store, config.max_tags).load_file(config.staff_data_path)
    print(f"👥 Staff records imported: {count}")


def init_database():
    """Initialize the database by creating all tables and seeding data."""
    print("="*60)
    print("Database Initialization")
    print("="*60 + "\n")

    try:
        config = GovernanceConfig.from_file()

        print("Connecting to database...")
        db = DatabaseManager()

        # Test connection
        if not db.health_check():
            print("❌ Database connection failed!")
            print("\nPlease check DATABASE_URL in .env")
            sys.exit(1)

        print("✅ Database connection successful!\n")

        print("Creating database tables...")
        db.create_tables()

        print("Seeding data...")
        seed_database(db, config)

        print("\n" + "="*60)
        print("Database initialized successfully! ✅")
        print("="*60)
        print("\nTables created:")
        print("  - staff")
        print("  - tags")
        print("  - tag_change_requests")

    except GovernanceError as e:
        print(f"❌ Seed data error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"❌ Error initializing database: {e}")
        sys.exit(1)


def reset_database():
    """
    Reset the database by dropping and recreating all tables.

    WARNING: This will delete all data!
    """
    print("="*60)
    print("⚠️  DATABASE RESET WARNING ⚠️")
    print("="*60)
    print("\nThis will DELETE ALL DATA in your database!")
    print("Are you sure you want to continue? (yes/no): ", end="")

    confirmation = input().strip().lower()

    if confirmation != 'yes':
        print("Reset cancelled.")
        return

    try:
        config = GovernanceConfig.from_file()
        db = DatabaseManager()

        print("Dropping all tables...")
        db.drop_tables()

        print("\nCreating fresh tables...")
        db.create_tables()
        seed_database(db, config)

        print("\n" + "="*60)
        print("Database reset complete! ✅")
        print("="*60)

    except Exception as e:
        print(f"❌ Error resetting database: {e}")
        sys.exit(1)


def main():
    """Main function to handle command line arguments."""
    if len(sys.argv) > 1 and sys.argv[1] == '--reset':
        reset_database()
    else:
        init_database()


if __name__ == "__main__":
    main()
