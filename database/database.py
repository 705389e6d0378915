"""
Database configuration and utilities.

This module provides database connection management, session handling,
and table creation utilities using SQLAlchemy.

The default backend is an in-memory SQLite database, so roster and approval
state lives for the lifetime of the process. Point DATABASE_URL at another
database to keep state across restarts.
"""

import os
from contextlib import contextmanager
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv
# Import Base and models to ensure they're registered
from database.models import Base

# Load environment variables
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite://"


class DatabaseManager:
    """
    Manages database connections and sessions.

    This class provides a centralized way to manage database connections,
    create sessions, and initialize the database schema.
    """

    def __init__(self, database_url: str = None):
        """
        Initialize the database manager.

        Args:
            database_url: Optional database URL. If not provided,
                         reads from DATABASE_URL environment variable and
                         falls back to an in-memory SQLite database.
        """
        self.database_url = (
            database_url or os.getenv('DATABASE_URL') or DEFAULT_DATABASE_URL
        )

        # Create engine
        if self.database_url.startswith("sqlite"):
            # One shared connection keeps an in-memory database alive
            # across sessions
            self.engine = create_engine(
                self.database_url,
                echo=False,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool
            )
        else:
            self.engine = create_engine(
                self.database_url,
                echo=False,  # Set to True to see SQL queries
                pool_pre_ping=True,  # Verify connections before using them
                pool_size=5,  # Connection pool size
                max_overflow=10  # Max connections beyond pool_size
            )

        # Create session factory
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def create_tables(self):
        """
        Create all tables defined in the models.

        Tables that already exist will not be modified.
        """
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data in the tables!
        """
        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session_scope(self):
        """
        Provide a transactional scope for database operations.

        Usage:
            with db.session_scope() as session:
                session.add(staff_member)
                # Automatically commits on success, rolls back on error

        Yields:
            Session: SQLAlchemy session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def health_check(self) -> bool:
        """
        Check if database connection is healthy.

        Returns:
            bool: True if connection is healthy, False otherwise
        """
        try:
            with self.session_scope() as session:
                session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            print(f"Database health check failed: {e}")
            return False


# Create a single database manager instance when module is imported
# This ensures connection pooling is shared across the application
db_manager = DatabaseManager()
