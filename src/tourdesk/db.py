"""
Database connection and query utilities.

Provides a small connection provider around psycopg. Every call opens its
own connection, commits on success, rolls back on error and closes the
connection on every exit path. Rows come back as dictionaries.

For testing, use set_connection_override() to inject a connection
that will be used instead of creating new ones. This enables
transaction rollback between tests.
"""

from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.rows import dict_row

from tourdesk.config import Config
from tourdesk.logger import get_logger

logger = get_logger(__name__)


class Database:
    """Connection provider bound to an explicit Config."""

    def __init__(self, config: Config):
        self.config = config
        self._connection_override: psycopg.Connection | None = None

    # =========================================================================
    # Connection Override (for testing)
    # =========================================================================

    def set_connection_override(self, conn: psycopg.Connection) -> None:
        """
        Set a connection to use instead of creating new ones.

        Used by test fixtures to ensure all database operations run
        within a single transaction that can be rolled back.
        """
        self._connection_override = conn

    def clear_connection_override(self) -> None:
        """Clear the connection override, restoring normal behavior."""
        self._connection_override = None

    # =========================================================================
    # Connection Management
    # =========================================================================

    @contextmanager
    def connection(self):
        """
        Context manager for database connections.

        In normal operation:
            - Opens a new connection
            - Commits on successful exit
            - Rolls back on exception
            - Closes connection when done

        With override set (testing):
            - Returns the override connection
            - Does NOT commit, rollback, or close
            - Caller (test fixture) manages the transaction
        """
        if self._connection_override is not None:
            yield self._connection_override
            return

        conn = psycopg.connect(
            self.config.database_url,
            connect_timeout=self.config.connect_timeout,
        )
        try:
            yield conn
            conn.commit()
        except Exception as e:
            logger.error("Rolling back after database error: %s", e)
            conn.rollback()
            raise
        finally:
            conn.close()

    @contextmanager
    def cursor(self):
        """
        Context manager for a cursor with dict rows.

        Usage:
            with database.cursor() as cur:
                cur.execute("SELECT * FROM tourist")
                rows = cur.fetchall()  # List of dicts
        """
        with self.connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                yield cur

    # =========================================================================
    # Query Helpers
    # =========================================================================

    def execute(self, query: str, params: tuple = None) -> int:
        """
        Execute a statement and return the number of affected rows.

        Args:
            query: SQL query with %s placeholders
            params: Tuple of parameter values
        """
        with self.cursor() as cur:
            cur.execute(query, params)
            return cur.rowcount

    def fetch_one(self, query: str, params: tuple = None) -> dict[str, Any] | None:
        """
        Execute a query and return a single row as dict.

        Also used for INSERT/UPDATE/DELETE ... RETURNING statements.

        Returns:
            Dict of column names to values, or None if no row found
        """
        with self.cursor() as cur:
            cur.execute(query, params)
            return cur.fetchone()

    def fetch_all(self, query: str, params: tuple = None) -> list[dict[str, Any]]:
        """
        Execute a query and return all rows as list of dicts.

        Returns:
            List of dicts, empty list if no rows found
        """
        with self.cursor() as cur:
            cur.execute(query, params)
            return cur.fetchall()

    def execute_script(self, script: str) -> None:
        """Run a multi-statement SQL script, such as the bundled schema."""
        with self.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(script)
