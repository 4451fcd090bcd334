from typing import Optional

from tourdesk.logger import get_logger
from tourdesk.repository import SqlRepository
from tourdesk.user.model import User

logger = get_logger(__name__)


class UserRepository(SqlRepository[User]):
    """
    Repository for agency users.
    Encapsulates all SQL and queries for the users table.
    """

    entity_name = "User"

    def find_one(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        logger.debug("Finding User by id %s", user_id)
        with self._store("find_one", user_id):
            row = self.db.fetch_one(
                "SELECT id, username, password FROM users WHERE id = %s",
                (user_id,),
            )
        if row is None:
            logger.debug("User not found with id %s", user_id)
            return None
        return self._row_to_user(row)

    def find_by_username(self, username: str) -> Optional[User]:
        """Get user by username, used when an employee logs in."""
        with self._store("find_by_username"):
            row = self.db.fetch_one(
                "SELECT id, username, password FROM users WHERE username = %s",
                (username,),
            )
        return self._row_to_user(row) if row else None

    def find_all(self) -> list[User]:
        """List all users."""
        with self._store("find_all"):
            rows = self.db.fetch_all("SELECT id, username, password FROM users ORDER BY id")
        logger.debug("Found %d Users", len(rows))
        return [self._row_to_user(r) for r in rows]

    def save(self, user: User) -> User:
        """Create a new user."""
        self._require_text(user.username, "username")
        self._require_text(user.password, "password")
        with self._store("save"):
            row = self.db.fetch_one(
                """
                INSERT INTO users (username, password)
                VALUES (%s, %s)
                RETURNING id, username, password
                """,
                (user.username, user.password),
            )
        saved = self._row_to_user(row)
        logger.debug("Saved %s", saved)
        return saved

    def delete(self, user_id: int) -> Optional[User]:
        """Delete a user. Purchases referencing it are left untouched."""
        with self._store("delete", user_id):
            row = self.db.fetch_one(
                "DELETE FROM users WHERE id = %s RETURNING id, username, password",
                (user_id,),
            )
        logger.debug("Deleted User %s: %s", user_id, row is not None)
        return self._row_to_user(row) if row else None

    def update(self, user_id: int, user: User) -> Optional[User]:
        """Change a user's password."""
        self._require_text(user.password, "password")
        with self._store("update", user_id):
            row = self.db.fetch_one(
                "UPDATE users SET password = %s WHERE id = %s RETURNING id, username, password",
                (user.password, user_id),
            )
        logger.debug("Updated User %s: %s", user_id, row is not None)
        return self._row_to_user(row) if row else None

    @staticmethod
    def _row_to_user(row: dict) -> User:
        return User(id=row["id"], username=row["username"], password=row["password"])
