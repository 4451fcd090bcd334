"""
User

This module provides the User entity (an agency employee) and its repository.
"""

from tourdesk.user.model import User
from tourdesk.user.repository import UserRepository

__all__ = ["User", "UserRepository"]
