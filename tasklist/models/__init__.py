"""Domain models: users, caller identities and tasks."""

from tasklist.models.task import Task
from tasklist.models.user import DEFAULT_USERS, Identity, Role, User

__all__ = ["DEFAULT_USERS", "Identity", "Role", "Task", "User"]
