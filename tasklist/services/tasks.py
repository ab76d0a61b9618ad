"""In-memory task store. Every operation runs the capability gate before touching the list."""

import logging
import threading
import uuid
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from tasklist.core.errors import NOT_FOUND, Failure
from tasklist.models.task import Task
from tasklist.models.user import Identity
from tasklist.services.capability import CapabilityLevel, check_capability

logger = logging.getLogger(__name__)

DEMO_TASK_TEXT = "Try the demo"
SYSTEM_USERNAME = "system"


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TaskStore:
    """
    Ordered task list, most recently created first.

    The store owns its Task instances and only ever returns copies, so callers
    cannot mutate stored records. A lock serializes access because sync routes
    run on a thread pool.
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        make_id: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._tasks: list[Task] = [t.model_copy() for t in tasks]
        self._make_id = make_id
        self._clock = clock
        self._lock = threading.Lock()

    @classmethod
    def with_demo_task(cls) -> "TaskStore":
        """Store seeded with the single demo task created by the system user."""
        store = cls()
        store._tasks.append(
            Task(
                id=store._make_id(),
                text=DEMO_TASK_TEXT,
                done=False,
                created_at=store._clock(),
                created_by=SYSTEM_USERNAME,
            )
        )
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _find(self, task_id: str) -> int | None:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        return None

    def get(self, task_id: str) -> Task | None:
        """Copy of the task with this id, or None. Not gated; same visibility as list()."""
        with self._lock:
            idx = self._find(task_id)
            return None if idx is None else self._tasks[idx].model_copy()

    def list(self) -> list[Task]:
        """All tasks, newest first. Open to anonymous callers."""
        with self._lock:
            return [t.model_copy() for t in self._tasks]

    def create(self, text: str, caller: Identity | None) -> Task | Failure:
        failure = check_capability(caller, CapabilityLevel.AUTHENTICATED)
        if failure is not None:
            return failure
        task = Task(
            id=self._make_id(),
            text=text,
            done=False,
            created_at=self._clock(),
            created_by=caller.username,
        )
        with self._lock:
            self._tasks.insert(0, task)
        # Id only: task text may contain PII.
        logger.info("task_added", extra={"task_id": task.id})
        return task.model_copy()

    def toggle(self, task_id: str, done: bool, caller: Identity | None) -> Task | Failure:
        """Set ``done``. Any authenticated caller may toggle any task."""
        failure = check_capability(caller, CapabilityLevel.AUTHENTICATED)
        if failure is not None:
            return failure
        with self._lock:
            idx = self._find(task_id)
            if idx is None:
                return NOT_FOUND
            task = self._tasks[idx].model_copy(update={"done": bool(done)})
            self._tasks[idx] = task
        logger.info("task_toggled", extra={"task_id": task.id, "done": task.done})
        return task.model_copy()

    def delete(self, task_id: str, caller: Identity | None) -> bool | Failure:
        failure = check_capability(caller, CapabilityLevel.ADMIN)
        if failure is not None:
            return failure
        with self._lock:
            idx = self._find(task_id)
            if idx is None:
                return NOT_FOUND
            del self._tasks[idx]
        logger.warning("task_deleted", extra={"task_id": task_id})
        return True
