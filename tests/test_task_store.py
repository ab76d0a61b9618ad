"""Unit tests for tasklist.services.tasks: ordering, gating and immutability of task records."""

import itertools
import unittest
from datetime import UTC, datetime

from tasklist.core.errors import Failure, FailureKind
from tasklist.models.task import Task
from tasklist.models.user import Identity, Role
from tasklist.services.tasks import DEMO_TASK_TEXT, SYSTEM_USERNAME, TaskStore

USER = Identity(username="user", role=Role.USER)
ADMIN = Identity(username="admin", role=Role.ADMIN)
CREATED = datetime(2025, 8, 25, 12, 0, tzinfo=UTC)


def _store(*tasks: Task) -> TaskStore:
    counter = itertools.count(1)
    return TaskStore(tasks, make_id=lambda: f"t{next(counter)}", clock=lambda: CREATED)


def _task(task_id: str = "abc", text: str = "Flip me", created_by: str = "user") -> Task:
    return Task(id=task_id, text=text, done=False, created_at=CREATED, created_by=created_by)


class TestList(unittest.TestCase):

    def test_empty(self) -> None:
        self.assertEqual(_store().list(), [])

    def test_newest_first(self) -> None:
        store = _store()
        store.create("first", USER)
        store.create("second", USER)
        self.assertEqual([t.text for t in store.list()], ["second", "first"])

    def test_returns_copies(self) -> None:
        store = _store(_task())
        store.list()[0].done = True
        self.assertFalse(store.get("abc").done)


class TestCreate(unittest.TestCase):

    def test_records_creator(self) -> None:
        store = _store()
        task = store.create("Ship it", USER)
        self.assertEqual(task.text, "Ship it")
        self.assertFalse(task.done)
        self.assertEqual(task.created_by, "user")
        self.assertEqual(task.created_at, CREATED)
        self.assertEqual(task.id, "t1")
        self.assertEqual(len(store), 1)

    def test_anonymous_rejected_without_side_effects(self) -> None:
        store = _store()
        result = store.create("x", None)
        self.assertIsInstance(result, Failure)
        self.assertEqual(result.kind, FailureKind.NOT_AUTHENTICATED)
        self.assertEqual(len(store), 0)

    def test_logs_id_not_text(self) -> None:
        store = _store()
        with self.assertLogs("tasklist.services.tasks", level="INFO") as logs:
            task = store.create("secret plans", USER)
        record = logs.records[0]
        self.assertEqual(record.getMessage(), "task_added")
        self.assertEqual(record.task_id, task.id)
        self.assertNotIn("secret plans", logs.output[0])

    def test_ids_unique_by_default(self) -> None:
        store = TaskStore()
        ids = {store.create(str(i), USER).id for i in range(20)}
        self.assertEqual(len(ids), 20)


class TestToggle(unittest.TestCase):

    def test_sets_done(self) -> None:
        store = _store(_task())
        task = store.toggle("abc", True, USER)
        self.assertTrue(task.done)
        self.assertTrue(store.get("abc").done)

    def test_true_then_false_keeps_other_fields(self) -> None:
        original = _task()
        store = _store(original)
        store.toggle("abc", True, USER)
        final = store.toggle("abc", False, USER)
        self.assertFalse(final.done)
        self.assertEqual(
            (final.id, final.text, final.created_at, final.created_by),
            (original.id, original.text, original.created_at, original.created_by),
        )

    def test_any_authenticated_caller_may_toggle(self) -> None:
        store = _store(_task(created_by="someone-else"))
        self.assertTrue(store.toggle("abc", True, USER).done)

    def test_not_found(self) -> None:
        result = _store().toggle("nope", True, USER)
        self.assertEqual(result.kind, FailureKind.NOT_FOUND)

    def test_anonymous_rejected(self) -> None:
        store = _store(_task())
        result = store.toggle("abc", True, None)
        self.assertEqual(result.kind, FailureKind.NOT_AUTHENTICATED)
        self.assertFalse(store.get("abc").done)

    def test_anonymous_on_missing_task_is_not_authenticated(self) -> None:
        result = _store().toggle("nope", True, None)
        self.assertEqual(result.kind, FailureKind.NOT_AUTHENTICATED)


class TestDelete(unittest.TestCase):

    def test_admin_deletes(self) -> None:
        store = _store(_task("rip"))
        self.assertIs(store.delete("rip", ADMIN), True)
        self.assertIsNone(store.get("rip"))

    def test_user_rejected_and_task_kept(self) -> None:
        store = _store(_task("rip"))
        result = store.delete("rip", USER)
        self.assertEqual(result.kind, FailureKind.ADMIN_REQUIRED)
        self.assertIsNotNone(store.get("rip"))

    def test_anonymous_rejected(self) -> None:
        store = _store(_task("rip"))
        result = store.delete("rip", None)
        self.assertEqual(result.kind, FailureKind.NOT_AUTHENTICATED)
        self.assertEqual(len(store), 1)

    def test_admin_unknown_id(self) -> None:
        result = _store(_task("rip")).delete("unknown", ADMIN)
        self.assertEqual(result.kind, FailureKind.NOT_FOUND)

    def test_user_unknown_id_is_admin_required(self) -> None:
        result = _store().delete("unknown", USER)
        self.assertEqual(result.kind, FailureKind.ADMIN_REQUIRED)

    def test_logs_warning(self) -> None:
        store = _store(_task("rip"))
        with self.assertLogs("tasklist.services.tasks", level="WARNING") as logs:
            store.delete("rip", ADMIN)
        self.assertEqual(logs.records[0].getMessage(), "task_deleted")


class TestDemoSeed(unittest.TestCase):

    def test_single_demo_task(self) -> None:
        tasks = TaskStore.with_demo_task().list()
        self.assertEqual(len(tasks), 1)
        self.assertEqual(tasks[0].text, DEMO_TASK_TEXT)
        self.assertEqual(tasks[0].created_by, SYSTEM_USERNAME)
        self.assertFalse(tasks[0].done)


if __name__ == "__main__":
    unittest.main()
