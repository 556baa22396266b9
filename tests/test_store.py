"""
TaskStore Test Suite
====================

Tests for the in-memory task store:
- Id assignment and reuse rules
- Partial updates and title validation
- Filtered listing
- Concurrent access

Author: jetgause
Created: 2025-12-12
"""

import threading
import unittest
from concurrent.futures import ThreadPoolExecutor

from tasktracker.errors import InputError, InvalidTitleError, TaskNotFoundError
from tasktracker.models import Task
from tasktracker.store import TaskStore


class TestTaskStoreCreate(unittest.TestCase):
    """Test suite for TaskStore.create_task."""

    def setUp(self):
        """Set up test fixtures."""
        self.store = TaskStore()

    def test_create_assigns_first_id(self):
        """First task gets id 1 with defaults applied."""
        task = self.store.create_task("Buy milk")

        self.assertEqual(task, Task(id=1, title="Buy milk", description="", completed=False))

    def test_create_with_all_fields(self):
        """Description and completed are stored as given."""
        task = self.store.create_task("Write report", "quarterly numbers", completed=True)

        self.assertEqual(task.title, "Write report")
        self.assertEqual(task.description, "quarterly numbers")
        self.assertTrue(task.completed)

    def test_ids_strictly_increasing(self):
        """Sequential creates yield 1..n with no gaps."""
        ids = [self.store.create_task(f"task {i}").id for i in range(10)]

        self.assertEqual(ids, list(range(1, 11)))

    def test_deleted_id_never_reused(self):
        """Deleting the newest task does not hand its id out again."""
        self.store.create_task("one")
        second = self.store.create_task("two")
        self.store.delete_task(second.id)

        third = self.store.create_task("three")

        self.assertEqual(third.id, 3)
        with self.assertRaises(TaskNotFoundError):
            self.store.get_task(second.id)

    def test_returned_task_is_a_copy(self):
        """Mutating a returned task does not change stored state."""
        task = self.store.create_task("original")
        task.title = "changed"
        task.completed = True

        stored = self.store.get_task(task.id)
        self.assertEqual(stored.title, "original")
        self.assertFalse(stored.completed)


class TestTaskStoreReadDelete(unittest.TestCase):
    """Test suite for get, list and delete."""

    def setUp(self):
        """Set up test fixtures."""
        self.store = TaskStore()
        self.store.create_task("a")
        self.store.create_task("b", completed=True)
        self.store.create_task("c")
        self.store.create_task("d", completed=True)
        self.store.create_task("e")

    def test_get_missing_raises(self):
        """Unknown id raises TaskNotFoundError."""
        with self.assertRaises(TaskNotFoundError) as ctx:
            self.store.get_task(99)

        self.assertEqual(ctx.exception.task_id, 99)
        self.assertEqual(ctx.exception.status_code, 404)

    def test_list_all(self):
        """No filter returns every task."""
        tasks = self.store.list_tasks()

        self.assertEqual([t.title for t in tasks], ["a", "b", "c", "d", "e"])

    def test_list_filtered(self):
        """Filter returns exactly the matching subset."""
        done = self.store.list_tasks(completed=True)
        pending = self.store.list_tasks(completed=False)

        self.assertTrue(all(t.completed for t in done))
        self.assertTrue(all(not t.completed for t in pending))
        self.assertEqual({t.id for t in done}, {2, 4})
        self.assertEqual(len(done) + len(pending), len(self.store.list_tasks()))

    def test_list_empty_store(self):
        """Empty store lists as an empty list."""
        self.assertEqual(TaskStore().list_tasks(), [])
        self.assertEqual(TaskStore().list_tasks(completed=True), [])

    def test_delete(self):
        """Deleted task disappears from get and list."""
        self.store.delete_task(3)

        with self.assertRaises(TaskNotFoundError):
            self.store.get_task(3)
        self.assertNotIn(3, [t.id for t in self.store.list_tasks()])
        self.assertEqual(len(self.store), 4)

    def test_delete_missing_raises(self):
        """Deleting twice raises on the second call."""
        self.store.delete_task(1)

        with self.assertRaises(TaskNotFoundError):
            self.store.delete_task(1)

    def test_stats(self):
        """Stats reflect counts and the next id."""
        self.store.delete_task(5)

        stats = self.store.get_stats()

        self.assertEqual(stats, {"total": 4, "completed": 2, "pending": 2, "next_id": 6})


class TestTaskStoreUpdate(unittest.TestCase):
    """Test suite for TaskStore.update_task."""

    def setUp(self):
        """Set up test fixtures."""
        self.store = TaskStore()
        self.task = self.store.create_task("Buy milk", "2 litres")

    def test_update_completed_only(self):
        """Only completed changes; title and description are kept."""
        updated = self.store.update_task(self.task.id, completed=True)

        self.assertTrue(updated.completed)
        stored = self.store.get_task(self.task.id)
        self.assertEqual(stored.title, "Buy milk")
        self.assertEqual(stored.description, "2 litres")
        self.assertTrue(stored.completed)

    def test_update_title_is_trimmed(self):
        """Supplied title is stored trimmed."""
        updated = self.store.update_task(self.task.id, title="  Buy oat milk  ")

        self.assertEqual(updated.title, "Buy oat milk")

    def test_update_description_to_empty(self):
        """An empty description is a supplied value, not an absent one."""
        updated = self.store.update_task(self.task.id, description="")

        self.assertEqual(updated.description, "")
        self.assertEqual(updated.title, "Buy milk")

    def test_update_nothing_supplied(self):
        """No fields supplied returns the task unchanged."""
        updated = self.store.update_task(self.task.id)

        self.assertEqual(updated, self.task)

    def test_blank_title_leaves_task_unchanged(self):
        """Whitespace title fails and no other supplied field is applied."""
        with self.assertRaises(InvalidTitleError) as ctx:
            self.store.update_task(
                self.task.id,
                title="   ",
                description="should not be written",
                completed=True,
            )

        self.assertIsInstance(ctx.exception, InputError)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(self.store.get_task(self.task.id), self.task)

    def test_update_missing_raises(self):
        """Unknown id raises TaskNotFoundError."""
        with self.assertRaises(TaskNotFoundError):
            self.store.update_task(42, completed=True)

    def test_missing_id_checked_before_title(self):
        """A blank title on an unknown id reports not found."""
        with self.assertRaises(TaskNotFoundError):
            self.store.update_task(42, title=" ")


class TestTaskStoreConcurrency(unittest.TestCase):
    """Concurrent access tests for TaskStore."""

    def test_concurrent_creates_get_first_n_ids(self):
        """N concurrent creates yield exactly ids 1..N."""
        store = TaskStore()
        n = 500

        with ThreadPoolExecutor(max_workers=16) as executor:
            tasks = list(executor.map(lambda i: store.create_task(f"task {i}"), range(n)))

        ids = [t.id for t in tasks]
        self.assertEqual(len(set(ids)), n)
        self.assertEqual(set(ids), set(range(1, n + 1)))
        self.assertEqual(len(store), n)

    def test_concurrent_updates_are_not_lost(self):
        """Disjoint field updates on the same task all land."""
        store = TaskStore()
        task = store.create_task("shared")
        barrier = threading.Barrier(2)

        def set_description():
            barrier.wait()
            for i in range(200):
                store.update_task(task.id, description=f"d{i}")

        def set_title():
            barrier.wait()
            for i in range(200):
                store.update_task(task.id, title=f"t{i}")

        threads = [threading.Thread(target=set_description), threading.Thread(target=set_title)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        final = store.get_task(task.id)
        self.assertEqual(final.title, "t199")
        self.assertEqual(final.description, "d199")

    def test_list_snapshot_during_writes(self):
        """Listings taken during concurrent creates and deletes stay consistent."""
        store = TaskStore()
        for i in range(100):
            store.create_task(f"seed {i}", completed=i % 2 == 0)

        def churn(i):
            task = store.create_task(f"new {i}", completed=i % 2 == 0)
            store.delete_task(task.id)

        def snapshot(_):
            tasks = store.list_tasks()
            ids = [t.id for t in tasks]
            return len(ids) == len(set(ids)) and ids == sorted(ids)

        with ThreadPoolExecutor(max_workers=8) as executor:
            writers = [executor.submit(churn, i) for i in range(200)]
            readers = list(executor.map(snapshot, range(200)))
            for future in writers:
                future.result()

        self.assertTrue(all(readers))
        self.assertEqual(len(store), 100)
        self.assertEqual(store.get_stats()["next_id"], 301)


if __name__ == "__main__":
    unittest.main()
