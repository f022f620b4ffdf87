"""
TASKBOARD - Task Store
======================
The in-memory, insertion-ordered list of tasks. Every mutation is handed
to the storage adapter right away; the list in memory stays the source of
truth when a write fails.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .schema import Task, localized_today
from .storage import StorageResult, TaskStorage

logger = logging.getLogger(__name__)

ChangeListener = Callable[["TaskStore"], None]


class TaskStore:
    """Owns the task list and its persistence"""

    def __init__(
        self,
        storage: TaskStorage,
        tasks: Optional[Iterable[Task]] = None,
        clock: Callable[[], str] = localized_today
    ):
        self.storage = storage
        self.clock = clock
        self._tasks: List[Task] = list(tasks or [])
        self._listeners: List[ChangeListener] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.is_complete)

    def on_change(self, listener: ChangeListener) -> None:
        """Call listener after every create or toggle"""
        self._listeners.append(listener)

    # ========================================
    # MUTATIONS
    # ========================================

    def next_id(self) -> int:
        if not self._tasks:
            return 1
        return max(t.id for t in self._tasks) + 1

    def create(self, name: str, tag: str) -> Task:
        """
        Append a new incomplete task and persist.

        Callers validate that name and tag are non-empty once trimmed.
        """
        task = Task(
            id=self.next_id(),
            name=name.strip(),
            tag=tag.strip(),
            is_complete=False,
            created_at=self.clock()
        )
        self._tasks.append(task)
        self.persist()
        logger.info(f"➕ New task added: [{task.id}] {task.name} ({task.tag})")
        self._notify()
        return task

    def toggle_complete(self, task_id: int) -> Optional[Task]:
        """Flip a task's completion flag; unknown ids are a logged no-op"""
        task = self.get(task_id)
        if not task:
            logger.warning(f"Task with id {task_id} not found")
            return None

        task.is_complete = not task.is_complete
        self.persist()
        logger.info(f"🔁 Task {task_id} updated: complete={task.is_complete}")
        self._notify()
        return task

    def replace(self, tasks: Iterable[Task]) -> None:
        """Adopt a loaded sequence as the store contents"""
        self._tasks = list(tasks)

    def persist(self) -> StorageResult:
        return self.storage.save(self._tasks)

    # ========================================
    # HELPER METHODS
    # ========================================

    def get(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)
