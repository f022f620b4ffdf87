"""
TASKBOARD - Task List Manager
=============================

Tagged tasks, a completion counter, and a task list that survives reloads.

Usage:
    from taskboard import App, TaskStorage, FileSlot

    app = App(TaskStorage(FileSlot(".taskboard"))).start()

    app.page.type_text("taskInput", "Buy milk")
    app.page.type_text("tagInput", "errand")
    app.page.click("addTaskBtn")

    app.page.click("complete-btn-4")
    print(app.page.completed_count, app.page.completed_label)
"""

from .schema import (
    Task,
    TaskSequence,
    SEED_TASKS,
    create_seed_tasks
)
from .storage import (
    TaskStorage,
    StorageResult,
    StorageErrorKind,
    FileSlot,
    MemorySlot
)
from .store import TaskStore
from .render import render, update_counter, TaskListView, CounterView
from .page import Page
from .controller import InputController
from .app import App, AppState
from .errors import TaskboardError, ElementNotFoundError

__version__ = "1.0.0"
__all__ = [
    "App",
    "AppState",
    "Task",
    "TaskSequence",
    "SEED_TASKS",
    "create_seed_tasks",
    "TaskStorage",
    "StorageResult",
    "StorageErrorKind",
    "FileSlot",
    "MemorySlot",
    "TaskStore",
    "render",
    "update_counter",
    "TaskListView",
    "CounterView",
    "Page",
    "InputController",
    "TaskboardError",
    "ElementNotFoundError"
]
