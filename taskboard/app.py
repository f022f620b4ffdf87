"""
TASKBOARD - App Bootstrap
=========================
Loads persisted tasks (seeding the examples on first run), paints the page
and wires its listeners. Runs once per page session.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from .controller import InputController
from .page import ADD_BUTTON, TAG_INPUT, TASK_INPUT, TASKS_LIST, Event, Page
from .render import task_id_from_control
from .schema import create_seed_tasks, localized_today
from .storage import FileSlot, TaskStorage
from .store import TaskStore

logger = logging.getLogger(__name__)


class AppState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class App:
    """Owns the store, the page and the controller for one session"""

    def __init__(
        self,
        storage: TaskStorage,
        page: Optional[Page] = None,
        clock: Callable[[], str] = localized_today
    ):
        self.storage = storage
        self.page = page or Page()
        self.store = TaskStore(storage, create_seed_tasks(clock), clock=clock)
        self.controller = InputController(self.store, self.page)
        self.state = AppState.UNINITIALIZED

    @classmethod
    def from_settings(cls, settings, page: Optional[Page] = None) -> "App":
        storage = TaskStorage(FileSlot(settings.data_dir), key=settings.storage_key)
        return cls(storage, page=page)

    def start(self) -> "App":
        """Load or seed, first paint, attach listeners"""
        if self.state == AppState.READY:
            logger.warning("Application already initialized")
            return self

        stored = self.storage.load().tasks
        if stored:
            self.store.replace(stored)
        else:
            self.store.persist()

        self.controller.repaint()
        self._bind()

        self.state = AppState.READY
        logger.info(f"🚀 Application initialized with {len(self.store)} tasks")
        return self

    # ========================================
    # LISTENERS
    # ========================================

    def _bind(self) -> None:
        self.page.add_event_listener(TASKS_LIST, "click", self._on_list_click)
        self.page.add_event_listener(ADD_BUTTON, "click", self._on_submit)
        self.page.add_event_listener(TASK_INPUT, "keypress", self._on_enter)
        self.page.add_event_listener(TAG_INPUT, "keypress", self._on_enter)

    def _on_list_click(self, event: Event) -> None:
        task_id = task_id_from_control(event.target)
        if task_id is None:
            return
        for item in self.page.task_list.items:
            if item.task_id == task_id and item.control.actionable:
                self.controller.toggle(task_id)
                return

    def _on_submit(self, event: Event) -> None:
        self.controller.submit()

    def _on_enter(self, event: Event) -> None:
        if event.key == "Enter":
            self.controller.submit()
