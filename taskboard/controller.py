"""
TASKBOARD - Input Controller
============================
Turns page input into store mutations and repaints after each one.
"""

import logging
from typing import Optional

from .page import TAG_INPUT, TASK_INPUT, Page
from .render import render, update_counter
from .schema import Task
from .store import TaskStore

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Por favor, preencha o nome da tarefa e a etiqueta"


class InputController:

    def __init__(self, store: TaskStore, page: Page):
        self.store = store
        self.page = page

    def repaint(self) -> None:
        self.page.show_tasks(render(self.store.tasks))
        self.page.show_counter(update_counter(self.store.tasks))

    def submit(self) -> Optional[Task]:
        """Create a task from the two input fields, or alert if one is blank"""
        name_field = self.page.field(TASK_INPUT)
        tag_field = self.page.field(TAG_INPUT)
        name = name_field.value.strip()
        tag = tag_field.value.strip()

        if not name or not tag:
            self.page.alert(VALIDATION_MESSAGE)
            return None

        task = self.store.create(name, tag)
        self.repaint()

        name_field.value = ""
        tag_field.value = ""
        self.page.focus(TASK_INPUT)
        return task

    def toggle(self, task_id: int) -> Optional[Task]:
        task = self.store.toggle_complete(task_id)
        if task:
            self.repaint()
        return task
