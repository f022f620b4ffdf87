"""
TASKBOARD - Page
================
The hosting document: the six named elements the app reads and writes,
plus a small event dispatcher.

Clicks on a completion control bubble to the task list container, so a
single listener there serves every rendered item.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel

from .errors import ElementNotFoundError
from .render import CounterView, TaskListView

logger = logging.getLogger(__name__)

TASK_INPUT = "taskInput"
TAG_INPUT = "tagInput"
ADD_BUTTON = "addTaskBtn"
TASKS_LIST = "tasksList"
COMPLETED_COUNT = "completedCount"
COMPLETED_LABEL = "completedLabel"

ELEMENT_IDS = (TASK_INPUT, TAG_INPUT, ADD_BUTTON, TASKS_LIST, COMPLETED_COUNT, COMPLETED_LABEL)


class Event(BaseModel):
    type: str                    # "click" or "keypress"
    target: str                  # element id the event started on
    key: Optional[str] = None


Listener = Callable[[Event], None]
AlertHandler = Callable[[str], None]


class InputField(BaseModel):
    element_id: str
    value: str = ""


class Page:
    """In-process document with the task list's view boundary"""

    def __init__(self, alert_handler: Optional[AlertHandler] = None):
        self.inputs: Dict[str, InputField] = {
            TASK_INPUT: InputField(element_id=TASK_INPUT),
            TAG_INPUT: InputField(element_id=TAG_INPUT),
        }
        self.task_list = TaskListView()
        self.completed_count = ""
        self.completed_label = ""
        self.focused: Optional[str] = None
        self.alerts: List[str] = []
        self.alert_handler = alert_handler
        self._listeners: Dict[Tuple[str, str], List[Listener]] = {}

    # ========================================
    # ELEMENTS
    # ========================================

    def _check(self, element_id: str) -> None:
        if element_id not in ELEMENT_IDS:
            raise ElementNotFoundError(element_id)

    def field(self, element_id: str) -> InputField:
        if element_id not in self.inputs:
            raise ElementNotFoundError(element_id)
        return self.inputs[element_id]

    def type_text(self, element_id: str, text: str) -> None:
        self.field(element_id).value = text

    def focus(self, element_id: str) -> None:
        self._check(element_id)
        self.focused = element_id

    def show_tasks(self, view: TaskListView) -> None:
        """Replace the whole content of the task list container"""
        self.task_list = view

    def show_counter(self, counter: CounterView) -> None:
        self.completed_count = str(counter.count)
        self.completed_label = counter.label

    def alert(self, message: str) -> None:
        """Blocking message to the user"""
        self.alerts.append(message)
        logger.debug(f"Alert: {message}")
        if self.alert_handler:
            self.alert_handler(message)

    # ========================================
    # EVENTS
    # ========================================

    def add_event_listener(self, element_id: str, event_type: str, listener: Listener) -> None:
        self._check(element_id)
        self._listeners.setdefault((element_id, event_type), []).append(listener)

    def _owner(self, element_id: str) -> str:
        """Element whose listeners receive an event started on element_id"""
        if element_id in ELEMENT_IDS:
            return element_id
        for item in self.task_list.items:
            if element_id in (item.element_id, item.control.element_id):
                return TASKS_LIST
        raise ElementNotFoundError(element_id)

    def dispatch(self, event: Event) -> None:
        owner = self._owner(event.target)
        for listener in list(self._listeners.get((owner, event.type), [])):
            listener(event)

    def click(self, element_id: str) -> None:
        self.dispatch(Event(type="click", target=element_id))

    def keypress(self, element_id: str, key: str) -> None:
        self.dispatch(Event(type="keypress", target=element_id, key=key))
