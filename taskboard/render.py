"""
TASKBOARD - Renderer
====================
Projects the task list onto view models. Both projections are pure: the
same tasks always give the same view.
"""

from typing import List, Optional, Sequence

from pydantic import BaseModel

from .schema import Task

EMPTY_STATE_MESSAGE = "Nenhuma tarefa adicionada. Crie uma nova tarefa para começar!"
COMPLETE_LABEL = "Concluir"
CHECKED_ICON = "assets/checked.png"
CHECKED_ALT = "Tarefa concluída"
CREATED_PREFIX = "Criado em:"
COUNTER_SINGULAR = "tarefa concluída"
COUNTER_PLURAL = "tarefas concluídas"

ITEM_ID_PREFIX = "task-"
CONTROL_ID_PREFIX = "complete-btn-"


class CompletionControl(BaseModel):
    """Button shown next to a task"""
    element_id: str
    actionable: bool             # False once complete: only the icon is shown
    label: Optional[str] = None
    icon: Optional[str] = None
    icon_alt: Optional[str] = None


class TaskItemView(BaseModel):
    element_id: str
    task_id: int
    title: str
    tag: str
    date_label: str
    completed: bool
    control: CompletionControl

    @property
    def css_class(self) -> str:
        return "task-item completed" if self.completed else "task-item"


class TaskListView(BaseModel):
    items: List[TaskItemView] = []
    empty_message: Optional[str] = None


class CounterView(BaseModel):
    count: int
    label: str

    def __str__(self) -> str:
        return f"{self.count} {self.label}"


def control_id(task_id: int) -> str:
    return f"{CONTROL_ID_PREFIX}{task_id}"


def task_id_from_control(element_id: str) -> Optional[int]:
    """Recover the task id from a completion control's element id"""
    if not element_id.startswith(CONTROL_ID_PREFIX):
        return None
    suffix = element_id[len(CONTROL_ID_PREFIX):]
    return int(suffix) if suffix.isdigit() else None


def render_item(task: Task) -> TaskItemView:
    if task.is_complete:
        control = CompletionControl(
            element_id=control_id(task.id),
            actionable=False,
            icon=CHECKED_ICON,
            icon_alt=CHECKED_ALT
        )
    else:
        control = CompletionControl(
            element_id=control_id(task.id),
            actionable=True,
            label=COMPLETE_LABEL
        )

    return TaskItemView(
        element_id=f"{ITEM_ID_PREFIX}{task.id}",
        task_id=task.id,
        title=task.name,
        tag=task.tag,
        date_label=f"{CREATED_PREFIX} {task.created_at}",
        completed=task.is_complete,
        control=control
    )


def render(tasks: Sequence[Task]) -> TaskListView:
    """Build the list view; an empty list shows only the empty-state message"""
    if not tasks:
        return TaskListView(empty_message=EMPTY_STATE_MESSAGE)
    return TaskListView(items=[render_item(task) for task in tasks])


def update_counter(tasks: Sequence[Task]) -> CounterView:
    """Completed count with its pluralized label"""
    count = sum(1 for t in tasks if t.is_complete)
    return CounterView(count=count, label=COUNTER_SINGULAR if count == 1 else COUNTER_PLURAL)


# ============================================================
# TEXT PROJECTION
# ============================================================

def format_page(view: TaskListView, counter: CounterView) -> str:
    """Human-readable rendering of the page for the terminal"""
    lines = ["📋 Tarefas", ""]

    if view.empty_message:
        lines.append(f"  {view.empty_message}")
    for item in view.items:
        icon = "✅" if item.completed else "⬜"
        action = "" if not item.control.actionable else f"  [{item.control.label}]"
        lines.append(f"  {icon} [{item.task_id}] {item.title}{action}")
        lines.append(f"      #{item.tag} | {item.date_label}")

    lines.extend(["", str(counter)])
    return "\n".join(lines)
