# tests/test_render.py

from taskboard.render import (
    EMPTY_STATE_MESSAGE,
    format_page,
    render,
    task_id_from_control,
    update_counter,
)
from taskboard.schema import create_seed_tasks

from .conftest import fixed_clock


def test_empty_list_shows_only_empty_state() -> None:
    view = render([])
    assert view.items == []
    assert view.empty_message == EMPTY_STATE_MESSAGE


def test_items_follow_task_order() -> None:
    tasks = create_seed_tasks(fixed_clock)
    view = render(tasks)

    assert view.empty_message is None
    assert [item.element_id for item in view.items] == ["task-1", "task-2", "task-3"]
    first = view.items[0]
    assert first.title == tasks[0].name
    assert first.tag == "backend"
    assert first.date_label == "Criado em: 19/10/2026"


def test_render_is_idempotent() -> None:
    tasks = create_seed_tasks(fixed_clock)
    tasks[0].is_complete = True
    assert render(tasks) == render(tasks)


def test_completion_control_depends_on_flag() -> None:
    tasks = create_seed_tasks(fixed_clock)
    tasks[2].is_complete = True
    open_item, _, done_item = render(tasks).items

    assert open_item.control.actionable
    assert open_item.control.label == "Concluir"
    assert open_item.css_class == "task-item"

    assert not done_item.control.actionable
    assert done_item.control.label is None
    assert done_item.control.icon == "assets/checked.png"
    assert done_item.control.element_id == "complete-btn-3"
    assert done_item.css_class == "task-item completed"


def test_counter_label_is_pluralized() -> None:
    tasks = create_seed_tasks(fixed_clock)
    assert str(update_counter(tasks)) == "0 tarefas concluídas"

    tasks[0].is_complete = True
    assert str(update_counter(tasks)) == "1 tarefa concluída"

    tasks[1].is_complete = True
    assert str(update_counter(tasks)) == "2 tarefas concluídas"


def test_task_id_from_control() -> None:
    assert task_id_from_control("complete-btn-12") == 12
    assert task_id_from_control("complete-btn-") is None
    assert task_id_from_control("task-12") is None


def test_format_page_lists_tasks_and_counter() -> None:
    tasks = create_seed_tasks(fixed_clock)
    tasks[1].is_complete = True
    text = format_page(render(tasks), update_counter(tasks))

    assert "[1] Melhorar consulta SQL na rota api GET /tasks  [Concluir]" in text
    assert "#frontend | Criado em: 19/10/2026" in text
    assert text.endswith("1 tarefa concluída")

    assert EMPTY_STATE_MESSAGE in format_page(render([]), update_counter([]))
