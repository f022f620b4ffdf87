# tests/test_app.py

import json

import pytest

from taskboard.app import App, AppState
from taskboard.controller import VALIDATION_MESSAGE
from taskboard.errors import ElementNotFoundError
from taskboard.page import ADD_BUTTON, TAG_INPUT, TASK_INPUT
from taskboard.schema import Task
from taskboard.storage import MemorySlot, TaskStorage

from .conftest import fixed_clock


def _submit(app: App, name: str, tag: str) -> None:
    app.page.type_text(TASK_INPUT, name)
    app.page.type_text(TAG_INPUT, tag)
    app.page.click(ADD_BUTTON)


def test_first_start_seeds_and_persists(app, slot) -> None:
    assert app.state == AppState.READY
    assert [t.id for t in app.store] == [1, 2, 3]
    assert [t["tag"] for t in json.loads(slot.items["tasks"])] == ["backend", "frontend", "tester"]
    assert len(app.page.task_list.items) == 3
    assert (app.page.completed_count, app.page.completed_label) == ("0", "tarefas concluídas")


def test_start_adopts_stored_tasks() -> None:
    stored = [Task(id=7, name="Stored", tag="x", is_complete=True, created_at="01/01/2026")]
    storage = TaskStorage(MemorySlot())
    storage.save(stored)

    app = App(storage, clock=fixed_clock).start()

    assert list(app.store) == stored
    assert app.page.completed_count == "1"
    assert app.page.completed_label == "tarefa concluída"


def test_start_with_corrupt_storage_falls_back_to_seeds() -> None:
    slot = MemorySlot({"tasks": "not json"})
    app = App(TaskStorage(slot), clock=fixed_clock).start()

    assert len(app.store) == 3
    assert json.loads(slot.items["tasks"])[0]["id"] == 1


def test_submit_creates_task_and_resets_inputs(app) -> None:
    _submit(app, " X ", " Y ")

    task = app.store.tasks[-1]
    assert (task.id, task.name, task.tag) == (4, "X", "Y")
    assert app.page.field(TASK_INPUT).value == ""
    assert app.page.field(TAG_INPUT).value == ""
    assert app.page.focused == TASK_INPUT
    assert app.page.task_list.items[-1].element_id == "task-4"


def test_enter_key_submits_from_either_field(app) -> None:
    app.page.type_text(TASK_INPUT, "Buy milk")
    app.page.type_text(TAG_INPUT, "errand")
    app.page.keypress(TASK_INPUT, "a")
    assert len(app.store) == 3

    app.page.keypress(TAG_INPUT, "Enter")
    assert len(app.store) == 4

    app.page.type_text(TASK_INPUT, "Call mom")
    app.page.type_text(TAG_INPUT, "family")
    app.page.keypress(TASK_INPUT, "Enter")
    assert [t.id for t in app.store] == [1, 2, 3, 4, 5]


def test_blank_name_is_rejected_without_persisting(app, slot) -> None:
    alerts = []
    app.page.alert_handler = alerts.append
    writes = len(slot.writes)

    _submit(app, "   ", "errand")

    assert alerts == [VALIDATION_MESSAGE]
    assert len(app.store) == 3
    assert len(slot.writes) == writes
    assert app.page.field(TAG_INPUT).value == "errand"


def test_clicking_complete_updates_counter(app) -> None:
    app.page.click("complete-btn-2")

    assert app.store.get(2).is_complete
    assert (app.page.completed_count, app.page.completed_label) == ("1", "tarefa concluída")
    assert not app.page.task_list.items[1].control.actionable

    # the completed icon is not actionable
    app.page.click("complete-btn-2")
    assert app.store.get(2).is_complete

    app.controller.toggle(2)
    assert app.page.completed_count == "0"
    assert app.page.task_list.items[1].control.label == "Concluir"


def test_toggle_persists(app, storage) -> None:
    app.page.click("complete-btn-3")
    assert [t.is_complete for t in storage.load().tasks] == [False, False, True]


def test_unknown_element_raises(app) -> None:
    with pytest.raises(ElementNotFoundError):
        app.page.click("complete-btn-99")
    with pytest.raises(KeyError):
        app.page.type_text("nope", "x")


def test_second_start_does_not_rebind(app) -> None:
    app.start()
    _submit(app, "Once", "t")
    assert len(app.store) == 4
