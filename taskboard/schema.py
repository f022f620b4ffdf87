"""
TASKBOARD - Task Schema Definition
==================================
The single entity of the task list and the built-in seed tasks.

Stored field names are camelCase (isComplete, createdAt) so that a saved
slot reads the same as the list the page keeps in local storage.
"""

from datetime import date
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

DATE_FORMAT = "%d/%m/%Y"  # pt-BR short date


def localized_today() -> str:
    """Today's date as the page displays it"""
    return date.today().strftime(DATE_FORMAT)


class Task(BaseModel):
    """Individual task definition"""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(gt=0)
    name: str
    tag: str
    is_complete: bool = Field(default=False, alias="isComplete")
    created_at: str = Field(alias="createdAt")  # already formatted, never reparsed


TaskSequence = TypeAdapter(List[Task])


# ============================================================
# SEED TASKS
# ============================================================

SEED_TASKS = [
    {
        "name": "Melhorar consulta SQL na rota api GET /tasks",
        "tag": "backend",
    },
    {
        "name": "Corrigir chamada de função botão de enviar tarefa",
        "tag": "frontend",
    },
    {
        "name": "Testar nova funcionalidade de qualificação de tarefa",
        "tag": "tester",
    },
]


def create_seed_tasks(clock: Optional[Callable[[], str]] = None) -> List[Task]:
    """Build the three example tasks shown when nothing is stored yet"""
    today = (clock or localized_today)()
    return [
        Task(id=i + 1, name=seed["name"], tag=seed["tag"], created_at=today)
        for i, seed in enumerate(SEED_TASKS)
    ]
