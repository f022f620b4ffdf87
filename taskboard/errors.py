"""Exceptions raised by taskboard."""


class TaskboardError(Exception):
    """Base class for taskboard errors"""


class ElementNotFoundError(TaskboardError, KeyError):
    """The page has no element with the requested id"""

    def __init__(self, element_id: str):
        super().__init__(element_id)
        self.element_id = element_id

    def __str__(self) -> str:
        return f"No element with id {self.element_id!r}"
