"""Outcomes returned by the catalog navigator.

NOT_FOUND covers both "does not exist" and "not visible to you"; there is
deliberately no separate forbidden outcome.
"""

from dataclasses import dataclass, field


class _NotFound:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


@dataclass(frozen=True)
class Display:
    """A template name and the model to render it with."""

    template: str
    model: dict = field(default_factory=dict)
    edit_url: str | None = None


@dataclass(frozen=True)
class Redirect:
    route: str
