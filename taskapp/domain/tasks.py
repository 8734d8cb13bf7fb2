"""Task entity and the typed form payload accepted by the routers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from taskapp.core.errors import ValidationError
from taskapp.db.models import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    description: str

    @classmethod
    def from_row(cls, row: Mapping) -> "Task":
        return cls(
            id=int(row["id"]),
            title=row["title"] or "",
            description=row["description"] or "",
        )


def check_lengths(title: str, description: str) -> dict[str, str]:
    """Return the store constraint violations for the given values."""
    errors: dict[str, str] = {}
    if len(title) > TITLE_MAX_LENGTH:
        errors["title"] = f"Title must be at most {TITLE_MAX_LENGTH} characters."
    if len(description) > DESCRIPTION_MAX_LENGTH:
        errors["description"] = f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters."
    return errors


@dataclass(frozen=True)
class TaskForm:
    """Title/description submitted by the create and edit forms."""

    title: str
    description: str

    @classmethod
    def from_form(cls, data: Mapping[str, str]) -> "TaskForm":
        """
        Build a form from submitted fields and validate it.

        Accepts plain ``title``/``description`` names as well as the nested
        ``task[title]``/``task[description]`` names used by older forms.
        Raises ValidationError listing every offending field.
        """
        def _field(name: str) -> str:
            value = data.get(name)
            if value is None:
                value = data.get(f"task[{name}]")
            return (value or "").strip()

        form = cls(title=_field("title"), description=_field("description"))
        form.validate()
        return form

    def validate(self) -> None:
        errors = check_lengths(self.title, self.description)
        if not self.title:
            errors["title"] = "Title is required."
        if errors:
            raise ValidationError(errors)
