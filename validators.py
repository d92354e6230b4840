from __future__ import annotations

from typing import Optional


class Validator:
    """Валидация полей заметки."""

    @staticmethod
    def require_non_empty(name: str, value: Optional[str]) -> str:
        """Поле должно быть задано и не быть пустой строкой."""
        if value is None:
            raise ValueError(f"Field '{name}' is required.")
        v = str(value)
        if v == "":
            raise ValueError(f"Field '{name}' must not be empty.")
        return v

    @staticmethod
    def note_content(value: Optional[str]) -> str:
        # Пробелы не обрезаем: "   " считается содержимым
        return Validator.require_non_empty("content", value)
