from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from .record import DEFAULT_CATEGORY


@dataclass(frozen=True)
class Messages:
    """
    User-facing strings of the browser. Defaults are the Ukrainian UI texts.

    Fields:

    - default_category: label given to records without a category (localized "other")
    - count_template: summary line, formatted with ``count``
    - load_error: text of the single full-width row shown when the load fails
    - placeholder: glyph shown instead of an empty / fallback category
    - theme_to_light / theme_to_dark: theme toggle labels
    """

    default_category: str = DEFAULT_CATEGORY
    count_template: str = "Елементів: {count}"
    load_error: str = "Помилка завантаження JSON. Перевір шлях до файлу."
    placeholder: str = "—"
    search_placeholder: str = "Пошук за тегом, описом або категорією"
    filter_all: str = "Усі"
    theme_to_light: str = "Світла тема"
    theme_to_dark: str = "Темна тема"

    # Column headers, in table order
    column_tag: str = "Тег"
    column_status: str = "Статус"
    column_category: str = "Категорія"
    column_description: str = "Опис"

    def count_text(self, count: int) -> str:
        return self.count_template.format(count=count)

    def with_overrides(self, overrides: Dict[str, Any]) -> Messages:
        """Return a copy with known keys replaced; unknown keys are ignored."""
        known = {f.name for f in fields(self)}
        return replace(
            self,
            **{k: str(v) for k, v in overrides.items() if k in known},
        )


DEFAULT_MESSAGES = Messages()
