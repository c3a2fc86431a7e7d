"""Safe error message formatting utilities.

Ensures dynamic text such as project paths and variant dimensions cannot be
mistaken for Rich markup when interpolated into console output.
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings.

    Project paths like ':lib[core]' would otherwise be parsed as markup tags.
    """
    return _escape_markup(str(value))
