"""Shell export-line formatting.

Three styles cover every write envperm performs:

- ``set``:     ``export NAME=VALUE``
- ``prepend``: ``export NAME="VALUE:$NAME"``
- ``append``:  ``export NAME="$NAME:VALUE"``

Values are rendered with ``str()`` and written verbatim. No quoting or
escaping is applied to plain sets, so callers who want quotes include
them in the value.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ExportStyle(StrEnum):
    """How a value is combined with any existing value of the variable."""

    SET = "set"
    PREPEND = "prepend"
    APPEND = "append"


def format_export(name: str, value: Any, style: ExportStyle = ExportStyle.SET) -> str:
    """Render a single ``export`` statement (no trailing newline).

    Examples:
        >>> format_export("DUMMY", 1)
        'export DUMMY=1'
        >>> format_export("PATH", "$HOME/bin", ExportStyle.PREPEND)
        'export PATH="$HOME/bin:$PATH"'
        >>> format_export("PATH", "$HOME/bin", ExportStyle.APPEND)
        'export PATH="$PATH:$HOME/bin"'
    """
    rendered = str(value)
    if style is ExportStyle.PREPEND:
        return f'export {name}="{rendered}:${name}"'
    if style is ExportStyle.APPEND:
        return f'export {name}="${name}:{rendered}"'
    return f"export {name}={rendered}"
