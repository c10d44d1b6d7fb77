"""Rich console handler for tagsync log records.

Where: platform/logging/handlers.py
What: Render per-file tag events with an icon and a compacted, styled path.
Why: Keep long library paths readable in the terminal without touching log text.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TagEvent(StrEnum):
    """Structured events attached to records via ``extra={"tag_event": ...}``."""

    APPLY_WRITE = "apply.file.write"
    CONVERT_START = "convert.file.start"
    CONVERT_COMPLETE = "convert.file.complete"


class PathRichHandler(RichHandler):
    """Rich handler that renders tag events with white, compacted paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        TagEvent.APPLY_WRITE: ("🏷️", "green", "Wrote "),
        TagEvent.CONVERT_START: ("🎧", "blue", "Encoding "),
        TagEvent.CONVERT_COMPLETE: ("✅", "green", "Encoded "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with colored separators, keeping only the last segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if truncated:
            display = "…" + separator
        elif anchor:
            display = anchor
        display += separator.join(body_parts)
        return self._style_path_string(display or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_tag_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured tag events with dedicated styling."""

        event = getattr(record, "tag_event", None)
        if not isinstance(event, str) or event not in self._EVENT_STYLES:
            return None

        icon, color, prefix = self._EVENT_STYLES[event]
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(prefix, style=Style(color=color))

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = text.append_text(self._format_path(str(source_path)))
        if target_path:
            _ = text.append(" → ", style=Style(color=color))
            _ = text.append_text(self._format_path(str(target_path)))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for tag events."""

        event_text = self._render_tag_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler", "TagEvent"]
