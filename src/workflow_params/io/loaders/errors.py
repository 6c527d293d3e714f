from __future__ import annotations

"""Errors raised while reading parameter and message files."""

import os
from typing import Iterable, Optional

from pydantic import ValidationError

MAX_REPORTED_ISSUES = 3


class LoaderError(RuntimeError):
    """Wraps loader failures with file path and parameter context."""

    def __init__(
        self,
        file_path: str,
        message: str,
        *,
        parameter: Optional[str] = None,
        cause: Exception | None = None,
    ):
        self.file_path = file_path
        self.message = message
        self.parameter = parameter
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        subject = f"{self.message} for parameter '{self.parameter}'" if self.parameter else self.message
        base = f"{subject} ({self._relative_path(self.file_path)})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {self._format_validation_errors(self.cause.errors())}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    @staticmethod
    def _relative_path(path: str) -> str:
        try:
            return os.path.relpath(path)
        except ValueError:  # pragma: no cover - different drive on Windows
            return path

    @staticmethod
    def _format_validation_errors(errors: Iterable[dict]) -> str:
        error_list = list(errors)
        snippets = []
        for err in error_list[:MAX_REPORTED_ISSUES]:
            loc = ".".join(str(entry) for entry in err.get("loc", [])) or "<root>"
            snippets.append(f"{loc}: {err.get('msg') or err.get('type') or 'validation error'}")
        remaining = len(error_list) - len(snippets)
        if remaining > 0:
            snippets.append(f"... ({remaining} more)")
        return "; ".join(snippets)

    def __str__(self) -> str:
        return self._build_message()
