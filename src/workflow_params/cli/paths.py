from __future__ import annotations

"""Utilities for resolving default input paths."""

from pathlib import Path

DEFAULT_PARAMETERS_FILE = "parameters.yaml"


def parameters_path(path: str | None) -> str:
    return path or str(Path.cwd() / DEFAULT_PARAMETERS_FILE)


__all__ = ["DEFAULT_PARAMETERS_FILE", "parameters_path"]
