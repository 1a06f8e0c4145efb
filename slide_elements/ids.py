"""Identifier sources for generated runs, paragraphs, cells and elements."""
from __future__ import annotations

import itertools
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    """Anything callable that returns a fresh unique string on every call."""

    def __call__(self) -> str:
        ...


class UuidGenerator:
    """Random uuid4 ids, the default for real conversions."""

    def __call__(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator:
    """
    Deterministic ids (``el-1``, ``el-2``, ...).

    Each instance keeps its own counter, so two conversions never share
    state unless they are handed the same generator.
    """

    def __init__(self, prefix: str = "el"):
        self.prefix = prefix
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"
