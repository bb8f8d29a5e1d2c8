"""Shared pytest fixtures: scripted byte sources for the samplers."""

from __future__ import annotations

from typing import Iterable

import pytest


class ScriptedByteSource:
    """Replays a fixed byte string, recording each request size."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0
        self.requests: list[int] = []

    def randbytes(self, n: int) -> bytes:
        self.requests.append(n)
        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        return chunk


class FailingByteSource:
    """Raises on every request."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def randbytes(self, n: int) -> bytes:
        raise self.exc


@pytest.fixture
def scripted_source():
    """Factory for byte sources that replay the given bytes."""

    def _make(data: Iterable[int] | bytes) -> ScriptedByteSource:
        return ScriptedByteSource(bytes(data))

    return _make


@pytest.fixture
def failing_source():
    """Factory for byte sources that always raise ``exc``."""

    def _make(exc: Exception) -> FailingByteSource:
        return FailingByteSource(exc)

    return _make
