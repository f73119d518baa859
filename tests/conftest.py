from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger


class FakeFileSystem:
    def __init__(self, sizes: dict[str, int]) -> None:
        self.sizes = sizes
        self.lookups: list[str] = []

    def file_size(self, path: str) -> int | None:
        self.lookups.append(path)
        return self.sizes.get(path)


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str, int], Path]:
    def _make(name: str, size: int) -> Path:
        path = tmp_path / name
        with path.open("wb") as f:
            f.truncate(size)
        return path

    return _make


@pytest.fixture
def fake_fs() -> Callable[[dict[str, int]], FakeFileSystem]:
    return FakeFileSystem


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="DEBUG",
        format="{message}",
    )
    yield messages
    logger.remove(handler_id)
