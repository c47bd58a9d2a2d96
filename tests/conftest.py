"""Shared fixtures: an in-memory INI file that counts reads and writes."""

from __future__ import annotations

import pytest

from pyinistore import FileHandler, FileAccessError


class MemoryFile(FileHandler[str]):
    def __init__(self, text: str | None = None, filename: str = 'mem.ini'):
        super().__init__(filename)
        self.text = text
        self.reads = 0
        self.writes: list[str] = []

    def exists(self) -> bool:
        return self.text is not None

    def read(self) -> str:
        self.reads += 1
        if self.text is None:
            raise FileAccessError(f'cannot read {self._fn}')
        return self.text

    def write(self, instance: str) -> None:
        self.writes.append(instance)
        self.text = instance


SAMPLE = (
    '; generated sample\r\n'
    '[Root]\r\n'
    'StringValue1=Hello World!\r\n'
    'IntValue1 = 9001 ; over nine thousand\r\n'
    '\r\n'
    '[Flags]\r\n'
    '\tEnabled=true\r\n'
    'Ratio=0.25\r\n'
)


@pytest.fixture
def memfile() -> MemoryFile:
    return MemoryFile(SAMPLE)


@pytest.fixture
def empty_memfile() -> MemoryFile:
    return MemoryFile()
