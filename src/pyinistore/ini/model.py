# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/13 01:20:56
# @Author : Kariko Lin

"""INI store and its sections.

A store owns its sections; a section only knows the store's shared state
(the lock and the dirty flag), never the store itself.
All values are kept as `str`, see `ini.convert` for typed access.
"""

import logging
from collections.abc import MutableMapping
from contextlib import AbstractContextManager, nullcontext
from os import PathLike, fspath
from threading import RLock
from typing import Any, Callable, Iterator, Mapping, Self, TypeVar
from warnings import warn

from ..abstract import FileHandler
from .convert import from_text, resolve_default, to_text
from .errors import MissingKeyError, MissingSectionError
from .parser import IniParser, IniSectionMeta
from .textfile import IniTextFile

T = TypeVar('T')

# sentinel, as `None` is a legal default.
_MISSING: Any = object()


class _StoreState:
    """Lock strategy plus dirty flag, shared by a store and its sections."""

    __slots__ = ('thread_safe', 'lock', 'dirty')

    def __init__(self, thread_safe: bool) -> None:
        self.thread_safe = thread_safe
        # one re-entrant lock per store, so store -> section calls nest.
        self.lock: AbstractContextManager = (
            RLock() if thread_safe else nullcontext())
        self.dirty = False


class IniSection(MutableMapping[str, str]):
    """A named group of `key=value` entries.

    Reading a missing key raises `MissingKeyError` unless a default is
    given. Writing returns the section itself, so calls chain:

        ```python
        ini['Root'].write('Name', 'Hello').write('Count', 9001)
        ```
    """

    def __init__(self, name: str, state: _StoreState) -> None:
        self._name = name
        self._state = state
        self._data: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        with self._state.lock:
            if key not in self._data:
                raise MissingKeyError(key, self._name)
            return self._data[key]

    def __setitem__(self, key: str, value: object) -> None:
        self.write(key, value)

    def __delitem__(self, key: str) -> None:
        with self._state.lock:
            if key not in self._data:
                raise MissingKeyError(key, self._name)
            del self._data[key]
            self._state.dirty = True

    def __contains__(self, key: object) -> bool:
        with self._state.lock:
            return key in self._data

    def __len__(self) -> int:
        with self._state.lock:
            return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self))

    def keys(self) -> list[str]:
        """Snapshot of the current keys."""
        with self._state.lock:
            return list(self._data)

    def values(self) -> list[str]:
        """Snapshot of the current (text) values."""
        with self._state.lock:
            return list(self._data.values())

    def has_key(self, key: str) -> bool:
        return key in self

    def write(self, key: str, value: object) -> Self:
        with self._state.lock:
            self._data[key] = to_text(value)
            self._state.dirty = True
            return self

    def read(
        self, key: str,
        converter: Callable[[str], T] = str,
        default: Any = _MISSING
    ) -> T:
        """Read `key` and convert it with `converter`.

        Args:
            default: used when `key` is missing. May be a zero-argument
                callable, which is only called on a miss. The key is
                *not* inserted.

        Raises:
            MissingKeyError: `key` is missing and no default given.
            ConversionError: the text does not fit `converter`.
        """
        with self._state.lock:
            if key in self._data:
                text = self._data[key]
            elif default is _MISSING:
                raise MissingKeyError(key, self._name)
            else:
                text = resolve_default(default)
            return from_text(text, converter)

    def read_into(
        self, out: MutableMapping[str, Any], key: str,
        converter: Callable[[str], Any] = str,
        default: Any = _MISSING, *,
        alias: str | None = None
    ) -> Self:
        """Like `read()`, but stores the result into `out[alias or key]`
        and returns the section for chaining."""
        out[key if alias is None else alias] = self.read(
            key, converter, default)
        return self

    def _get_meta(self) -> IniSectionMeta:
        with self._state.lock:
            return IniSectionMeta(section=self._name, pairs=self._data.copy())

    def _load(self, pairs: Mapping[str, str]) -> None:
        """Fill entries without touching the dirty flag."""
        self._data.update(pairs)

    def _detach(self) -> None:
        """Keep the entries, but stop marking the old store dirty."""
        with self._state.lock:
            self._state = _StoreState(self._state.thread_safe)

    def close(self) -> None:
        """Drop all entries and detach from the store."""
        with self._state.lock:
            self._data.clear()
            self._detach()


class IniStore(MutableMapping[str, IniSection]):
    """An INI file, loaded by `open()` and saved by `close()`.

    Writes are lazy: `close()` only touches the file when some entry has
    been written or deleted since the last load or flush.

        ```python
        ini = IniStore('test.ini', thread_safe=True)
        if not ini.exists():
            ini.add_section('Root').write('IntValue', 9001)
            ini.close()
        else:
            ini.open()
            value = ini.read('Root', 'IntValue', int)
        ```
    """

    def __init__(
        self, file: str | PathLike[str] | FileHandler[str],
        thread_safe: bool = False, *,
        encoding: str = 'utf-8'
    ) -> None:
        self._file: FileHandler[str] = (
            IniTextFile(fspath(file), encoding)
            if isinstance(file, (str, PathLike)) else file)
        self._state = _StoreState(thread_safe)
        self._sections: dict[str, IniSection] = {}

    # mapping protocol
    def __getitem__(self, key: str) -> IniSection:
        return self.get_section(key)

    def __setitem__(
        self, key: str, value: Mapping[str, object] | None
    ) -> None:
        # copy first: `value` may be the very section being replaced.
        pairs = {} if value is None else dict(value.items())
        with self._state.lock:
            sect = self.add_section(key)
            for k, v in pairs.items():
                sect.write(k, v)

    def __delitem__(self, key: str) -> None:
        with self._state.lock:
            if key not in self._sections:
                raise MissingSectionError(key)
            # popped sections go back to the caller intact.
            self._sections.pop(key)._detach()
            self._state.dirty = True

    def setdefault(
        self, key: str, default: Mapping[str, object] | None = None
    ) -> IniSection:
        """If `key` is not a section yet, add it filled with `default`."""
        with self._state.lock:
            if key not in self._sections:
                self[key] = default
            return self._sections[key]

    def __contains__(self, key: object) -> bool:
        with self._state.lock:
            return key in self._sections

    def __len__(self) -> int:
        with self._state.lock:
            return len(self._sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.section_names)

    def __str__(self) -> str:
        return f'INI store: {self._file}'

    def __enter__(self) -> Self:
        if self.exists():
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # never flush a half-done edit.
        if exc_type is None:
            self.close()

    # properties
    @property
    def filename(self) -> str:
        return self._file.filename

    @property
    def section_names(self) -> list[str]:
        with self._state.lock:
            return list(self._sections)

    @property
    def sections(self) -> list[IniSection]:
        with self._state.lock:
            return list(self._sections.values())

    @property
    def thread_safe(self) -> bool:
        return self._state.thread_safe

    @property
    def is_dirty(self) -> bool:
        with self._state.lock:
            return self._state.dirty

    # file life cycle
    def exists(self) -> bool:
        with self._state.lock:
            return self._file.exists()

    def from_text(self, text: str) -> None:
        """Replace all sections with those parsed from `text`.

        A parse is not a modification: the store is clean afterwards.
        """
        with self._state.lock:
            self._release()
            for meta in IniParser.loads(text):
                name = meta['section']
                if name in self._sections:
                    warn(f'[{name}] declared again, earlier one discarded.')
                self.add_section(name)._load(meta['pairs'])
            self._state.dirty = False

    def to_text(self) -> str:
        with self._state.lock:
            return IniParser.dumps(
                i._get_meta() for i in self._sections.values())

    def open(self) -> None:
        with self._state.lock:
            self.from_text(self._file.read())
            logging.info(
                f'{self.filename}: {len(self._sections)} section(s) loaded.')

    def close(self) -> None:
        """Flush to file if dirty, then release all sections."""
        with self._state.lock:
            if not self._state.dirty:
                logging.info(f'{self.filename}: no changes, nothing written.')
                return
            self._file.write(self.to_text())
            logging.info(f'{self.filename}: saved.')
            self._release()
            self._state.dirty = False

    def _release(self) -> None:
        for i in self._sections.values():
            i.close()
        self._sections.clear()

    # sections
    def has_section(self, section: str) -> bool:
        return section in self

    def get_section(self, section: str) -> IniSection:
        with self._state.lock:
            if section not in self._sections:
                raise MissingSectionError(section)
            return self._sections[section]

    def add_section(self, section: str) -> IniSection:
        """Register a new empty section, replacing any of the same name."""
        with self._state.lock:
            if (old := self._sections.get(section)) is not None:
                old.close()
            ret = self._sections[section] = IniSection(section, self._state)
            return ret

    # entries
    def read(
        self, section: str, key: str,
        converter: Callable[[str], T] = str,
        default: Any = _MISSING
    ) -> T:
        with self._state.lock:
            return self.get_section(section).read(key, converter, default)

    def write(self, section: str, key: str, value: object) -> None:
        with self._state.lock:
            self.get_section(section).write(key, value)

    def has_key(self, section: str, key: str) -> bool:
        with self._state.lock:
            return self.get_section(section).has_key(key)
