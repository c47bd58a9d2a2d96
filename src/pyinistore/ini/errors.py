# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 22:05:51
# @Author : Kariko Lin

from typing import Any, Callable


class IniStoreError(Exception):
    """Base of everything raised by `pyinistore.ini`."""
    pass


class _MissingError(IniStoreError, KeyError):
    # KeyError.__str__ would quote the whole message.
    def __str__(self) -> str:
        return str(self.args[0])


class MissingSectionError(_MissingError):
    def __init__(self, section: str) -> None:
        super().__init__(f'{section} is not an existing section.')
        self.section = section


class MissingKeyError(_MissingError):
    def __init__(self, key: str, section: str) -> None:
        super().__init__(f'{key} does not exist in section [{section}].')
        self.key = key
        self.section = section


class ConversionError(IniStoreError, ValueError):
    def __init__(self, text: str, converter: Callable[[str], Any]) -> None:
        name = getattr(converter, '__name__', repr(converter))
        super().__init__(f'{text!r} cannot be converted to {name}.')
        self.text = text
        self.converter = converter


class FileAccessError(IniStoreError, OSError):
    """Raised when the file collaborator fails to read or write."""
    pass
