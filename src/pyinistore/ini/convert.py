# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/10/12 22:31:09
# @Author : Kariko Lin

"""Canonical string form of entry values.

Sections only ever hold `str`. Typed access converts at the boundary:
`to_text()` on the way in, `from_text()` with a converter on the way out.
A converter is `str`, `int`, `float`, `bool` or any callable taking the
stored text.
"""

from typing import Any, Callable, TypeVar

from .errors import ConversionError

T = TypeVar('T')

_BOOL_TEXT = {'true': True, 'false': False}


def to_text(value: object) -> str:
    if isinstance(value, str):
        return value
    # bool before anything numeric, since bool is an int.
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return repr(value)
    return str(value)


def from_text(text: str, converter: Callable[[str], T] = str) -> T:
    if converter is str:
        return text
    if converter is bool:
        try:
            return _BOOL_TEXT[text.strip().lower()]
        except KeyError:
            raise ConversionError(text, converter) from None
    try:
        return converter(text)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ConversionError(text, converter) from e


def resolve_default(default: Any) -> str:
    """Evaluate a (possibly lazy) default into stored text."""
    if callable(default):
        default = default()
    return to_text(default)
