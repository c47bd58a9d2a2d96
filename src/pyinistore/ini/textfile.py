# -*- encoding: utf-8 -*-
# @File   : textfile.py
# @Time   : 2026/10/13 01:02:37
# @Author : Kariko Lin

import logging

from ..abstract import FileHandler
from .errors import FileAccessError


class IniTextFile(FileHandler[str]):
    """Plain text INI on local disk.

    No encoding detection: the codec given here is the codec used.
    Newlines are passed through untouched (`newline=''`).
    """

    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> str:
        try:
            with open(self._fn, 'r', encoding=self._codec, newline='') as fp:
                return fp.read()
        except (OSError, UnicodeError) as e:
            logging.warning(f'failed to read `{self._fn}`:\n  {e}')
            raise FileAccessError(f'cannot read {self._fn}: {e}') from e

    def write(self, instance: str) -> None:
        try:
            with open(self._fn, 'w', encoding=self._codec, newline='') as fp:
                fp.write(instance)
        except (OSError, UnicodeError) as e:
            logging.warning(f'failed to write `{self._fn}`:\n  {e}')
            raise FileAccessError(f'cannot write {self._fn}: {e}') from e

    def __str__(self) -> str:
        return super().__str__() + f'({self._codec})'
