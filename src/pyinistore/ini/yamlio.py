# -*- encoding: utf-8 -*-
# @File   : yamlio.py
# @Time   : 2026/10/14 23:47:02
# @Author : Kariko Lin

"""YAML interchange of a whole store, one mapping per section:

    ```yaml
    Root:
      StringValue1: Hello World!
      IntValue1: '9001'
    ```

Values are always written as strings. On reading, whatever YAML decided
a scalar is (int, bool, null, ...) gets back its canonical INI text.
"""

import logging
from typing import Mapping

import yaml

from ..abstract import FileHandler
from .convert import to_text
from .errors import FileAccessError, IniStoreError


def _scalar(value: object) -> str:
    return '' if value is None else to_text(value)


class IniYamlParser(FileHandler[Mapping[str, Mapping[str, str]]]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def _normalize(doc: object) -> dict[str, dict[str, str]]:
        if doc is None:
            return {}
        if not isinstance(doc, dict):
            raise IniStoreError('YAML root should be a mapping of sections.')
        ret: dict[str, dict[str, str]] = {}
        for sect, pairs in doc.items():
            if pairs is None:
                pairs = {}
            if not isinstance(pairs, dict):
                raise IniStoreError(f'[{sect}] should be a mapping of pairs.')
            ret[_scalar(sect)] = {
                _scalar(k): _scalar(v) for k, v in pairs.items()}
        return ret

    @staticmethod
    def loads(text: str) -> dict[str, dict[str, str]]:
        try:
            doc = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise IniStoreError(f'malformed YAML:\n  {e}') from e
        return IniYamlParser._normalize(doc)

    @staticmethod
    def dumps(instance: Mapping[str, Mapping[str, str]]) -> str:
        return yaml.safe_dump(
            {k: dict(v.items()) for k, v in instance.items()},
            allow_unicode=True, sort_keys=False)

    def read(self) -> dict[str, dict[str, str]]:
        """Usually fed to `IniStore.update()`."""
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                text = fp.read()
        except (OSError, UnicodeError) as e:
            raise FileAccessError(f'cannot read {self._fn}: {e}') from e
        return self.loads(text)

    def write(self, instance: Mapping[str, Mapping[str, str]]) -> None:
        text = self.dumps(instance)
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                fp.write(text)
        except (OSError, UnicodeError) as e:
            raise FileAccessError(f'cannot write {self._fn}: {e}') from e
        logging.info(f'{len(instance)} section(s) exported to {self._fn}.')
