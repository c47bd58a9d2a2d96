# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:36:02
# @Author : Kariko Lin

import logging

from .abstract import FileHandler
from .ini import (
    IniStore, IniSection, IniParser, IniTextFile, IniYamlParser,
    IniStoreError, MissingSectionError, MissingKeyError,
    ConversionError, FileAccessError
)

__all__ = [
    'FileHandler',
    'IniStore', 'IniSection', 'IniParser', 'IniTextFile', 'IniYamlParser',
    'IniStoreError', 'MissingSectionError', 'MissingKeyError',
    'ConversionError', 'FileAccessError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
