# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/13 01:18:40
# @Author : Kariko Lin

from .errors import (
    IniStoreError,
    MissingSectionError,
    MissingKeyError,
    ConversionError,
    FileAccessError
)
from .model import IniSection, IniStore
from .parser import IniParser
from .textfile import IniTextFile
from .yamlio import IniYamlParser
