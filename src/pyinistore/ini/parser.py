# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 00:12:44
# @Author : Kariko Lin

"""INI text <-> section records.

Reading is lenient on purpose: anything that is not a `[section]` header
or a single `key=value` pair inside a section is skipped, never raised.

    ```ini
    ; whole line comment
    [Root]
    Name = Hello World!  ; inline comment, dropped
    Count=9001
    ```

Output always uses `\\r\\n`, one blank line between sections,
and ends with exactly one line terminator.
"""

import logging
from io import StringIO, TextIOBase
from typing import Iterable, TypedDict

CRLF = '\r\n'


class IniSectionMeta(TypedDict):
    section: str
    pairs: dict[str, str]


class IniParser:
    @staticmethod
    def readstream(buf: TextIOBase) -> list[IniSectionMeta]:
        """Read a decoded char stream into section records, in file order.

        A repeated header yields another record with the same name;
        whoever consumes the records decides who wins.
        """
        ret: list[IniSectionMeta] = []
        this_sect: IniSectionMeta | None = None
        lineno = 0
        while i := buf.readline():
            lineno += 1
            line = i.replace('\r', '').rstrip('\n').lstrip(' \t')
            if not line or line.startswith(';'):
                continue
            if line.startswith('[') and line.endswith(']'):
                this_sect = IniSectionMeta(section=line[1:-1], pairs={})
                ret.append(this_sect)
            elif this_sect is None:
                logging.debug(f'line {lineno}: no section yet, skipped.')
            elif line.count('=') != 1:
                logging.debug(f'line {lineno}: malformed pair, skipped.')
            else:
                key, val = line.split('=')
                this_sect['pairs'][key.strip(' ')] = (
                    val.split(';')[0].strip(' '))
        logging.debug(f'{lineno} lines read into {len(ret)} section(s).')
        return ret

    @staticmethod
    def loads(text: str) -> list[IniSectionMeta]:
        return IniParser.readstream(StringIO(text))

    @staticmethod
    def _output_section(meta: IniSectionMeta) -> str:
        ret = [f'[{meta["section"]}]']
        ret.extend(f'{k}={v}' for k, v in meta['pairs'].items())
        return CRLF.join(ret)

    @staticmethod
    def dumps(metas: Iterable[IniSectionMeta]) -> str:
        ret = ''.join(
            IniParser._output_section(i) + CRLF * 2 for i in metas)
        # drop the trailing blank line, keep one terminator.
        return ret[:-len(CRLF)]
