# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 21:40:18
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os.path import exists
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Whole-file collaborator: one read, one write, nothing in between."""

    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def exists(self) -> bool:
        return exists(self._fn)

    @property
    def filename(self) -> str:
        return self._fn

    def __str__(self) -> str:
        return self._fn
