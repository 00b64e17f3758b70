from __future__ import annotations
from typing import Optional

from .errors import EmptyPoolError
from .generator import PasswordGenerator
from .pool import Pool
from .random_source import IndexSource


class GeneratorBuilder:
    """Builder do konfigurowania generatora haseł."""

    def __init__(self):
        self._pool: Optional[Pool] = None
        self._excluded: str = ""
        self._unique: bool = False
        self._source: Optional[IndexSource] = None

    def with_charset(self, charset: str) -> "GeneratorBuilder":
        self._pool = Pool.parse(charset)
        return self

    def with_default_charset(self) -> "GeneratorBuilder":
        return self.with_charset(Pool.DEFAULT)

    def with_extra(self, chars: str) -> "GeneratorBuilder":
        if self._pool is None:
            self._pool = Pool()
        self._pool.extend_from_string(chars)
        return self

    def without(self, chars: str) -> "GeneratorBuilder":
        self._excluded += chars
        return self

    def unique(self) -> "GeneratorBuilder":
        self._unique = True
        return self

    def with_source(self, source: IndexSource) -> "GeneratorBuilder":
        self._source = source
        return self

    def build(self) -> PasswordGenerator:
        pool = self._pool.copy() if self._pool is not None else Pool.parse(Pool.DEFAULT)
        if self._excluded:
            pool.remove_all(self._excluded)
        if self._unique:
            pool = pool.unique()
        if pool.is_empty():
            raise EmptyPoolError("Po zastosowaniu wykluczeń pula jest pusta")
        return PasswordGenerator(pool, self._source)
