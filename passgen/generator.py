from __future__ import annotations
import logging
from typing import Iterator, List, Optional

from .errors import EmptyPoolError, IndexSourceError
from .pool import Pool
from .random_source import IndexSource, default_source

logger = logging.getLogger(__name__)


def _check_non_negative(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} musi być liczbą całkowitą, otrzymano {value!r}")
    if value < 0:
        raise ValueError(f"{name} nie może być ujemne ({value})")


def _check_pool(pool: Pool) -> None:
    if len(pool) == 0:
        raise EmptyPoolError("Pula nie zawiera żadnych znaków")


def _draw(pool: Pool, length: int, source: IndexSource) -> str:
    size = len(pool)
    chars = []
    for _ in range(length):
        idx = source.randbelow(size)
        if not 0 <= idx < size:
            raise IndexSourceError(f"Źródło zwróciło indeks {idx} spoza [0, {size})")
        chars.append(pool[idx])
    return "".join(chars)


def generate_password(pool: Pool, length: int, source: Optional[IndexSource] = None) -> str:
    """
    Losuje jedno hasło długości `length` ze znaków puli.

    Każda pozycja to niezależne losowanie ze zwracaniem.
    Pusta pula -> EmptyPoolError (także dla length == 0).
    """
    _check_pool(pool)
    _check_non_negative("length", length)
    logger.debug("Generating password: length=%d, pool size=%d", length, len(pool))
    return _draw(pool, length, source or default_source())


def generate_n_passwords(pool: Pool, length: int, count: int,
                         source: Optional[IndexSource] = None) -> List[str]:
    """Losuje `count` niezależnych haseł; kolejność = kolejność generowania."""
    _check_pool(pool)
    _check_non_negative("length", length)
    _check_non_negative("count", count)
    logger.debug("Generating %d passwords: length=%d, pool size=%d", count, length, len(pool))
    src = source or default_source()
    return [_draw(pool, length, src) for _ in range(count)]


class PasswordGenerator:
    """
    Generator związany z konkretną pulą i źródłem losowości.

    Trzyma własną kopię puli, więc późniejsze zmiany puli przez
    wywołującego nie wpływają na generator.
    """

    def __init__(self, pool: Pool, source: Optional[IndexSource] = None):
        _check_pool(pool)
        self._pool = pool.copy()
        self.source = source or default_source()

    @property
    def pool(self) -> Pool:
        """Kopia puli generatora (zmiany kopii nie wpływają na generator)."""
        return self._pool.copy()

    def generate(self, length: int) -> str:
        return generate_password(self._pool, length, self.source)

    def generate_many(self, length: int, count: int) -> List[str]:
        return generate_n_passwords(self._pool, length, count, self.source)

    def iter_passwords(self, length: int, count: int) -> Iterator[str]:
        """Leniwie zwraca `count` haseł, po jednym na krok iteracji."""
        _check_pool(self._pool)
        _check_non_negative("length", length)
        _check_non_negative("count", count)
        for _ in range(count):
            yield _draw(self._pool, length, self.source)

    def __repr__(self) -> str:
        return f"PasswordGenerator({self._pool!r}, source={self.source!r})"
