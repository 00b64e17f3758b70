from __future__ import annotations
import logging
import string
from typing import Iterable, Iterator, List, Optional

from .errors import ParseError

logger = logging.getLogger(__name__)


def _as_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"Oczekiwano pojedynczego znaku, otrzymano {ch!r}")
    return ch


class Pool:
    """
    Pula znaków, z której losowane są hasła.

    Kolejność znaków jest zachowywana, duplikaty NIE są usuwane:
    znak podany dwa razy jest losowany dwa razy częściej.
    """

    DEFAULT = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, chars: Optional[Iterable[str]] = None):
        self._chars: List[str] = []
        if chars is not None:
            self.extend(chars)

    @classmethod
    def parse(cls, s: str) -> "Pool":
        """Buduje pulę z napisu. Pusty napis -> ParseError."""
        if not isinstance(s, str):
            raise ParseError(f"Pula musi być budowana z napisu, otrzymano {type(s).__name__}")
        if not s:
            raise ParseError("Pula nie może być pusta")
        pool = cls()
        pool.extend_from_string(s)
        return pool

    @classmethod
    def from_iterable(cls, chars: Iterable[str]) -> "Pool":
        return cls(chars)

    # --- budowanie ---
    def extend_from_string(self, s: str) -> "Pool":
        """Dopisuje wszystkie znaki napisu `s` w kolejności wystąpienia."""
        if not isinstance(s, str):
            raise ValueError(f"Oczekiwano napisu, otrzymano {type(s).__name__}")
        self._chars.extend(s)
        logger.debug("Pool extended by %d chars (size=%d)", len(s), len(self._chars))
        return self

    def extend(self, chars: Iterable[str]) -> "Pool":
        self._chars.extend(_as_char(ch) for ch in chars)
        return self

    def insert(self, ch: str) -> None:
        self._chars.append(_as_char(ch))

    # --- zapytania ---
    def is_empty(self) -> bool:
        return not self._chars

    def contains(self, ch: str) -> bool:
        return ch in self._chars

    def contains_all(self, elements: str) -> bool:
        present = set(self._chars)
        return all(ch in present for ch in elements)

    # --- modyfikacje ---
    def remove(self, ch: str) -> bool:
        """Usuwa wszystkie wystąpienia `ch`; zwraca True, jeśli coś usunięto."""
        before = len(self._chars)
        self._chars = [c for c in self._chars if c != ch]
        return len(self._chars) != before

    def remove_all(self, elements: str) -> None:
        drop = set(elements)
        self._chars = [c for c in self._chars if c not in drop]

    def sort(self) -> None:
        self._chars.sort()

    def unique(self) -> "Pool":
        """Nowa pula bez duplikatów (zostaje pierwsze wystąpienie)."""
        return Pool(dict.fromkeys(self._chars))

    def copy(self) -> "Pool":
        return Pool(self._chars)

    # --- protokół sekwencji ---
    def __getitem__(self, index: int) -> str:
        return self._chars[index]

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __contains__(self, ch: object) -> bool:
        return ch in self._chars

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pool):
            return NotImplemented
        return self._chars == other._chars

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        text = str(self)
        return f"Pool('{text[:10]}{'...' if len(text) > 10 else ''}', size={len(self)})"
