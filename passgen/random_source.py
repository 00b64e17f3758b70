from __future__ import annotations
import secrets
from typing import Protocol


class IndexSource(Protocol):
    """Protokół źródła losowości: jednostajny indeks z przedziału [0, n)."""

    def randbelow(self, n: int) -> int:
        """Zwraca losową liczbę całkowitą z [0, n). Dla n <= 0 -> ValueError."""
        ...


class SystemIndexSource:
    """
    Produkcyjne źródło oparte o `secrets` (CSPRNG systemu operacyjnego).

    `secrets.randbelow` losuje przez odrzucanie (getrandbits + retry),
    więc nie ma przesunięcia typowego dla `rand() % n`.
    """

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n musi być dodatnie")
        return secrets.randbelow(n)

    def __repr__(self) -> str:
        return "SystemIndexSource()"


_DEFAULT = SystemIndexSource()


def default_source() -> IndexSource:
    return _DEFAULT
