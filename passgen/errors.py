class PassgenError(Exception):
    """Bazowy wyjątek biblioteki passgen."""


class ParseError(PassgenError, ValueError):
    """Nie da się zbudować puli z podanego napisu (np. pusty napis)."""


class EmptyPoolError(PassgenError, ValueError):
    """Próba losowania z pustej puli znaków."""


class IndexSourceError(PassgenError, RuntimeError):
    """Źródło losowości zwróciło indeks spoza zakresu [0, n)."""


class ConfigError(PassgenError, ValueError):
    """Niepoprawna wartość w konfiguracji (.env / zmienne środowiskowe)."""
