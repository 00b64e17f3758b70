"""
factory.py
----------
Statyczna fabryka gotowych generatorów dla typowych zestawów znaków.
"""

from __future__ import annotations
import string
from typing import Optional

from .builder import GeneratorBuilder
from .generator import PasswordGenerator
from .random_source import IndexSource


class GeneratorFactory:
    """Wygodne „jednolinijkowe” tworzenie generatorów."""

    @staticmethod
    def custom(charset: str, source: Optional[IndexSource] = None) -> PasswordGenerator:
        builder = GeneratorBuilder().with_charset(charset)
        if source is not None:
            builder.with_source(source)
        return builder.build()

    @staticmethod
    def digits(source: Optional[IndexSource] = None) -> PasswordGenerator:
        return GeneratorFactory.custom(string.digits, source)

    @staticmethod
    def letters(source: Optional[IndexSource] = None) -> PasswordGenerator:
        return GeneratorFactory.custom(string.ascii_letters, source)

    @staticmethod
    def alphanumeric(source: Optional[IndexSource] = None) -> PasswordGenerator:
        return GeneratorFactory.custom(string.ascii_letters + string.digits, source)

    @staticmethod
    def printable(source: Optional[IndexSource] = None) -> PasswordGenerator:
        # bez białych znaków
        return GeneratorFactory.custom(string.ascii_letters + string.digits + string.punctuation, source)
