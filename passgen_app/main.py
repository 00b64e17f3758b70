#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import List, Optional

from passgen.errors import PassgenError
from passgen.generator import PasswordGenerator
from passgen.pool import Pool

from passgen_app.config import load_settings

logger = logging.getLogger("passgen_app")


def build_parser(defaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passgen", description="Generator losowych haseł")
    parser.add_argument("--charset", "-c", default=defaults.charset, help="Znaki, z których losowane są hasła")
    parser.add_argument("--length", "-l", type=int, default=defaults.length, help="Długość hasła")
    parser.add_argument("--count", "-n", type=int, default=defaults.count, help="Liczba haseł")
    parser.add_argument("--unique", action="store_true", help="Usuń powtórzone znaki z puli")
    parser.add_argument("--verbose", "-v", action="store_true", help="Logi DEBUG na stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except PassgenError as e:
        print(f"[BŁĄD] {e}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)

    level = logging.DEBUG if args.verbose else settings.log_level_number
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s", stream=sys.stderr)

    try:
        pool = Pool.parse(args.charset)
        if args.unique:
            pool = pool.unique()
        generator = PasswordGenerator(pool)
        # walidacja długości i liczby następuje przed pierwszym hasłem
        for pwd in generator.iter_passwords(args.length, args.count):
            print(pwd)
    except (PassgenError, ValueError) as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"[BŁĄD] {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
