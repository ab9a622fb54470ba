#!/usr/bin/env python3
"""
Number Words — Entry Point
==========================

Prints a table of sample conversions for every shipped language, or spells
the numbers given on the command line.

Usage:
    python main.py                         # Demo table, all languages
    python main.py 1234567 -17.42          # Spell in the default language
    NUMBER_WORDS_DEFAULT_LANG=ru python main.py 21000
"""

from __future__ import annotations

import sys

from dotenv import load_dotenv

from number_words import NumberConverter, NumberWordsError
from number_words.config import configure_logging, load_settings
from number_words.languages import LANGUAGES

load_dotenv()


# ─── Sample Values — Chosen to Hit the Tricky Paths ─────────────────

SAMPLES = [0, 7, 21, 101, 1000, 2000, 21000, 1234567, "-17.42", "0.05"]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_language(converter: NumberConverter, values) -> int:
    """Print one language block. Returns the number of failed conversions."""
    language = converter.language
    failures = 0

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  {language.name.upper()} ({language.code}){_RESET}")
    print(f"{'─' * _WIDTH}")
    for value in values:
        try:
            words = converter.convert(value)
        except NumberWordsError as exc:
            failures += 1
            print(f"  {str(value):>12}  {_RED}[{exc.code}] {exc}{_RESET}")
            continue
        print(f"  {str(value):>12}  {_DIM}→{_RESET} {words}")

    if language.supports_ordinals:
        print(f"  {'ordinal 21':>12}  {_DIM}→{_RESET} {_GREEN}{converter.ordinal(21)}{_RESET}")
    return failures


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Spell the command-line values, or print the demo table."""
    configure_logging()
    args = sys.argv[1:]

    if args:
        converter = NumberConverter(load_settings().default_lang)
        failures = print_language(converter, args)
    else:
        failures = sum(print_language(NumberConverter(code), SAMPLES) for code in LANGUAGES)

    print(f"{'=' * _WIDTH}\n")
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
