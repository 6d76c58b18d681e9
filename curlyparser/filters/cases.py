"""
Built-in naming-case filters.

Each filter delegates to the case-converter library. Word-separated cases
(train, word, sentence) are built from its snake_case word split.
"""

from typing import Callable, Dict, List

import caseconverter


CaseConverter = Callable[[str], str]


def _words(value: str) -> List[str]:
    """Split a value into lowercase words at caseconverter's boundaries."""
    return [word for word in caseconverter.snakecase(value).split("_") if word]


def train_case(value: str) -> str:
    return "-".join(word.capitalize() for word in _words(value))


def word_case(value: str) -> str:
    return " ".join(_words(value))


def upper_word_case(value: str) -> str:
    return " ".join(word.upper() for word in _words(value))


def capital_word_case(value: str) -> str:
    return " ".join(word.capitalize() for word in _words(value))


def sentence_case(value: str) -> str:
    return word_case(value).capitalize()


# filter name -> conversion function
BUILTIN_CASES: Dict[str, CaseConverter] = {
    "snake_case": caseconverter.snakecase,
    "upper_snake_case": caseconverter.macrocase,
    "macro_case": caseconverter.macrocase,
    "pascal_case": caseconverter.pascalcase,
    "camel_case": caseconverter.camelcase,
    "dash_case": caseconverter.kebabcase,
    "kebab_case": caseconverter.kebabcase,
    "upper_dash_case": caseconverter.cobolcase,
    "cobol_case": caseconverter.cobolcase,
    "train_case": train_case,
    "word_case": word_case,
    "upper_word_case": upper_word_case,
    "capital_word_case": capital_word_case,
    "sentence_case": sentence_case,
    "flat_case": caseconverter.flatcase,
    "title_case": caseconverter.titlecase,
}
