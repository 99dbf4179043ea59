"""Identifier transformations used for generated names.

All functions are pure and deterministic.  They intentionally implement a
small, predictable set of rules rather than a full English/identifier model:

* ``pascal_case("user_name")``  -> ``"UserName"``
* ``camel_case("UserName")``    -> ``"username"`` (no separators, one word)
* ``snake_case("ID")``          -> ``"i_d"``
* ``pluralize("category")``     -> ``"categories"``
"""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[_\- ]")


def split_words(value: str) -> list[str]:
    """Split *value* on ``_``, ``-`` and space, dropping empty tokens."""
    return [word for word in _WORD_SEPARATORS.split(value) if word]


def pascal_case(value: str) -> str:
    """Convert ``some-thing``/``some_thing``/``some thing`` to ``SomeThing``.

    Each word is lower-cased before its first letter is upper-cased, so an
    input with embedded capitals and no separators is a single word:
    ``"UserName"`` -> ``"Username"``.
    """
    return "".join(word.capitalize() for word in split_words(value))


def camel_case(value: str) -> str:
    """Convert to ``someThing`` (Pascal case with a lower-case first letter)."""
    pascal = pascal_case(value)
    if not pascal:
        return ""
    return pascal[0].lower() + pascal[1:]


def snake_case(value: str) -> str:
    """Insert ``_`` before every upper-case letter after the first, then lower.

    Acronyms are split letter by letter: ``"ID"`` -> ``"i_d"``.
    """
    chars: list[str] = []
    for index, char in enumerate(value):
        if index > 0 and "A" <= char <= "Z":
            chars.append("_")
        chars.append(char)
    return "".join(chars).lower()


def pluralize(word: str) -> str:
    """Naive English plural: ``s`` -> ``ses``, ``y`` -> ``ies``, else ``+s``."""
    if word.endswith("s"):
        return word + "es"
    if word.endswith("y"):
        return word[:-1] + "ies"
    return word + "s"
