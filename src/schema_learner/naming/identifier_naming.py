"""Identifier and type-name derivation from raw JSON keys."""

from __future__ import annotations

import re

_WORD_START_PATTERN = re.compile(r"(^\w|_\w)", re.ASCII)
_NON_ALPHANUMERIC_PATTERN = re.compile(r"[^A-Za-z0-9]")


def to_identifier(raw: str) -> str:
    """Convert a raw JSON key into a PascalCase identifier.

    The first word character and every word character following an underscore
    are uppercased (the underscore is dropped), then everything outside
    ``[A-Za-z0-9]`` is removed. Keys made only of punctuation yield ``""``.
    """
    capitalized = _WORD_START_PATTERN.sub(
        lambda match: match.group(0).replace("_", "", 1).upper(), raw
    )
    return _NON_ALPHANUMERIC_PATTERN.sub("", capitalized)


def to_singular(word: str) -> str:
    """Best-effort English depluralization.

    Irregular plurals ("children", "data") are returned unchanged and words that
    merely end in a single "s" lose it ("status" becomes "statu").
    """
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("ses"):
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


def to_type_name(key: str, *, collection: bool = False) -> str:
    """Type name for the values stored under ``key``."""
    if collection:
        return to_identifier(to_singular(key))
    return to_identifier(key)
