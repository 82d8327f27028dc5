"""Index parsing for commands that act on list positions."""

from __future__ import annotations

import re

from cakecollate.config.models import DEFAULT_CONFIG, ValidatorConfig
from cakecollate.domain.index import Index, IndexList
from cakecollate.parser.errors import InvalidIndexError

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_DIGITS = re.compile(r"[0-9]+")


def _index_value(text: str, maximum: int) -> int | None:
    """Return the integer *text* denotes if it is a valid index, else None."""
    if _DIGITS.fullmatch(text) is None:
        return None
    significant = text.lstrip("0")
    # int() only ever sees at most as many digits as *maximum* has.
    if not significant or len(significant) > len(str(maximum)):
        return None
    value = int(significant)
    return value if value <= maximum else None


def is_non_zero_unsigned_integer(text: str, *, maximum: int) -> bool:
    """Return True if *text* is plain ASCII digits denoting 1..*maximum*.

    Signs and embedded whitespace are rejected; leading zeros are not.
    """
    return _index_value(text, maximum) is not None


def parse_index(one_based_index: str, *, config: ValidatorConfig | None = None) -> Index:
    """Parse a one-based index typed by the user.

    Raises:
        InvalidIndexError: the trimmed input is not a non-zero unsigned integer.
    """
    cfg = config or DEFAULT_CONFIG
    value = _index_value(one_based_index.strip(), cfg.limits.max_index)
    if value is None:
        raise InvalidIndexError(MESSAGE_INVALID_INDEX, field="index")
    return Index.from_one_based(value)


def parse_index_list(
    one_based_indices: str,
    *,
    config: ValidatorConfig | None = None,
) -> IndexList:
    """Parse space-separated one-based indices, highest first.

    Tokens are split on single spaces, so ``"1  2"`` contains an empty
    token and fails. Duplicates are kept.

    Raises:
        InvalidIndexError: on the first token that is not a valid index.
    """
    parsed = [parse_index(token, config=config) for token in one_based_indices.strip().split(" ")]
    return IndexList.descending(parsed)
