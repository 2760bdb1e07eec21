"""Guess the field delimiter of a text blob from raw character counts."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..schema import Delimiter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelimiterProfile:
    """Occurrences of each candidate separator across the whole input."""

    space: int = 0
    tab: int = 0
    comma: int = 0

    def choose(self) -> Delimiter:
        """Apply the fixed priority rule to the counts.

        Tab wins when it outnumbers spaces. Otherwise comma wins when it
        strictly outnumbers both spaces and tabs. Everything else, including
        an empty input, falls back to space.
        """
        if self.tab > self.space:
            return Delimiter.TAB
        if self.comma > self.space and self.comma > self.tab:
            return Delimiter.COMMA
        return Delimiter.SPACE


def profile_delimiters(text: str) -> DelimiterProfile:
    """Count spaces, tabs and commas in ``text`` (not per line)."""
    return DelimiterProfile(
        space=text.count(Delimiter.SPACE.char),
        tab=text.count(Delimiter.TAB.char),
        comma=text.count(Delimiter.COMMA.char),
    )


def detect_delimiter(text: str) -> Delimiter:
    """Pick the dominant delimiter for ``text``.

    Args:
        text (str): Full file contents.

    Returns:
        Delimiter: The chosen separator. Detection never fails.

    Note:
        This is a heuristic. Prose with many commas and no tabular structure
        can be detected as comma separated.
    """
    profile = profile_delimiters(text)
    delimiter = profile.choose()
    logger.debug(
        "Delimiter counts space=%d tab=%d comma=%d -> %s",
        profile.space,
        profile.tab,
        profile.comma,
        delimiter.name,
    )
    return delimiter
