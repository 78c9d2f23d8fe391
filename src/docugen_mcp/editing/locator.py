"""Locate text occurrences in a flattened document."""
from typing import Iterable, Optional

from .spans import OffsetRange, TextSpan


def find_occurrences(spans: Iterable[TextSpan], target: str) -> list[OffsetRange]:
    """Find every occurrence of ``target`` inside each span.

    The search resumes one character after each match start, so overlapping
    matches are reported (``"aba"`` occurs twice in ``"ababab"``). Matches
    never cross span boundaries.

    Args:
        spans: Spans in document order.
        target: Exact text to find.

    Returns:
        Ranges in document order.
    """
    if not target:
        return []

    occurrences = []
    for span in spans:
        index = span.text.find(target)
        while index != -1:
            start = span.start_offset + index
            occurrences.append(OffsetRange(start, start + len(target)))
            index = span.text.find(target, index + 1)
    return occurrences


def locate_table_source(spans: list[TextSpan], lines: list[str]) -> Optional[OffsetRange]:
    """Find the range covered by a markdown table's source text.

    Each line is matched at or after the end of the previous line's match,
    so rows repeated inside the table don't cut the range short. If a later
    line can't be found the range ends after the last line that was.

    Returns:
        The source range, or None when the first line is not in the document.
    """
    start = None
    end = None
    for line in lines:
        cursor = start if end is None else end
        match = next(
            (found for found in find_occurrences(spans, line)
             if cursor is None or found.start >= cursor),
            None,
        )
        if match is None:
            break
        if start is None:
            start = match.start
        end = match.end

    if start is None:
        return None
    return OffsetRange(start, end)
