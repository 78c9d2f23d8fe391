"""Flat text view of a Google Docs document body."""
from typing import Any, NamedTuple


class TextSpan(NamedTuple):
    """One text run and the absolute index of its first character."""
    text: str
    start_offset: int


class OffsetRange(NamedTuple):
    """Half-open index range ``[start, end)`` in document addressing."""
    start: int
    end: int

    def to_api(self) -> dict[str, int]:
        return {'startIndex': self.start, 'endIndex': self.end}


def document_body(document: dict[str, Any]) -> dict[str, Any]:
    """Return the body of a Docs resource.

    Tab-structured documents carry their body under the first tab.

    Args:
        document: Raw JSON resource from ``documents().get``.

    Returns:
        The body dict, or an empty dict if the document has none.
    """
    tabs = document.get('tabs', [])
    if tabs:
        return tabs[0].get('documentTab', {}).get('body', {}) or {}
    return document.get('body', {}) or {}


def flatten_body(body: dict[str, Any]) -> list[TextSpan]:
    """Extract every paragraph text run of a body as a TextSpan.

    Each text run already carries its absolute ``startIndex``, so inline
    elements without text (images, page breaks) are skipped without any
    offset bookkeeping.

    Args:
        body: The document body (``{'content': [...]}``).

    Returns:
        Spans in document order; empty if the body has no content.
    """
    spans = []
    for item in body.get('content', []) or []:
        paragraph = item.get('paragraph')
        if not paragraph:
            continue
        for elem in paragraph.get('elements', []):
            content = elem.get('textRun', {}).get('content')
            if content:
                spans.append(TextSpan(content, elem.get('startIndex', 0)))
    return spans


def body_end_index(body: dict[str, Any]) -> int:
    """Return the end index of the last structural element, or 1 if empty."""
    content = body.get('content', []) or []
    if not content:
        return 1
    return content[-1].get('endIndex') or 1
