"""Google Docs client - modular implementation.

This module provides a facade that combines the client mixins into
a single DocsClient class.
"""
from .base import DocsClientBase
from .documents import DocumentsMixin
from .files import FilesMixin


class DocsClient(
    DocsClientBase,
    DocumentsMixin,
    FilesMixin,
):
    """Google Docs and Drive client.

    Combines all mixins to provide document creation, editing, formatting,
    table conversion, listing and deletion through a unified interface.
    """
    pass


__all__ = ['DocsClient']
