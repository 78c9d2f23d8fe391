"""Centralized constants for the DocuGen MCP server."""

# MIME Types - Google Apps
GOOGLE_DOC_MIME_TYPE = 'application/vnd.google-apps.document'

# Document addressing: index 1 is the first character of the body
DOCUMENT_START_INDEX = 1

# Heading level -> Docs named paragraph style
HEADING_STYLES = {
    1: 'HEADING_1',
    2: 'HEADING_2',
    3: 'HEADING_3',
}

# Text style fields FormatDoc may set
TEXT_STYLE_FIELDS = ('bold', 'italic', 'underline')

# Heuristic table cell placement: first cell offset and strides
TABLE_FIRST_CELL_OFFSET = 4
TABLE_ROW_STRIDE = 5
TABLE_COLUMN_STRIDE = 2

# Monospace fence for markdown tables in new documents
CODE_FENCE = '```'

# ListDocs resource
LIST_DOCS_URI = 'googledocs://list'
LIST_DOCS_PAGE_SIZE = 20
LIST_DOCS_FIELDS = 'files(id, name, createdTime, modifiedTime)'
LIST_DOCS_ORDER_BY = 'modifiedTime desc'
