"""Common literal values used across bookpress.

These constants keep the raw HTML inserted by the render pipeline in one place
so the generator, the print page builder, and tests can import the same values
without drifting. Intended for internal use within the bookpress package.

Examples
--------
>>> from bookpress import _constants
>>> _constants.PAGE_MARKER_TEMPLATE.format(page_id="intro")
'<div id="intro"></div>'
"""

TABLE_WRAPPER_OPEN = '<div class="table-wrapper">'
TABLE_WRAPPER_CLOSE = "</div>\n"
PRINT_PAGE_BREAK = '<div style="break-before: page; page-break-before: always;"></div>'
PAGE_MARKER_TEMPLATE = '<div id="{page_id}"></div>'
HEADER_LINK_TEMPLATE = '<a class="header" href="#{anchor}">'
