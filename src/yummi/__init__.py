"""yummi: terminal tables and text boxes with alignment, formatting and colors."""

# Colors
from yummi.color import COLORS, colorize, escape

# Customization specs
from yummi.components import Block, Using, With

# Configuration
from yummi.config import TableStyle

# Contexts
from yummi.context import DEFAULT_CONTEXT, ContextScope, TableContext

# Errors
from yummi.exceptions import (
    UndefinedColumnError,
    UnsupportedAlignmentError,
    UnsupportedLayoutError,
    YummiError,
)

# Row extraction
from yummi.rows import CellValue, IndexedRow, RowKind, extract_row

# Components
from yummi.table import Table
from yummi.text_box import TextBox

# Utilities
from yummi.utils import align_text, strip_ansi, visible_width

__all__ = [
    # Colors
    "COLORS",
    "colorize",
    "escape",
    # Customization specs
    "Block",
    "Using",
    "With",
    # Configuration
    "TableStyle",
    # Contexts
    "DEFAULT_CONTEXT",
    "ContextScope",
    "TableContext",
    # Errors
    "UndefinedColumnError",
    "UnsupportedAlignmentError",
    "UnsupportedLayoutError",
    "YummiError",
    # Rows
    "CellValue",
    "IndexedRow",
    "RowKind",
    "extract_row",
    # Components
    "Table",
    "TextBox",
    # Utilities
    "align_text",
    "strip_ansi",
    "visible_width",
]
