"""Document assembly - Master Agreement and State Addendum rendering."""

from .templating import PLACEHOLDER_PATTERN, render_template, find_placeholders
from .master import MasterInput, assemble_master
from .addendum import (
    CLAUSE_BLOCKS,
    DEEP_DIVE_MARKER,
    DEEP_DIVE_SECTIONS,
    AddendumInput,
    assemble_addendum,
    build_clause_section,
    build_deep_dive_section,
    format_compensation_summary,
)

__all__ = [
    # Templating
    "PLACEHOLDER_PATTERN",
    "render_template",
    "find_placeholders",
    # Master
    "MasterInput",
    "assemble_master",
    # Addendum
    "CLAUSE_BLOCKS",
    "DEEP_DIVE_MARKER",
    "DEEP_DIVE_SECTIONS",
    "AddendumInput",
    "assemble_addendum",
    "build_clause_section",
    "build_deep_dive_section",
    "format_compensation_summary",
]
