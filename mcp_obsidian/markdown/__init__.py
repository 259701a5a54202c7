"""Markdown structural model and heading-path addressing.

Pure, synchronous helpers: classify text into elements, nest them under
headings, resolve heading paths and format patch targets. Nothing in this
package performs I/O.
"""

from .elements import ElementKind, HeadingInfo, MarkdownElement, NestedElement
from .classifier import classify
from .headings import extract_headings, find_heading
from .tree import build_nested_structure, iter_headings, iter_nodes
from .resolver import (
    NESTED_PATH_DELIMITER,
    MatchRule,
    PathNotFound,
    resolve_heading_target,
    resolve_nested_path,
    split_nested_path,
)
from .targets import (
    WIRE_DELIMITER,
    extract_block_id,
    extract_frontmatter_fields,
    format_target,
    to_human_target,
    to_wire_target,
)
from .selectors import SelectorType, select_elements

__all__ = [
    "ElementKind",
    "HeadingInfo",
    "MarkdownElement",
    "NestedElement",
    "classify",
    "extract_headings",
    "find_heading",
    "build_nested_structure",
    "iter_headings",
    "iter_nodes",
    "NESTED_PATH_DELIMITER",
    "MatchRule",
    "PathNotFound",
    "resolve_heading_target",
    "resolve_nested_path",
    "split_nested_path",
    "WIRE_DELIMITER",
    "extract_block_id",
    "extract_frontmatter_fields",
    "format_target",
    "to_human_target",
    "to_wire_target",
    "SelectorType",
    "select_elements",
]
