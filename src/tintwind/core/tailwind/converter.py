"""
CSS declaration list -> Tailwind class string.

The converter is total over string input: unknown properties become
``[property:value]`` classes, malformed lines are skipped, and the result
is always safe to drop into a ``class="..."`` attribute.
"""

from __future__ import annotations

import logging
import re

from ..ir import CssDeclaration
from .handlers import TAILWIND_MAPPING
from .spacing import arbitrary_property

logger = logging.getLogger(__name__)

_STYLE_ATTR_RE = re.compile(r"""style=["']([^"']*)["']""")
_BLOCK_RE = re.compile(r"{([^}]*)}")
_OUTER_BRACES_RE = re.compile(r"^\s*\{|\}\s*$")


def preprocess_css_input(text: str) -> str:
    """Pull declarations out of pasted HTML or a CSS rule.

    The first ``style="..."`` attribute wins, then the first ``{...}`` block;
    anything else is returned unchanged.
    """
    match = _STYLE_ATTR_RE.search(text)
    if match and match.group(1):
        return match.group(1)

    if "{" in text and "}" in text:
        match = _BLOCK_RE.search(text)
        if match and match.group(1):
            return match.group(1)

    return text


def parse_declarations(text: str) -> list[CssDeclaration]:
    """Split ``prop: value; ...`` text into declarations.

    Only the first colon separates property from value, so ``url(http://...)``
    and similar values survive intact. Lines without a colon or with an
    empty property are dropped.
    """
    cleaned = _OUTER_BRACES_RE.sub("", text)
    declarations: list[CssDeclaration] = []

    for raw_line in cleaned.split(";"):
        line = raw_line.strip()
        if not line:
            continue
        prop, sep, value = line.partition(":")
        prop = prop.strip()
        if not sep or not prop:
            logger.debug("Skipping malformed declaration: %r", line)
            continue
        declarations.append(CssDeclaration(property=prop, value=value.strip()))

    return declarations


def declaration_to_class(declaration: CssDeclaration) -> str:
    """Translate one declaration; may return several space-separated classes."""
    handler = TAILWIND_MAPPING.get(declaration.property)
    if handler is None:
        logger.debug("No handler for %r, emitting arbitrary property", declaration.property)
        return arbitrary_property(declaration.property, declaration.value)
    return handler(declaration.value)


def convert_css_to_tailwind(text: str) -> str:
    """Convert a declaration list to Tailwind classes, in declaration order.

    Args:
        text: ``property: value;`` lines, optionally wrapped in one ``{ }``.

    Returns:
        Classes joined by single spaces.
    """
    classes = [declaration_to_class(decl) for decl in parse_declarations(text)]
    return " ".join(cls for cls in classes if cls)


# Sample inputs offered alongside the converter.
EXAMPLE_SNIPPETS: dict[str, str] = {
    "Button": """display: inline-flex;
padding: 8px 16px;
background: #3b82f6;
color: white;
border-radius: 4px;
font-weight: 500;
cursor: pointer;
transition: background-color 150ms;""",
    "Card": """display: flex;
flex-direction: column;
background: white;
border-radius: 8px;
padding: 16px;
box-shadow: 0 1px 3px rgba(0,0,0,0.12);""",
    "Flex Container": """display: flex;
justify-content: space-between;
align-items: center;
gap: 16px;
padding: 12px;""",
    "Gradient Button": """display: inline-block;
padding: 10px 20px;
background: linear-gradient(to right, #6366f1, #8b5cf6);
color: white;
border-radius: 4px;
font-weight: 500;
text-align: center;
box-shadow: 0 4px 6px rgba(0,0,0,0.1);""",
    "Positioning": """position: absolute;
top: 0;
right: 0;
z-index: 10;
margin: 16px;
opacity: 0.8;""",
}
