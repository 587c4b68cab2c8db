"""HTML canonicalization for line diffing.

``canonicalize_html`` turns an HTML fragment into one line per open tag, one
line per non-blank text run and one line per close tag, indented by nesting
depth.  Attributes are sorted by name and whitespace is collapsed, so
cosmetic differences (attribute order, line wrapping, indentation) vanish
while structural and textual differences remain visible to the line differ.

Comments, doctypes and processing instructions are dropped.

Text is written in escaped form with bs4's minimal formatter, so ``&``, ``<``
and ``>`` always appear as ``&amp;``, ``&lt;`` and ``&gt;``.  Because the parser
decodes entities first, spellings of the same character are canonicalized
together: ``a &lt; b``, ``a &#60; b`` and a bare ``a < b`` all produce the line
``a &lt; b``, and ``&eacute;`` produces ``é``.  Markup that differs only in how a
character is spelled therefore compares equal.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

__all__ = ["canonicalize_html"]

_WHITESPACE = re.compile(r"\s+")

_INDENT = "  "


def canonicalize_html(html: str) -> str:
    """Return the canonical line form of an HTML fragment.

    Example::

        canonicalize_html('<p class="b  c" id=x>hi <b>there</b></p>')
        # <p class="b c" id="x">
        #   hi
        #   <b>
        #     there
        #   </b>
        # </p>
    """
    # multi_valued_attributes=None keeps class="a b" as the raw string
    soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
    lines: list[str] = []
    for child in soup.children:
        _emit(child, 0, lines)
    return "\n".join(lines).strip()


def _emit(node: PageElement, level: int, lines: list[str]) -> None:
    indent = _INDENT * level

    if isinstance(node, Tag):
        attrs = "".join(
            f' {name}="{_collapse(_attr_text(value))}"'
            for name, value in sorted(node.attrs.items())
        )
        lines.append(f"{indent}<{node.name}{attrs}>")
        for child in node.children:
            _emit(child, level + 1, lines)
        lines.append(f"{indent}</{node.name}>")
        return

    # Comment, Doctype, CData, ProcessingInstruction are PreformattedStrings
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        # Re-escape &, < and > the way bs4 writes minimal HTML
        text = _collapse(node.output_ready(formatter="minimal"))
        if text:
            lines.append(f"{indent}{text}")


def _attr_text(value: object) -> str:
    if isinstance(value, list):
        return " ".join(str(v) for v in value)
    return "" if value is None else str(value)


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()
