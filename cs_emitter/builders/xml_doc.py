"""
XML documentation comments.

Fragments are collected per tag kind and always emitted in the canonical
order summary, remarks, typeparam*, param*, returns, exception*, whatever
order they were added in. ``with_inherit_doc`` replaces everything with a
single ``<inheritdoc/>`` marker.
"""

import re
from typing import List, Optional, Tuple

from ..core import syntax
from ..core.indent import IndentEmitter

_LINE_BREAK = re.compile(r"[\r\n]+")


def split_lines(content: str) -> List[str]:
    """Split on CR/LF, dropping empty segments."""
    return [line for line in _LINE_BREAK.split(content) if line]


class XmlDocBuilder:
    """Fluent builder for ``///`` documentation blocks."""

    def __init__(self):
        self.summary: Optional[str] = None
        self.remarks: Optional[str] = None
        self.returns: Optional[str] = None
        self.inherit_doc = False
        self.params: List[Tuple[str, str]] = []
        self.type_params: List[Tuple[str, str]] = []
        self.exceptions: List[Tuple[str, str]] = []

    def with_summary(self, summary: str) -> "XmlDocBuilder":
        self.summary = summary
        return self

    def with_remarks(self, remarks: str) -> "XmlDocBuilder":
        self.remarks = remarks
        return self

    def with_returns(self, returns: str) -> "XmlDocBuilder":
        self.returns = returns
        return self

    def with_param(self, name: str, description: str) -> "XmlDocBuilder":
        self.params.append((name, description))
        return self

    def with_type_param(self, name: str, description: str) -> "XmlDocBuilder":
        self.type_params.append((name, description))
        return self

    def with_exception(self, cref: str, description: str) -> "XmlDocBuilder":
        self.exceptions.append((cref, description))
        return self

    def with_inherit_doc(self) -> "XmlDocBuilder":
        """Inherit documentation from the base member; other tags are ignored."""
        self.inherit_doc = True
        return self

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        indent = indent or IndentEmitter()
        prefix = indent.line(syntax.DOC_COMMENT)

        if self.inherit_doc:
            return f"{prefix} <{syntax.INHERIT_DOC}/>\n"

        lines: List[str] = []

        if self.summary is not None:
            lines.extend(_block(syntax.SUMMARY, None, self.summary))

        if self.remarks is not None:
            lines.extend(_block(syntax.REMARKS, None, self.remarks))

        for name, description in self.type_params:
            lines.extend(
                _inline_or_block(syntax.TYPE_PARAM, _name_attr(name), description)
            )

        for name, description in self.params:
            lines.extend(_inline_or_block(syntax.PARAM, _name_attr(name), description))

        if self.returns is not None:
            lines.extend(_inline_or_block(syntax.RETURNS, None, self.returns))

        for cref, description in self.exceptions:
            lines.extend(
                _inline_or_block(
                    syntax.EXCEPTION, f'{syntax.CREF}="{cref}"', description
                )
            )

        return "".join(f"{prefix} {line}\n" for line in lines)


def _name_attr(name: str) -> str:
    return f'{syntax.NAME}="{name}"'


def _open_tag(tag: str, attributes: Optional[str]) -> str:
    return f"<{tag} {attributes}>" if attributes else f"<{tag}>"


def _block(tag: str, attributes: Optional[str], content: str) -> List[str]:
    # <tag>
    # Line one.
    # </tag>
    return [_open_tag(tag, attributes), *split_lines(content), f"</{tag}>"]


def _inline_or_block(tag: str, attributes: Optional[str], content: str) -> List[str]:
    content_lines = split_lines(content)
    if len(content_lines) == 1:
        return [f"{_open_tag(tag, attributes)}{content_lines[0]}</{tag}>"]
    return _block(tag, attributes, content)
