# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""The documentation-comment mini-grammar.

A comment block opens with free description text and continues with tags.
Each tag starts with the marker character (``@`` by default) directly
followed by the tag name, and runs until the next tag or the end of the
comment::

    /**
     * Adds two numbers
     * @param {number} a first operand
     * @return {number} the sum
     */

A type annotation is a brace-delimited segment placed right before a name.
Several annotations may follow each other to spell a union
(``{string}{number} value``).

All patterns are compiled once per :class:`Grammar`. Every scan goes through
``finditer``, so match positions live in a fresh iterator per call and never
leak from one text into the next.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from doctag.config.settings import ExtractorConfig

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class TypeMatch:
    """A brace-delimited type annotation and the name that follows it, if any."""

    type: str
    name: str | None


@dataclass(frozen=True)
class Entry:
    """A name/value pair found in a declaration."""

    name: str
    value: str


class Grammar:
    """Compiled patterns of the comment mini-grammar for one configuration."""

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()
        marker = re.escape(self.config.marker)
        # A marker starts a tag only at the beginning of a line fragment, so
        # addresses such as ``user@example.com`` stay inside their text.
        tag_start = rf"(?<![^\s*]){marker}(?=\w)"

        self._description = re.compile(rf"^\s*(?:/\*+)?(?P<text>.*?)(?={tag_start}|\*/|\Z)", re.S)
        self._tag = re.compile(rf"(?P<label>{tag_start}[\w.-]+)(?P<content>.*?)(?={tag_start}|\Z)", re.S)
        self._property = re.compile(
            r"^(?:(?:\{(?P<type>[^{}]*)\}\s*)+(?:(?P<name>[^\s{}]+)\s+)?)?(?P<text>[^\s{}].*)$",
            re.S,
        )
        self._type = re.compile(r"\{(?P<type>[^{}]*)\}\s*(?P<name>[^\s{}]+)?")
        self._name = re.compile(r"\}\s*(?P<name>[^\s{}][^{}]*)")

    @property
    def marker(self) -> str:
        return self.config.marker

    def description(self, text: str) -> str | None:
        """Return the cleaned leading description of a comment, or None if it has none."""
        match = self._description.search(text)
        if match is None:
            return None
        return clean_content(match.group("text")) or None

    def tags(self, text: str) -> Iterator[tuple[str, str]]:
        """Yield ``(label, content)`` for each tag in order; labels keep their marker."""
        for match in self._tag.finditer(text):
            yield match.group("label"), match.group("content")

    def descriptions(self, content: str) -> Iterator[str]:
        """Yield the free text trailing the type and name of cleaned tag content."""
        for match in self._property.finditer(content):
            yield match.group("text").strip()

    def types(self, content: str) -> Iterator[TypeMatch]:
        """Yield every type annotation of cleaned tag content."""
        for match in self._type.finditer(content):
            yield TypeMatch(type=match.group("type").strip(), name=match.group("name"))

    def names(self, content: str) -> Iterator[str]:
        """Yield the first word following each type annotation."""
        for match in self._name.finditer(content):
            yield match.group("name").split()[0]

    def data_type_entries(self, text: str) -> Iterator[Entry]:
        """Yield the ``key: value`` entries of a data-type declaration."""
        for match in _DATA_TYPE_ENTRY.finditer(text):
            yield Entry(name=match.group("key"), value=match.group("value").strip())

    def proto_entries(self, text: str) -> Iterator[Entry]:
        """Yield one entry per parameter of the first parameter list in *text*.

        The entry name is the bare parameter name, the value is the whole
        parameter text including any type annotation or default.
        """
        for param in _split_parameters(text) or []:
            match = _PARAM_NAME.match(param)
            if match is not None:
                yield Entry(name=match.group("name"), value=param.strip())


def clean_content(text: str) -> str:
    """Strip comment delimiters and bullets, then fold whitespace runs into one space."""
    for delimiter in ("/**", "*/", "*"):
        text = text.replace(delimiter, "")
    # Newlines fold too, so continuation lines join the tag text.
    return " ".join(text.split())


# ################
# Implementation
# ################

_DATA_TYPE_ENTRY = re.compile(
    r"""(?P<quote>['"]?)(?P<key>[A-Za-z_$][\w$]*)(?P=quote)\??\s*:\s*(?P<value>[^\s,;{}][^,;\n{}]*)"""
)
_PARAM_NAME = re.compile(r"\s*(?:\.{3})?(?P<name>[A-Za-z_$][\w$]*)")

_BRACKETS: dict[str, str] = {"(": ")", "[": "]", "{": "}", "<": ">"}


def _split_parameters(text: str) -> list[str] | None:
    """Split the first parenthesised parameter list of *text* on its top-level commas.

    Nested brackets, generics and quoted strings are skipped over, so defaults
    such as ``a = g(1)`` and callback types such as ``cb: (x: number) => void``
    stay whole. Returns None when *text* holds no complete parameter list.
    """
    start = text.find("(")
    if start == -1:
        return None

    pieces: list[str] = []
    closers: list[str] = []
    quote: str | None = None
    piece_start = start + 1
    for index in range(start + 1, len(text)):
        ch = text[index]
        if quote is not None:
            if ch == quote and text[index - 1] != "\\":
                quote = None
        elif ch in "'\"`":
            quote = ch
        elif ch in _BRACKETS:
            closers.append(_BRACKETS[ch])
        elif closers and ch == closers[-1] and not (ch == ">" and text[index - 1] == "="):
            closers.pop()
        elif not closers and ch in ",)":
            pieces.append(text[piece_start:index])
            piece_start = index + 1
            if ch == ")":
                return [piece for piece in pieces if piece.strip()]
    return None
