# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the data-type and prototype declaration extractors."""

from doctag.extraction.declaration import extract_data_type, extract_proto
from doctag.extraction.grammar import Grammar
from doctag.model.tokens import DESCRIPTION_LABEL, Token
from doctag.model.tree import CommentNode

# ###############
# Test Helpers
# ###############


def _target() -> CommentNode:
    node = CommentNode()
    node.append(Token(label=DESCRIPTION_LABEL, content="Doc"))
    return node


# ###############
# Data Types
# ###############


class TestDataType:
    def test_entries_appended_in_order(self) -> None:
        node = _target()
        count = extract_data_type("const Options = { name: 'x', retries: 3 }", node, Grammar())
        assert count == 2
        assert node.children[1:] == [
            Token(label="name", content="'x'"),
            Token(label="retries", content="3"),
        ]

    def test_description_token_is_kept_first(self) -> None:
        node = _target()
        extract_data_type("{ a: 1 }", node, Grammar())
        assert node.children[0].label == DESCRIPTION_LABEL

    def test_no_entries(self) -> None:
        node = _target()
        assert extract_data_type("const EMPTY = {}", node, Grammar()) == 0
        assert len(node.children) == 1

    def test_tokens_carry_no_tag_metadata(self) -> None:
        node = _target()
        extract_data_type("{ a: 1 }", node, Grammar())
        tok = node.children[1]
        assert tok.type is None
        assert tok.name is None
        assert tok.description is None


# ###############
# Prototypes
# ###############


class TestProto:
    def test_parameters_appended_in_order(self) -> None:
        node = _target()
        count = extract_proto("function add(a,b)", node, Grammar())
        assert count == 2
        assert node.children[1:] == [
            Token(label="a", content="a"),
            Token(label="b", content="b"),
        ]

    def test_parameter_default_kept_in_content(self) -> None:
        node = _target()
        extract_proto("Builder.prototype.run = function(target, retries = 3)", node, Grammar())
        assert node.children[2] == Token(label="retries", content="retries = 3")

    def test_no_parameters(self) -> None:
        node = _target()
        assert extract_proto("function noop()", node, Grammar()) == 0
        assert len(node.children) == 1

    def test_default_calling_a_function(self) -> None:
        node = _target()
        assert extract_proto("function f(a = g(1), b)", node, Grammar()) == 2
        assert node.children[1:] == [
            Token(label="a", content="a = g(1)"),
            Token(label="b", content="b"),
        ]

    def test_callback_typed_parameter(self) -> None:
        node = _target()
        extract_proto("function f(cb: (x: number) => void, b)", node, Grammar())
        assert node.children[1:] == [
            Token(label="cb", content="cb: (x: number) => void"),
            Token(label="b", content="b"),
        ]

    def test_generic_and_string_defaults_stay_whole(self) -> None:
        node = _target()
        extract_proto("function f(m: Map<string, number>, sep = ',', [x, y] = [], n)", node, Grammar())
        assert [tok.label for tok in node.children[1:]] == ["m", "sep", "n"]
        assert node.children[1].content == "m: Map<string, number>"
        assert node.children[2].content == "sep = ','"

    def test_unterminated_parameter_list(self) -> None:
        node = _target()
        assert extract_proto("function f(a, b", node, Grammar()) == 0
