# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the comment extractor."""

import pytest

from doctag.config.settings import ExtractorConfig
from doctag.extraction.comment import extract_comment
from doctag.extraction.grammar import Grammar
from doctag.model.tokens import DESCRIPTION_LABEL, Token
from doctag.model.tree import CommentNode, TokenTree

# ###############
# Test Helpers
# ###############


class _Collector:
    """Missing-type handler that records tokens instead of raising."""

    def __init__(self) -> None:
        self.tokens: list[Token] = []

    def __call__(self, token: Token) -> None:
        self.tokens.append(token)


def _raise(token: Token) -> None:
    raise RuntimeError(token.label)


def _extract(text: str, config: ExtractorConfig | None = None) -> CommentNode:
    return extract_comment(text, TokenTree(), Grammar(config), _raise)


# ###############
# Description Token
# ###############


class TestDescriptionToken:
    def test_description_is_first_child(self) -> None:
        node = _extract("/** Adds two numbers\n@param {number} a first */")
        assert node.children[0].label == DESCRIPTION_LABEL
        assert node.children[0].content == "Adds two numbers"

    def test_placeholder_when_missing(self) -> None:
        node = _extract("/** @param {number} a first */")
        assert node.description == "_no description provided_"

    def test_configured_placeholder(self) -> None:
        node = _extract("/** */", ExtractorConfig(description_placeholder="TBD"))
        assert node.children == [Token(label=DESCRIPTION_LABEL, content="TBD")]

    def test_node_is_added_to_tree(self) -> None:
        tree = TokenTree()
        node = extract_comment("/** Doc */", tree, Grammar(), _raise)
        assert tree.comments == [node]


# ###############
# Tag Tokens
# ###############


class TestTagTokens:
    def test_documented_function(self) -> None:
        node = _extract(
            "/** Adds two numbers\n@param {number} a first\n@param {number} b second\n@return {number} sum */"
        )
        assert [tok.label for tok in node.children] == [DESCRIPTION_LABEL, "param", "param", "return"]

        a, b, ret = node.children[1:]
        assert a.type == ["number"]
        assert a.name == ["a"]
        assert a.arg_name == "a"
        assert a.description == "first"
        assert a.content == "{number} a first"
        assert b.type == ["number"]
        assert b.name == ["b"]
        assert b.description == "second"
        assert ret.type == ["number"]
        assert ret.description == "sum"

    def test_marker_is_stripped_from_labels(self) -> None:
        node = _extract("/** Doc\n@param {number} a x\n@since 1.2 */")
        assert all("@" not in tok.label for tok in node.children)

    def test_custom_marker_is_stripped(self) -> None:
        node = _extract("/** Doc\n#param {number} a x */", ExtractorConfig(marker="#"))
        assert node.children[1].label == "param"

    def test_empty_type_becomes_any(self) -> None:
        node = _extract("/** @param {} value anything */")
        assert node.children[1].type == ["any"]

    def test_configured_default_type(self) -> None:
        node = _extract("/** @param {} value anything */", ExtractorConfig(default_type="unknown"))
        assert node.children[1].type == ["unknown"]

    def test_union_types(self) -> None:
        node = _extract("/** @param {string}{number} value the value */")
        tok = node.children[1]
        assert tok.type == ["string", "number"]
        assert tok.arg_name == "value"
        assert tok.name == ["value"]
        assert tok.description == "the value"

    def test_untyped_optional_tag_leaves_lists_unset(self) -> None:
        node = _extract("/** Doc\n@deprecated use build instead */")
        tok = node.children[1]
        assert tok.type is None
        assert tok.name is None
        assert tok.arg_name is None
        assert tok.description == "use build instead"

    def test_multi_line_tag_content(self) -> None:
        node = _extract("/**\n * Doc\n * @param {string} target where the\n *   bundle goes\n */")
        tok = node.children[1]
        assert tok.content == "{string} target where the bundle goes"
        assert tok.description == "where the bundle goes"

    def test_tags_keep_source_order(self) -> None:
        node = _extract("/** Doc\n@return {number} r\n@param {number} p x\n@property {string} q y */")
        assert [tok.label for tok in node.children[1:]] == ["return", "param", "property"]


# ###############
# Required Types
# ###############


class TestRequiredTypes:
    @pytest.mark.parametrize("tag", ["property", "return", "param"])
    def test_missing_type_on_required_tag_is_reported(self, tag: str) -> None:
        collector = _Collector()
        extract_comment(f"/** Doc\n@{tag} bareName */", TokenTree(), Grammar(), collector)
        assert [tok.label for tok in collector.tokens] == [tag]

    def test_handler_may_abort(self) -> None:
        with pytest.raises(RuntimeError, match="property"):
            _extract("/** Doc\n@property bareName */")

    def test_reported_tag_is_still_appended(self) -> None:
        collector = _Collector()
        node = extract_comment("/** Doc\n@param bare */", TokenTree(), Grammar(), collector)
        assert node.children[1].label == "param"
        assert node.children[1].type is None

    def test_optional_tag_without_type_is_not_reported(self) -> None:
        collector = _Collector()
        extract_comment("/** Doc\n@example run it */", TokenTree(), Grammar(), collector)
        assert collector.tokens == []

    def test_configured_required_tags(self) -> None:
        collector = _Collector()
        config = ExtractorConfig(required_tags=frozenset({"returns"}))
        extract_comment("/** @param bare\n@returns thing */", TokenTree(), Grammar(config), collector)
        assert [tok.label for tok in collector.tokens] == ["returns"]

    def test_only_first_annotation_is_checked(self) -> None:
        # A malformed second annotation does not trigger a report.
        collector = _Collector()
        node = extract_comment("/** @param {number} a {oops */", TokenTree(), Grammar(), collector)
        assert collector.tokens == []
        assert node.children[1].type == ["number"]
