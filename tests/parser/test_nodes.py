# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the input node contract."""

import dataclasses

import pytest

from doctag.parser.nodes import NodeKind, SourceNode, coerce_kind


class TestCoerceKind:
    @pytest.mark.parametrize(
        ("label", "kind"),
        [
            ("COMMENT", NodeKind.COMMENT),
            ("comment", NodeKind.COMMENT),
            ("DATA_TYPE", NodeKind.DATA_TYPE),
            ("data-type", NodeKind.DATA_TYPE),
            ("PROTO", NodeKind.PROTO),
            ("prototype", NodeKind.PROTO),
            ("OTHER", NodeKind.OTHER),
            ("whitespace", NodeKind.OTHER),
            ("", NodeKind.OTHER),
        ],
    )
    def test_labels(self, label: str, kind: NodeKind) -> None:
        assert coerce_kind(label) is kind

    def test_kind_passes_through(self) -> None:
        assert coerce_kind(NodeKind.PROTO) is NodeKind.PROTO


class TestSourceNode:
    def test_is_read_only(self) -> None:
        node = SourceNode(NodeKind.COMMENT, "/** x */")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.content = "changed"  # type: ignore[misc]
