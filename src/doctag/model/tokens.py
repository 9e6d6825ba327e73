# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tag tokens produced for every recognized comment or declaration construct."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

# Label of the synthetic token that leads every comment node.
DESCRIPTION_LABEL = "description"


class Token(BaseModel):
    """One structured piece of a documentation comment or declaration.

    Attributes:
        label: Tag name without its marker (e.g. ``param``), the description
            label, or the entry name for declaration tokens.
        content: Cleaned remaining text of the tag.
        description: Free text following the type and name, if any.
        type: Type names from brace-delimited annotations, if any.
        name: Identifier names following a type annotation, if any.
        arg_name: The first name captured together with a type.
    """

    model_config = ConfigDict(populate_by_name=True)

    label: str
    content: str
    description: str | None = None
    type: list[str] | None = None
    name: list[str] | None = None
    arg_name: str | None = _Field(default=None, alias="argName")

    def add_type(self, type_name: str) -> None:
        """Append a type entry, creating the list on first use."""
        if self.type is None:
            self.type = []
        self.type.append(type_name)

    def add_name(self, name: str) -> None:
        """Append a name entry, creating the list on first use."""
        if self.name is None:
            self.name = []
        self.name.append(name)
