# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Document tree for the SDLang model: documents, tags, and attributes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from sdlang.model.values import Value

# ###############
# Public Interface
# ###############


class Attribute(BaseModel):
    """A ``key=value`` pair attached to a tag."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: Value


class Tag(BaseModel):
    """One SDLang statement.

    A tag either has a ``name`` or is anonymous, in which case its first
    value is its identity. ``children`` is ``None`` unless a ``{...}`` block
    followed the tag, even an empty one.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str | None = None
    name: str | None = None
    values: tuple[Value, ...] = ()
    attributes: tuple[Attribute, ...] = ()
    children: tuple[Tag, ...] | None = None

    @model_validator(mode="after")
    def _check_identity(self) -> Tag:
        if self.name is None:
            if self.namespace is not None:
                raise ValueError("an anonymous tag cannot have a namespace")
            if not self.values:
                raise ValueError("a tag needs a name or at least one value")
        return self

    @property
    def is_anonymous(self) -> bool:
        return self.name is None

    @property
    def qualified_name(self) -> str | None:
        """The name prefixed with ``namespace:`` when one is present."""
        if self.name is None:
            return None
        if self.namespace is None:
            return self.name
        return f"{self.namespace}:{self.name}"

    def attribute(self, key: str) -> Value | None:
        """Return the value of the first attribute named *key*, or None."""
        for attr in self.attributes:
            if attr.key == key:
                return attr.value
        return None

    def attributes_named(self, key: str) -> list[Value]:
        """Return the values of every attribute named *key*, in source order."""
        return [attr.value for attr in self.attributes if attr.key == key]

    def child(self, name: str) -> Tag | None:
        """Return the first child tag whose name is *name*, or None."""
        return next(iter(self.children_named(name)), None)

    def children_named(self, name: str) -> list[Tag]:
        return [tag for tag in self.children or () if tag.name == name]


class Document(BaseModel):
    """The root of a parsed SDLang text: its top-level tags in source order."""

    model_config = ConfigDict(frozen=True)

    tags: tuple[Tag, ...] = ()

    def tag(self, name: str) -> Tag | None:
        """Return the first top-level tag whose name is *name*, or None."""
        return next(iter(self.tags_named(name)), None)

    def tags_named(self, name: str) -> list[Tag]:
        return [tag for tag in self.tags if tag.name == name]


# Resolve forward references in self-referential models.
Tag.model_rebuild()
Document.model_rebuild()
