"""AST node types for GraphQL documents.

This module defines frozen dataclasses for every node kind the printer
understands. Trees are built once (by the parser adapter or by hand) and
are never mutated afterwards.

Literal values (strings, numbers, booleans) are carried as plain Python
values; parsed floats keep their source text as ``FloatValue`` so that
printing never changes their precision. Lists and object literals may be
given as ``list``/``dict`` or as ``InputObject`` nodes.
``default_value=None`` means "no default", the explicit GraphQL ``null``
is ``NullValue()``.
"""

from dataclasses import dataclass, field
from typing import Any, Union


# Types

@dataclass(frozen=True)
class TypeName:
    """A named type reference, e.g. ``Int``."""
    name: str


@dataclass(frozen=True)
class ListType:
    """A list wrapper, e.g. ``[Int]``."""
    of_type: "TypeNode"


@dataclass(frozen=True)
class NonNullType:
    """A non-null wrapper, e.g. ``Int!``."""
    of_type: "TypeNode"


TypeNode = Union[TypeName, ListType, NonNullType]


# Values

@dataclass(frozen=True)
class NullValue:
    """The ``null`` literal."""


@dataclass(frozen=True)
class FloatValue:
    """A float literal kept as its source text, e.g. ``1.0e10``."""
    text: str


@dataclass(frozen=True)
class EnumValue:
    """A bare enum value reference such as ``RED``."""
    name: str


@dataclass(frozen=True)
class VariableIdentifier:
    """A ``$name`` reference to an operation variable."""
    name: str


@dataclass(frozen=True)
class Argument:
    name: str
    value: Any


@dataclass(frozen=True)
class InputObject:
    """An object literal, e.g. ``{first: 10, after: $cursor}``."""
    arguments: tuple[Argument, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the literal as an insertion-ordered ``key -> value`` dict."""
        return {arg.name: arg.value for arg in self.arguments}


@dataclass(frozen=True)
class Directive:
    name: str
    arguments: tuple[Argument, ...] = ()


# Executable definitions

@dataclass(frozen=True)
class Field:
    name: str
    alias: str | None = None
    arguments: tuple[Argument, ...] = ()
    directives: tuple[Directive, ...] = ()
    selections: tuple["Selection", ...] = ()


@dataclass(frozen=True)
class FragmentSpread:
    name: str
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True)
class InlineFragment:
    type: TypeName | None = None
    directives: tuple[Directive, ...] = ()
    selections: tuple["Selection", ...] = ()


Selection = Union[Field, FragmentSpread, InlineFragment]


@dataclass(frozen=True)
class VariableDefinition:
    name: str
    type: TypeNode
    default_value: Any = None


@dataclass(frozen=True)
class OperationDefinition:
    """A query, mutation or subscription."""
    operation_type: str = "query"
    name: str | None = None
    variables: tuple[VariableDefinition, ...] = ()
    directives: tuple[Directive, ...] = ()
    selections: tuple[Selection, ...] = ()


@dataclass(frozen=True)
class FragmentDefinition:
    name: str
    type: TypeName | None = None
    directives: tuple[Directive, ...] = ()
    selections: tuple[Selection, ...] = ()


# Type system definitions
#
# Descriptions are kept on the nodes but excluded from equality, so trees
# compare equal whether or not their descriptions survived printing.

@dataclass(frozen=True)
class SchemaDefinition:
    """Root operation types; ``None`` means the root is not declared."""
    query: str | None = None
    mutation: str | None = None
    subscription: str | None = None
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class InputValueDefinition:
    """An argument of a field/directive definition or a field of an input type."""
    name: str
    type: TypeNode
    default_value: Any = None
    directives: tuple[Directive, ...] = ()
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    type: TypeNode
    arguments: tuple[InputValueDefinition, ...] = ()
    directives: tuple[Directive, ...] = ()
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ScalarTypeDefinition:
    name: str
    directives: tuple[Directive, ...] = ()
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ObjectTypeDefinition:
    name: str
    fields: tuple[FieldDefinition, ...] = ()
    interfaces: tuple[str, ...] = ()
    directives: tuple[Directive, ...] = ()
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class InterfaceTypeDefinition:
    name: str
    fields: tuple[FieldDefinition, ...] = ()
    directives: tuple[Directive, ...] = ()
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class UnionTypeDefinition:
    name: str
    types: tuple[TypeName, ...] = ()
    directives: tuple[Directive, ...] = ()
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class EnumValueDefinition:
    name: str
    directives: tuple[Directive, ...] = ()
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class EnumTypeDefinition:
    name: str
    values: tuple[EnumValueDefinition, ...] = ()
    directives: tuple[Directive, ...] = ()
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class InputObjectTypeDefinition:
    name: str
    fields: tuple[InputValueDefinition, ...] = ()
    directives: tuple[Directive, ...] = ()
    description: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class DirectiveDefinition:
    name: str
    locations: tuple[str, ...] = ()
    arguments: tuple[InputValueDefinition, ...] = ()
    description: str | None = field(default=None, compare=False)


Definition = Union[
    OperationDefinition,
    FragmentDefinition,
    SchemaDefinition,
    ScalarTypeDefinition,
    ObjectTypeDefinition,
    InterfaceTypeDefinition,
    UnionTypeDefinition,
    EnumTypeDefinition,
    InputObjectTypeDefinition,
    DirectiveDefinition,
]


@dataclass(frozen=True)
class Document:
    definitions: tuple[Definition, ...] = ()

    def definition_names(self) -> list[str]:
        """Return the names of all named definitions, in document order."""
        return [
            d.name for d in self.definitions
            if getattr(d, "name", None) is not None
        ]

