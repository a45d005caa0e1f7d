"""Render AST nodes back into GraphQL source text.

The entry point is :func:`render`, which dispatches on the node's class
through a lookup table and recurses into children. Every renderer is a pure
function returning a new string; nothing is accumulated in shared state.

Example:
    from gql_printer.core.nodes import Field, Argument
    from gql_printer.core.printer import render

    render(Field(name="user", alias="u", arguments=(Argument("id", 1),),
                 selections=(Field(name="name"),)))
    # => 'u: user(id: 1) {\\n  name\\n}'
"""

import json
from enum import Enum
from typing import Any, Callable, Iterable

from .errors import UnsupportedNodeError
from .nodes import (
    Argument,
    Directive,
    DirectiveDefinition,
    Document,
    EnumTypeDefinition,
    EnumValue,
    EnumValueDefinition,
    Field,
    FieldDefinition,
    FloatValue,
    FragmentDefinition,
    FragmentSpread,
    InlineFragment,
    InputObject,
    InputObjectTypeDefinition,
    InputValueDefinition,
    InterfaceTypeDefinition,
    ListType,
    NonNullType,
    NullValue,
    ObjectTypeDefinition,
    OperationDefinition,
    ScalarTypeDefinition,
    SchemaDefinition,
    TypeName,
    UnionTypeDefinition,
    VariableDefinition,
    VariableIdentifier,
)

INDENT = "  "

# Root operation types that need no explicit ``schema { ... }`` block
DEFAULT_ROOT_TYPES = {
    "query": "Query",
    "mutation": "Mutation",
    "subscription": "Subscription",
}


def render(node: Any, indent: str = "") -> str:
    """Turn an AST node (or literal value) back into GraphQL text.

    Args:
        node: A node from :mod:`gql_printer.core.nodes`, or a Python literal,
            ``list``/``tuple``, ``dict`` or ``Enum`` member used as a value
        indent: Whitespace prefix for the current nesting level

    Returns:
        Valid GraphQL for ``node``

    Raises:
        UnsupportedNodeError: If ``node`` is not a known node kind
        ValueError: If ``node`` contains a NaN or infinite Python float
    """
    # IntEnum/StrEnum members would otherwise match int/str first
    if isinstance(node, Enum):
        return _render_symbol(node, indent)
    for cls in type(node).__mro__:
        renderer = _RENDERERS.get(cls)
        if renderer is not None:
            return renderer(node, indent)
    raise UnsupportedNodeError(node)


def _join(nodes: Iterable[Any], separator: str = ", ") -> str:
    return separator.join(render(node) for node in nodes)


# Shared helpers

def render_directives(directives: Iterable[Directive], indent: str = "") -> str:
    """Render directives, each prefixed with a space (empty when none)."""
    return "".join(f" {render(directive)}" for directive in directives)


def render_selections(selections: Iterable[Any], indent: str = "") -> str:
    """Render a ``{ ... }`` selection block, or nothing for no selections."""
    child_indent = indent + INDENT
    lines = "".join(f"{render(selection, child_indent)}\n" for selection in selections)
    if not lines:
        return ""
    return f" {{\n{lines}{indent}}}"


def render_field_definitions(fields: Iterable[Any], indent: str = "") -> str:
    """Render the brace block of a type definition, one field per line."""
    lines = "".join(
        render_description(field, indent=INDENT, first_in_block=i == 0)
        + f"{INDENT}{render(field)}\n"
        for i, field in enumerate(fields)
    )
    return f" {{\n{lines}}}"


def render_description(node: Any, indent: str = "", first_in_block: bool = True) -> str:
    """Render the description leading a definition.

    Descriptions are not emitted yet, so this always returns an empty
    string. Callers still go through it so that description output can be
    switched on here without touching them.
    """
    return ""


# Values

def _render_literal(node: Any, indent: str) -> str:
    # NaN and infinities have no GraphQL spelling
    return json.dumps(node, ensure_ascii=False, allow_nan=False)


def _render_symbol(node: Enum, indent: str) -> str:
    name = str(node.name)
    return name[:1].upper() + name[1:]


def _render_list(node: Any, indent: str) -> str:
    return f"[{_join(node)}]"


def _render_mapping(node: dict, indent: str) -> str:
    pairs = ", ".join(f"{key}: {render(value)}" for key, value in node.items())
    return f"{{{pairs}}}"


def _render_input_object(node: InputObject, indent: str) -> str:
    return render(node.to_dict(), indent)


def _render_null(node: NullValue, indent: str) -> str:
    return "null"


def _render_float_value(node: FloatValue, indent: str) -> str:
    return node.text


def _render_enum_value(node: EnumValue, indent: str) -> str:
    return node.name


def _render_variable_identifier(node: VariableIdentifier, indent: str) -> str:
    return f"${node.name}"


# Types

def _render_type_name(node: TypeName, indent: str) -> str:
    return node.name


def _render_list_type(node: ListType, indent: str) -> str:
    return f"[{render(node.of_type)}]"


def _render_non_null_type(node: NonNullType, indent: str) -> str:
    return f"{render(node.of_type)}!"


# Executable definitions

def _render_argument(node: Argument, indent: str) -> str:
    return f"{node.name}: {render(node.value)}"


def _render_directive(node: Directive, indent: str) -> str:
    arguments = f"({_join(node.arguments)})" if node.arguments else ""
    return f"@{node.name}{arguments}"


def _render_field(node: Field, indent: str) -> str:
    parts = [indent]
    if node.alias:
        parts.append(f"{node.alias}: ")
    parts.append(node.name)
    if node.arguments:
        parts.append(f"({_join(node.arguments)})")
    parts.append(render_directives(node.directives))
    parts.append(render_selections(node.selections, indent=indent))
    return "".join(parts)


def _render_fragment_spread(node: FragmentSpread, indent: str) -> str:
    return f"{indent}...{node.name}{render_directives(node.directives)}"


def _render_inline_fragment(node: InlineFragment, indent: str) -> str:
    type_condition = f" on {render(node.type)}" if node.type else ""
    return (
        f"{indent}...{type_condition}"
        + render_directives(node.directives)
        + render_selections(node.selections, indent=indent)
    )


def _render_fragment_definition(node: FragmentDefinition, indent: str) -> str:
    type_condition = f" on {render(node.type)}" if node.type else ""
    return (
        f"{indent}fragment {node.name}{type_condition}"
        + render_directives(node.directives)
        + render_selections(node.selections, indent=indent)
    )


def _render_variable_definition(node: VariableDefinition, indent: str) -> str:
    default = f" = {render(node.default_value)}" if node.default_value is not None else ""
    return f"${node.name}: {render(node.type)}{default}"


def _render_operation_definition(node: OperationDefinition, indent: str) -> str:
    parts = [indent, node.operation_type]
    if node.name:
        parts.append(f" {node.name}")
    if node.variables:
        parts.append(f"({_join(node.variables)})")
    parts.append(render_directives(node.directives))
    parts.append(render_selections(node.selections, indent=indent))
    return "".join(parts)


def _render_document(node: Document, indent: str) -> str:
    # Suppressed definitions (a default schema block) leave no blank gap
    rendered = (render(definition, indent) for definition in node.definitions)
    return "\n\n".join(text for text in rendered if text)


# Type system definitions

def _render_schema_definition(node: SchemaDefinition, indent: str) -> str:
    roots = {
        "query": node.query,
        "mutation": node.mutation,
        "subscription": node.subscription,
    }
    if all(
        type_name is None or type_name == DEFAULT_ROOT_TYPES[operation]
        for operation, type_name in roots.items()
    ):
        return ""
    lines = "".join(
        f"{INDENT}{operation}: {type_name}\n"
        for operation, type_name in roots.items()
        if type_name
    )
    return f"schema {{\n{lines}}}"


def _render_scalar_type_definition(node: ScalarTypeDefinition, indent: str) -> str:
    return (
        render_description(node)
        + f"scalar {node.name}"
        + render_directives(node.directives)
    )


def _render_object_type_definition(node: ObjectTypeDefinition, indent: str) -> str:
    implements = f" implements {', '.join(node.interfaces)}" if node.interfaces else ""
    return (
        render_description(node)
        + f"type {node.name}"
        + render_directives(node.directives)
        + implements
        + render_field_definitions(node.fields)
    )


def _render_interface_type_definition(node: InterfaceTypeDefinition, indent: str) -> str:
    return (
        render_description(node)
        + f"interface {node.name}"
        + render_directives(node.directives)
        + render_field_definitions(node.fields)
    )


def _render_union_type_definition(node: UnionTypeDefinition, indent: str) -> str:
    members = " | ".join(member.name for member in node.types)
    return (
        render_description(node)
        + f"union {node.name}"
        + render_directives(node.directives)
        + f" = {members}"
    )


def _render_enum_type_definition(node: EnumTypeDefinition, indent: str) -> str:
    values = "".join(
        render_description(value, indent=INDENT, first_in_block=i == 0) + render(value)
        for i, value in enumerate(node.values)
    )
    return (
        render_description(node)
        + f"enum {node.name}{render_directives(node.directives)} {{\n"
        + values
        + "}"
    )


def _render_enum_value_definition(node: EnumValueDefinition, indent: str) -> str:
    return f"{INDENT}{node.name}{render_directives(node.directives)}\n"


def _render_input_object_type_definition(node: InputObjectTypeDefinition, indent: str) -> str:
    return (
        render_description(node)
        + f"input {node.name}"
        + render_directives(node.directives)
        + render_field_definitions(node.fields)
    )


def _render_field_definition(node: FieldDefinition, indent: str) -> str:
    arguments = f"({_join(node.arguments)})" if node.arguments else ""
    return (
        f"{node.name}{arguments}: {render(node.type)}"
        + render_directives(node.directives)
    )


def _render_input_value_definition(node: InputValueDefinition, indent: str) -> str:
    default = f" = {render(node.default_value)}" if node.default_value is not None else ""
    return (
        f"{node.name}: {render(node.type)}{default}"
        + render_directives(node.directives)
    )


def _render_directive_definition(node: DirectiveDefinition, indent: str) -> str:
    arguments = f"({_join(node.arguments)})" if node.arguments else ""
    return (
        render_description(node)
        + f"directive @{node.name}{arguments}"
        + f" on {' | '.join(node.locations)}"
    )


_RENDERERS: dict[type, Callable[[Any, str], str]] = {
    # Literals and containers
    type(None): _render_literal,
    bool: _render_literal,
    int: _render_literal,
    float: _render_literal,
    str: _render_literal,
    list: _render_list,
    tuple: _render_list,
    dict: _render_mapping,
    # Values
    NullValue: _render_null,
    EnumValue: _render_enum_value,
    FloatValue: _render_float_value,
    VariableIdentifier: _render_variable_identifier,
    InputObject: _render_input_object,
    # Types
    TypeName: _render_type_name,
    ListType: _render_list_type,
    NonNullType: _render_non_null_type,
    # Executable definitions
    Argument: _render_argument,
    Directive: _render_directive,
    Field: _render_field,
    FragmentSpread: _render_fragment_spread,
    InlineFragment: _render_inline_fragment,
    FragmentDefinition: _render_fragment_definition,
    VariableDefinition: _render_variable_definition,
    OperationDefinition: _render_operation_definition,
    Document: _render_document,
    # Type system definitions
    SchemaDefinition: _render_schema_definition,
    ScalarTypeDefinition: _render_scalar_type_definition,
    ObjectTypeDefinition: _render_object_type_definition,
    InterfaceTypeDefinition: _render_interface_type_definition,
    UnionTypeDefinition: _render_union_type_definition,
    EnumTypeDefinition: _render_enum_type_definition,
    EnumValueDefinition: _render_enum_value_definition,
    InputObjectTypeDefinition: _render_input_object_type_definition,
    FieldDefinition: _render_field_definition,
    InputValueDefinition: _render_input_value_definition,
    DirectiveDefinition: _render_directive_definition,
}
