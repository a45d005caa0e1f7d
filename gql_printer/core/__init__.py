"""Core modules for printing GraphQL ASTs."""

from .errors import UnsupportedNodeError
from .hooks import (
    AddHeaderHook,
    FilterDefinitionsHook,
    HookRunner,
    PostRenderHook,
    PreRenderHook,
)
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
from .parser import DocumentParser, from_graphql, parse_document
from .printer import (
    render,
    render_description,
    render_directives,
    render_field_definitions,
    render_selections,
)
from .signature import DocumentCache, query_signature

__all__ = [
    # Errors
    "UnsupportedNodeError",
    # Hooks
    "PreRenderHook",
    "PostRenderHook",
    "AddHeaderHook",
    "FilterDefinitionsHook",
    "HookRunner",
    # AST nodes
    "Argument",
    "Directive",
    "DirectiveDefinition",
    "Document",
    "EnumTypeDefinition",
    "EnumValue",
    "EnumValueDefinition",
    "Field",
    "FieldDefinition",
    "FloatValue",
    "FragmentDefinition",
    "FragmentSpread",
    "InlineFragment",
    "InputObject",
    "InputObjectTypeDefinition",
    "InputValueDefinition",
    "InterfaceTypeDefinition",
    "ListType",
    "NonNullType",
    "NullValue",
    "ObjectTypeDefinition",
    "OperationDefinition",
    "ScalarTypeDefinition",
    "SchemaDefinition",
    "TypeName",
    "UnionTypeDefinition",
    "VariableDefinition",
    "VariableIdentifier",
    # Parser
    "DocumentParser",
    "from_graphql",
    "parse_document",
    # Printer
    "render",
    "render_description",
    "render_directives",
    "render_field_definitions",
    "render_selections",
    # Signatures
    "DocumentCache",
    "query_signature",
]
