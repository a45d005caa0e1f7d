"""GraphQL document parser using graphql-core.

Parses GraphQL source (or .graphql/.graphqls files) with graphql-core and
converts the resulting AST into :mod:`gql_printer.core.nodes` trees.
"""

import logging
import os
from typing import Any

from graphql import (
    ArgumentNode,
    BooleanValueNode,
    DirectiveDefinitionNode,
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumValueDefinitionNode,
    EnumValueNode,
    FieldDefinitionNode,
    FieldNode,
    FloatValueNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    IntValueNode,
    ListTypeNode,
    ListValueNode,
    NamedTypeNode,
    NonNullTypeNode,
    NullValueNode,
    ObjectTypeDefinitionNode,
    ObjectValueNode,
    OperationDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    StringValueNode,
    UnionTypeDefinitionNode,
    VariableDefinitionNode,
    VariableNode,
    parse,
)

from . import nodes
from .errors import UnsupportedNodeError

logger = logging.getLogger(__name__)

GRAPHQL_EXTENSIONS = (".graphql", ".graphqls", ".gql")


def parse_document(source: str) -> nodes.Document:
    """Parse GraphQL source text into a :class:`~gql_printer.core.nodes.Document`.

    Raises:
        graphql.GraphQLSyntaxError: If the source is not valid GraphQL
        UnsupportedNodeError: If the document uses a construct with no
            node counterpart (e.g. ``extend type``)
    """
    return from_graphql(parse(source, no_location=True))


def from_graphql(node: Any) -> Any:
    """Convert a graphql-core AST node into the equivalent printer node."""
    if isinstance(node, DocumentNode):
        return nodes.Document(definitions=tuple(_convert_definition(d) for d in node.definitions))
    if isinstance(node, (FieldNode, FragmentSpreadNode, InlineFragmentNode)):
        return _convert_selection(node)
    if isinstance(node, (NamedTypeNode, ListTypeNode, NonNullTypeNode)):
        return _convert_type(node)
    if isinstance(node, ArgumentNode):
        return _convert_argument(node)
    if isinstance(node, DirectiveNode):
        return _convert_directive(node)
    if isinstance(node, VariableDefinitionNode):
        return _convert_variable_definition(node)
    if isinstance(node, FieldDefinitionNode):
        return _convert_field_definition(node)
    if isinstance(node, InputValueDefinitionNode):
        return _convert_input_value(node)
    if isinstance(node, EnumValueDefinitionNode):
        return _convert_enum_value(node)
    if isinstance(
        node,
        (
            IntValueNode, FloatValueNode, StringValueNode, BooleanValueNode,
            NullValueNode, EnumValueNode, ListValueNode, ObjectValueNode,
            VariableNode,
        ),
    ):
        return _convert_value(node)
    return _convert_definition(node)


class DocumentParser:
    """Parses GraphQL files into a single document."""

    def __init__(self, path: str):
        """Initialize a parser with a path to a GraphQL file or directory."""
        self.path = path
        self.current_file = ""
        self.files: list[str] = []

    def parse_all(self) -> nodes.Document:
        """Parse all GraphQL files and return their definitions as one document.

        A path with no GraphQL files yields an empty document and a warning;
        ``files`` is left empty so callers can tell that case apart.
        """
        definitions: list[Any] = []

        self.files = self._collect_files()
        if not self.files:
            logger.warning("No GraphQL files found at %s", self.path)

        for file_path in self.files:
            self.current_file = os.path.basename(file_path)
            logger.debug("Parsing %s", file_path)
            with open(file_path, encoding="utf-8") as f:
                content = f.read()
            try:
                document = parse_document(content)
            except Exception as e:
                logger.error("Error parsing %s: %s", self.current_file, e)
                raise
            definitions.extend(document.definitions)

        return nodes.Document(definitions=tuple(definitions))

    def _collect_files(self) -> list[str]:
        """Collect all GraphQL files from the path."""
        files = []
        if os.path.isfile(self.path):
            if self.path.lower().endswith(GRAPHQL_EXTENSIONS):
                files.append(self.path)
        else:
            for root, _, filenames in os.walk(self.path):
                for filename in filenames:
                    if filename.lower().endswith(GRAPHQL_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)


def _reject(node, construct: str):
    name = node.name.value if getattr(node, "name", None) else type(node).__name__
    raise UnsupportedNodeError(node, f"Unsupported construct in {name}: {construct}")


def _name(node) -> str | None:
    return node.name.value if node.name else None


def _description(node) -> str | None:
    return node.description.value if node.description else None


def _selections(selection_set) -> tuple:
    if not selection_set:
        return ()
    return tuple(_convert_selection(s) for s in selection_set.selections)


def _directives(directive_nodes) -> tuple:
    return tuple(_convert_directive(d) for d in directive_nodes or ())


def _arguments(argument_nodes) -> tuple:
    return tuple(_convert_argument(a) for a in argument_nodes or ())


def _default(value_node) -> Any:
    return _convert_value(value_node) if value_node is not None else None


def _convert_argument(node: ArgumentNode) -> nodes.Argument:
    return nodes.Argument(name=node.name.value, value=_convert_value(node.value))


def _convert_directive(node: DirectiveNode) -> nodes.Directive:
    return nodes.Directive(name=node.name.value, arguments=_arguments(node.arguments))


def _convert_value(node) -> Any:
    """Convert a value literal; int, string and boolean scalars become Python values."""
    if isinstance(node, VariableNode):
        return nodes.VariableIdentifier(name=node.name.value)
    if isinstance(node, IntValueNode):
        return int(node.value)
    if isinstance(node, FloatValueNode):
        return nodes.FloatValue(text=node.value)
    if isinstance(node, (StringValueNode, BooleanValueNode)):
        return node.value
    if isinstance(node, NullValueNode):
        return nodes.NullValue()
    if isinstance(node, EnumValueNode):
        return nodes.EnumValue(name=node.value)
    if isinstance(node, ListValueNode):
        return [_convert_value(v) for v in node.values]
    if isinstance(node, ObjectValueNode):
        return nodes.InputObject(
            arguments=tuple(
                nodes.Argument(name=f.name.value, value=_convert_value(f.value))
                for f in node.fields
            )
        )
    raise UnsupportedNodeError(node, f"Unsupported value node: {type(node).__name__}")


def _convert_type(node) -> nodes.TypeNode:
    """Convert a type reference, keeping list/non-null wrappers in order."""
    if isinstance(node, NonNullTypeNode):
        return nodes.NonNullType(of_type=_convert_type(node.type))
    if isinstance(node, ListTypeNode):
        return nodes.ListType(of_type=_convert_type(node.type))
    if isinstance(node, NamedTypeNode):
        return nodes.TypeName(name=node.name.value)
    raise UnsupportedNodeError(node, f"Unsupported type node: {type(node).__name__}")


def _convert_type_condition(node: NamedTypeNode | None) -> nodes.TypeName | None:
    return nodes.TypeName(name=node.name.value) if node else None


def _convert_selection(node) -> nodes.Selection:
    if isinstance(node, FieldNode):
        return nodes.Field(
            name=node.name.value,
            alias=node.alias.value if node.alias else None,
            arguments=_arguments(node.arguments),
            directives=_directives(node.directives),
            selections=_selections(node.selection_set),
        )
    if isinstance(node, FragmentSpreadNode):
        return nodes.FragmentSpread(
            name=node.name.value,
            directives=_directives(node.directives),
        )
    if isinstance(node, InlineFragmentNode):
        return nodes.InlineFragment(
            type=_convert_type_condition(node.type_condition),
            directives=_directives(node.directives),
            selections=_selections(node.selection_set),
        )
    raise UnsupportedNodeError(node, f"Unsupported selection node: {type(node).__name__}")


def _convert_variable_definition(node: VariableDefinitionNode) -> nodes.VariableDefinition:
    if node.directives:
        _reject(node, "directives on variable definitions")
    return nodes.VariableDefinition(
        name=node.variable.name.value,
        type=_convert_type(node.type),
        default_value=_default(node.default_value),
    )


def _convert_input_value(node: InputValueDefinitionNode) -> nodes.InputValueDefinition:
    return nodes.InputValueDefinition(
        name=node.name.value,
        type=_convert_type(node.type),
        default_value=_default(node.default_value),
        directives=_directives(node.directives),
        description=_description(node),
    )


def _convert_field_definition(node: FieldDefinitionNode) -> nodes.FieldDefinition:
    return nodes.FieldDefinition(
        name=node.name.value,
        type=_convert_type(node.type),
        arguments=tuple(_convert_input_value(a) for a in node.arguments or ()),
        directives=_directives(node.directives),
        description=_description(node),
    )


def _convert_enum_value(node: EnumValueDefinitionNode) -> nodes.EnumValueDefinition:
    return nodes.EnumValueDefinition(
        name=node.name.value,
        directives=_directives(node.directives),
        description=_description(node),
    )


def _convert_definition(node) -> nodes.Definition:
    """Convert a top-level definition; extensions are not supported."""
    if isinstance(node, OperationDefinitionNode):
        return nodes.OperationDefinition(
            operation_type=node.operation.value,
            name=_name(node),
            variables=tuple(
                _convert_variable_definition(v) for v in node.variable_definitions or ()
            ),
            directives=_directives(node.directives),
            selections=_selections(node.selection_set),
        )
    if isinstance(node, FragmentDefinitionNode):
        return nodes.FragmentDefinition(
            name=node.name.value,
            type=_convert_type_condition(node.type_condition),
            directives=_directives(node.directives),
            selections=_selections(node.selection_set),
        )
    if isinstance(node, SchemaDefinitionNode):
        if node.directives:
            _reject(node, "directives on schema definitions")
        roots = {op.operation.value: op.type.name.value for op in node.operation_types}
        return nodes.SchemaDefinition(
            query=roots.get("query"),
            mutation=roots.get("mutation"),
            subscription=roots.get("subscription"),
            description=_description(node),
        )
    if isinstance(node, ScalarTypeDefinitionNode):
        return nodes.ScalarTypeDefinition(
            name=node.name.value,
            directives=_directives(node.directives),
            description=_description(node),
        )
    if isinstance(node, ObjectTypeDefinitionNode):
        return nodes.ObjectTypeDefinition(
            name=node.name.value,
            fields=tuple(_convert_field_definition(f) for f in node.fields or ()),
            interfaces=tuple(i.name.value for i in node.interfaces or ()),
            directives=_directives(node.directives),
            description=_description(node),
        )
    if isinstance(node, InterfaceTypeDefinitionNode):
        if node.interfaces:
            _reject(node, "interfaces implementing interfaces")
        return nodes.InterfaceTypeDefinition(
            name=node.name.value,
            fields=tuple(_convert_field_definition(f) for f in node.fields or ()),
            directives=_directives(node.directives),
            description=_description(node),
        )
    if isinstance(node, UnionTypeDefinitionNode):
        return nodes.UnionTypeDefinition(
            name=node.name.value,
            types=tuple(nodes.TypeName(name=t.name.value) for t in node.types or ()),
            directives=_directives(node.directives),
            description=_description(node),
        )
    if isinstance(node, EnumTypeDefinitionNode):
        return nodes.EnumTypeDefinition(
            name=node.name.value,
            values=tuple(_convert_enum_value(v) for v in node.values or ()),
            directives=_directives(node.directives),
            description=_description(node),
        )
    if isinstance(node, InputObjectTypeDefinitionNode):
        return nodes.InputObjectTypeDefinition(
            name=node.name.value,
            fields=tuple(_convert_input_value(f) for f in node.fields or ()),
            directives=_directives(node.directives),
            description=_description(node),
        )
    if isinstance(node, DirectiveDefinitionNode):
        if node.repeatable:
            _reject(node, "repeatable directives")
        return nodes.DirectiveDefinition(
            name=node.name.value,
            locations=tuple(loc.value for loc in node.locations),
            arguments=tuple(_convert_input_value(a) for a in node.arguments or ()),
            description=_description(node),
        )
    raise UnsupportedNodeError(node, f"Unsupported definition: {type(node).__name__}")
