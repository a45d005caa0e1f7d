"""Unit tests for the AST printer."""

from concurrent.futures import ThreadPoolExecutor
from enum import Enum, IntEnum

import pytest

from gql_printer.core.errors import UnsupportedNodeError
from gql_printer.core.nodes import (
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
from gql_printer.core.printer import (
    render,
    render_description,
    render_directives,
    render_field_definitions,
    render_selections,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def get_user_operation():
    """A named query with a variable and a nested selection."""
    return OperationDefinition(
        operation_type="query",
        name="GetUser",
        variables=(VariableDefinition(name="id", type=NonNullType(TypeName("ID"))),),
        selections=(
            Field(
                name="user",
                arguments=(Argument("id", VariableIdentifier("id")),),
                selections=(Field(name="name"),),
            ),
        ),
    )


@pytest.fixture
def user_type():
    """An object type with interfaces, arguments and defaults."""
    return ObjectTypeDefinition(
        name="User",
        interfaces=("Node", "Entity"),
        fields=(
            FieldDefinition(name="id", type=NonNullType(TypeName("ID"))),
            FieldDefinition(
                name="friends",
                type=ListType(TypeName("User")),
                arguments=(
                    InputValueDefinition(name="first", type=TypeName("Int"), default_value=10),
                ),
            ),
        ),
    )


def _nested_fields(depth: int) -> Field:
    """Build level0 { level1 { ... leaf } } with ``depth`` levels above the leaf."""
    node = Field(name="leaf")
    for level in reversed(range(depth)):
        node = Field(name=f"level{level}", selections=(node,))
    return node


class Color(Enum):
    red = "red"


class Priority(IntEnum):
    high = 1


# =============================================================================
# Values
# =============================================================================


class TestLiterals:
    """Tests for Python literal values."""

    def test_int(self):
        assert render(1) == "1"

    def test_float(self):
        assert render(1.5) == "1.5"

    def test_string_is_quoted_and_escaped(self):
        assert render('say "hi"\n') == '"say \\"hi\\"\\n"'

    def test_string_keeps_unicode(self):
        assert render("café") == '"café"'

    def test_booleans(self):
        assert render(True) == "true"
        assert render(False) == "false"

    def test_none(self):
        assert render(None) == "null"

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_float_raises(self, value):
        with pytest.raises(ValueError):
            render(value)


class TestValueNodes:
    """Tests for value nodes and containers."""

    def test_null_value(self):
        assert render(NullValue()) == "null"

    def test_float_value_keeps_source_text(self):
        assert render(FloatValue("1.0e10")) == "1.0e10"
        assert render(FloatValue("1e400")) == "1e400"

    def test_enum_value_is_bare(self):
        assert render(EnumValue("RED")) == "RED"

    def test_variable_identifier(self):
        assert render(VariableIdentifier("cursor")) == "$cursor"

    def test_list(self):
        assert render([1, "a", EnumValue("B")]) == '[1, "a", B]'

    def test_tuple_renders_as_list(self):
        assert render((1, 2)) == "[1, 2]"

    def test_empty_list(self):
        assert render([]) == "[]"

    def test_nested_lists(self):
        assert render([[1], [2, 3]]) == "[[1], [2, 3]]"

    def test_mapping_keeps_insertion_order(self):
        value = {"first": 10, "after": VariableIdentifier("c")}
        assert render(value) == "{first: 10, after: $c}"

    def test_empty_mapping(self):
        assert render({}) == "{}"

    def test_input_object(self):
        value = InputObject(arguments=(Argument("b", 2), Argument("a", [NullValue()])))
        assert render(value) == "{b: 2, a: [null]}"

    def test_symbol_is_capitalized(self):
        assert render(Color.red) == "Red"

    def test_int_enum_renders_as_symbol(self):
        assert render(Priority.high) == "High"


# =============================================================================
# Types
# =============================================================================


class TestTypeReferences:
    """Tests for type references and their wrappers."""

    def test_type_name(self):
        assert render(TypeName("Int")) == "Int"

    def test_non_null_list(self):
        assert render(NonNullType(ListType(TypeName("Int")))) == "[Int]!"

    def test_list_of_non_null(self):
        assert render(ListType(NonNullType(TypeName("Int")))) == "[Int!]"

    def test_deeply_nested(self):
        node = NonNullType(ListType(NonNullType(ListType(TypeName("ID")))))
        assert render(node) == "[[ID]!]!"


# =============================================================================
# Executable definitions
# =============================================================================


class TestArgumentsAndDirectives:
    """Tests for arguments and directives."""

    def test_argument(self):
        assert render(Argument("ids", [1, 2])) == "ids: [1, 2]"

    def test_directive_with_argument(self):
        directive = Directive("include", (Argument("if", VariableIdentifier("cond")),))
        assert render(directive) == "@include(if: $cond)"

    def test_directive_without_arguments(self):
        assert render(Directive("skip")) == "@skip"

    def test_directive_list_is_space_prefixed(self):
        directives = (Directive("a"), Directive("b", (Argument("x", 1),)))
        assert render_directives(directives) == " @a @b(x: 1)"

    def test_empty_directive_list(self):
        assert render_directives(()) == ""


class TestField:
    """Tests for field selections."""

    def test_alias_arguments_and_selection(self):
        field = Field(
            name="user",
            alias="u",
            arguments=(Argument("id", 1),),
            selections=(Field(name="name"),),
        )
        assert render(field) == "u: user(id: 1) {\n  name\n}"

    def test_bare_field(self):
        assert render(Field(name="name")) == "name"

    def test_directives(self):
        field = Field(name="email", directives=(Directive("skip", (Argument("if", True),)),))
        assert render(field) == "email @skip(if: true)"

    def test_indent_prefix(self):
        field = Field(name="a", selections=(Field(name="b"),))
        assert render(field, indent="    ") == "    a {\n      b\n    }"

    def test_mixed_selections(self):
        field = Field(
            name="user",
            selections=(
                FragmentSpread(name="UserFields"),
                InlineFragment(type=TypeName("Admin"), selections=(Field(name="level"),)),
            ),
        )
        assert render(field) == (
            "user {\n"
            "  ...UserFields\n"
            "  ... on Admin {\n"
            "    level\n"
            "  }\n"
            "}"
        )


class TestIndentation:
    """Tests for indentation of nested selection blocks."""

    @pytest.mark.parametrize("depth", [1, 2, 5])
    def test_children_indented_two_spaces_per_level(self, depth):
        lines = render(_nested_fields(depth)).split("\n")

        assert len(lines) == 2 * depth + 1
        for level in range(depth):
            assert lines[level] == "  " * level + f"level{level} {{"
        assert lines[depth] == "  " * depth + "leaf"
        for k in range(depth):
            assert lines[depth + 1 + k] == "  " * (depth - 1 - k) + "}"

    def test_selection_block_helper(self):
        block = render_selections((Field(name="a"), Field(name="b")), indent="  ")
        assert block == " {\n    a\n    b\n  }"

    def test_empty_selection_block(self):
        assert render_selections(()) == ""


class TestFragments:
    """Tests for fragment definitions, spreads and inline fragments."""

    def test_fragment_definition(self):
        fragment = FragmentDefinition(
            name="UserFields",
            type=TypeName("User"),
            selections=(Field(name="id"),),
        )
        assert render(fragment) == "fragment UserFields on User {\n  id\n}"

    def test_fragment_definition_with_directive(self):
        fragment = FragmentDefinition(
            name="F",
            type=TypeName("User"),
            directives=(Directive("cached"),),
            selections=(Field(name="id"),),
        )
        assert render(fragment) == "fragment F on User @cached {\n  id\n}"

    def test_fragment_spread_uses_indent(self):
        assert render(FragmentSpread(name="UserFields"), indent="  ") == "  ...UserFields"

    def test_fragment_spread_with_directives(self):
        spread = FragmentSpread(
            name="F",
            directives=(
                Directive("include", (Argument("if", VariableIdentifier("c")),)),
                Directive("defer"),
            ),
        )
        assert render(spread) == "...F @include(if: $c) @defer"

    def test_inline_fragment_with_type(self):
        fragment = InlineFragment(type=TypeName("Photo"), selections=(Field(name="url"),))
        assert render(fragment) == "... on Photo {\n  url\n}"

    def test_inline_fragment_without_type(self):
        fragment = InlineFragment(
            directives=(Directive("skip", (Argument("if", True),)),),
            selections=(Field(name="a"),),
        )
        assert render(fragment) == "... @skip(if: true) {\n  a\n}"


class TestOperations:
    """Tests for operation and variable definitions."""

    def test_named_query_with_variables(self, get_user_operation):
        assert render(get_user_operation) == (
            "query GetUser($id: ID!) {\n"
            "  user(id: $id) {\n"
            "    name\n"
            "  }\n"
            "}"
        )

    def test_anonymous_mutation_with_directive(self):
        operation = OperationDefinition(
            operation_type="mutation",
            directives=(Directive("live"),),
            selections=(Field(name="ping"),),
        )
        assert render(operation) == "mutation @live {\n  ping\n}"

    def test_operation_without_selections(self):
        assert render(OperationDefinition()) == "query"

    def test_variable_default(self):
        variable = VariableDefinition(name="first", type=TypeName("Int"), default_value=10)
        assert render(variable) == "$first: Int = 10"

    def test_variable_null_default(self):
        variable = VariableDefinition(name="after", type=TypeName("String"), default_value=NullValue())
        assert render(variable) == "$after: String = null"

    def test_multiple_variables_are_comma_joined(self):
        operation = OperationDefinition(
            name="Q",
            variables=(
                VariableDefinition(name="a", type=TypeName("Int")),
                VariableDefinition(name="b", type=ListType(TypeName("ID"))),
            ),
            selections=(Field(name="x"),),
        )
        assert render(operation).startswith("query Q($a: Int, $b: [ID]) {")


# =============================================================================
# Type system definitions
# =============================================================================


class TestSchemaDefinition:
    """Tests for schema block suppression."""

    def test_default_names_are_suppressed(self):
        schema = SchemaDefinition(query="Query", mutation="Mutation", subscription="Subscription")
        assert render(schema) == ""

    def test_absent_names_are_suppressed(self):
        assert render(SchemaDefinition()) == ""
        assert render(SchemaDefinition(query="Query")) == ""

    def test_custom_root(self):
        assert render(SchemaDefinition(query="RootQuery")) == "schema {\n  query: RootQuery\n}"

    def test_lists_only_present_roots(self):
        schema = SchemaDefinition(query="Query", subscription="Events")
        assert render(schema) == "schema {\n  query: Query\n  subscription: Events\n}"


class TestTypeDefinitions:
    """Tests for scalar, object, interface, union, enum and input types."""

    def test_scalar(self):
        scalar = ScalarTypeDefinition(
            name="DateTime",
            directives=(Directive("specifiedBy", (Argument("url", "https://example.com"),)),),
        )
        assert render(scalar) == 'scalar DateTime @specifiedBy(url: "https://example.com")'

    def test_object_type(self, user_type):
        assert render(user_type) == (
            "type User implements Node, Entity {\n"
            "  id: ID!\n"
            "  friends(first: Int = 10): [User]\n"
            "}"
        )

    def test_object_type_directives(self):
        node = ObjectTypeDefinition(
            name="Old",
            fields=(FieldDefinition(name="a", type=TypeName("Int"), directives=(Directive("deprecated"),)),),
            directives=(Directive("key", (Argument("fields", "id"),)),),
        )
        assert render(node) == 'type Old @key(fields: "id") {\n  a: Int @deprecated\n}'

    def test_object_type_without_fields_still_has_block(self):
        assert render(ObjectTypeDefinition(name="Empty")) == "type Empty {\n}"

    def test_interface(self):
        node = InterfaceTypeDefinition(
            name="Node",
            fields=(FieldDefinition(name="id", type=NonNullType(TypeName("ID"))),),
        )
        assert render(node) == "interface Node {\n  id: ID!\n}"

    def test_union(self):
        node = UnionTypeDefinition(
            name="SearchResult",
            types=(TypeName("Photo"), TypeName("Person")),
        )
        assert render(node) == "union SearchResult = Photo | Person"

    def test_union_with_directive(self):
        node = UnionTypeDefinition(name="U", types=(TypeName("A"),), directives=(Directive("x"),))
        assert render(node) == "union U @x = A"

    def test_enum(self):
        node = EnumTypeDefinition(
            name="Color",
            values=(EnumValueDefinition("RED"), EnumValueDefinition("GREEN")),
        )
        assert render(node) == "enum Color {\n  RED\n  GREEN\n}"

    def test_enum_directives(self):
        node = EnumTypeDefinition(
            name="Role",
            values=(
                EnumValueDefinition("ADMIN"),
                EnumValueDefinition(
                    "GUEST",
                    directives=(Directive("deprecated", (Argument("reason", "gone"),)),),
                ),
            ),
            directives=(Directive("internal"),),
        )
        assert render(node) == 'enum Role @internal {\n  ADMIN\n  GUEST @deprecated(reason: "gone")\n}'

    def test_enum_value_definition(self):
        assert render(EnumValueDefinition("RED")) == "  RED\n"

    def test_input_object(self):
        node = InputObjectTypeDefinition(
            name="UserFilter",
            fields=(
                InputValueDefinition(name="name", type=TypeName("String")),
                InputValueDefinition(
                    name="limit",
                    type=TypeName("Int"),
                    default_value=20,
                    directives=(Directive("deprecated"),),
                ),
            ),
        )
        assert render(node) == "input UserFilter {\n  name: String\n  limit: Int = 20 @deprecated\n}"

    def test_field_definition_block_helper(self):
        fields = (FieldDefinition(name="a", type=TypeName("Int")),)
        assert render_field_definitions(fields) == " {\n  a: Int\n}"


class TestDirectiveDefinition:
    """Tests for directive definitions."""

    def test_with_arguments(self):
        node = DirectiveDefinition(
            name="auth",
            locations=("FIELD_DEFINITION", "OBJECT"),
            arguments=(
                InputValueDefinition(name="requires", type=TypeName("Role"), default_value=EnumValue("ADMIN")),
            ),
        )
        assert render(node) == "directive @auth(requires: Role = ADMIN) on FIELD_DEFINITION | OBJECT"

    def test_without_arguments(self):
        assert render(DirectiveDefinition(name="cached", locations=("FIELD",))) == "directive @cached on FIELD"


class TestDescriptions:
    """Tests for the description seam."""

    def test_description_is_never_emitted(self):
        node = ScalarTypeDefinition(name="Date", description="A calendar date")
        assert render(node) == "scalar Date"

    def test_field_descriptions_are_never_emitted(self):
        node = ObjectTypeDefinition(
            name="User",
            fields=(FieldDefinition(name="id", type=TypeName("ID"), description="The id"),),
            description="A user",
        )
        assert render(node) == "type User {\n  id: ID\n}"

    @pytest.mark.parametrize(
        "node",
        [
            ScalarTypeDefinition(name="Date", description="d"),
            FieldDefinition(name="a", type=TypeName("Int"), description="d"),
            InputValueDefinition(name="a", type=TypeName("Int"), description="d"),
            EnumValueDefinition("A", description="d"),
            DirectiveDefinition(name="d", locations=("FIELD",), description="d"),
        ],
    )
    def test_seam_returns_empty_text(self, node):
        assert render_description(node) == ""
        assert render_description(node, indent="  ", first_in_block=False) == ""


# =============================================================================
# Documents
# =============================================================================


class TestDocument:
    """Tests for whole documents."""

    def test_definitions_separated_by_blank_line(self, get_user_operation, user_type):
        text = render(Document(definitions=(user_type, get_user_operation)))
        assert text == render(user_type) + "\n\n" + render(get_user_operation)

    def test_suppressed_schema_leaves_no_gap(self):
        document = Document(
            definitions=(
                SchemaDefinition(query="Query"),
                ScalarTypeDefinition(name="Date"),
                OperationDefinition(selections=(Field(name="a"),)),
            )
        )
        assert render(document) == "scalar Date\n\nquery {\n  a\n}"

    def test_empty_document(self):
        assert render(Document()) == ""

    def test_rendering_is_deterministic(self, get_user_operation):
        document = Document(definitions=(get_user_operation,))
        assert render(document) == render(document)

    def test_concurrent_rendering(self, get_user_operation, user_type):
        document = Document(definitions=(user_type, get_user_operation))
        expected = render(document)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(render, [document] * 20))
        assert results == [expected] * 20


# =============================================================================
# Errors
# =============================================================================


class TestUnsupportedNodes:
    """Tests for the catch-all error."""

    def test_unknown_object_raises(self):
        node = object()
        with pytest.raises(UnsupportedNodeError) as exc_info:
            render(node)
        assert exc_info.value.node is node
        assert "object" in str(exc_info.value)

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            render({1, 2})

    def test_nested_unknown_value_raises(self):
        field = Field(name="a", arguments=(Argument("x", object()),))
        with pytest.raises(UnsupportedNodeError):
            render(field)
