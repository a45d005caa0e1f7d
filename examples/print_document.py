#!/usr/bin/env python3
"""Demo: build a query by hand, print it, and round-trip a schema.

Usage:
    python examples/print_document.py
"""

from gql_printer.core.nodes import (
    Argument,
    Directive,
    Document,
    Field,
    FragmentDefinition,
    FragmentSpread,
    NonNullType,
    OperationDefinition,
    TypeName,
    VariableDefinition,
    VariableIdentifier,
)
from gql_printer.core.parser import parse_document
from gql_printer.core.printer import render
from gql_printer.core.signature import query_signature

SCHEMA = '''
"""A person with an account"""
type User implements Node {
  id: ID!
  friends(first: Int = 10): [User!]!
}

enum Role { ADMIN GUEST }

directive @auth(requires: Role = ADMIN) on FIELD_DEFINITION
'''


def main():
    query = Document(
        definitions=(
            OperationDefinition(
                operation_type="query",
                name="GetUser",
                variables=(
                    VariableDefinition(name="id", type=NonNullType(TypeName("ID"))),
                    VariableDefinition(name="withFriends", type=TypeName("Boolean"), default_value=False),
                ),
                selections=(
                    Field(
                        name="user",
                        arguments=(Argument("id", VariableIdentifier("id")),),
                        selections=(
                            FragmentSpread(name="UserFields"),
                            Field(
                                name="friends",
                                arguments=(Argument("first", 5),),
                                directives=(
                                    Directive("include", (Argument("if", VariableIdentifier("withFriends")),)),
                                ),
                                selections=(Field(name="id"),),
                            ),
                        ),
                    ),
                ),
            ),
            FragmentDefinition(
                name="UserFields",
                type=TypeName("User"),
                selections=(Field(name="id"), Field(name="name", alias="displayName")),
            ),
        )
    )

    print("Hand-built query:")
    print(render(query))
    print(f"\nSignature: {query_signature(query)}")

    print("\nSchema round trip (descriptions are dropped):")
    print(render(parse_document(SCHEMA)))


if __name__ == "__main__":
    main()
