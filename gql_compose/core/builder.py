"""Helpers to build GraphQL documents without touching the dataclasses.

Import the helpers directly and nest them the way the query reads:

    from gql_compose.core import Symbol, field, fragment, fragment_ref, query

    user_query = query("UserQuery", {"id": ("Integer", 1)}, [
        field("user", {"id": Symbol("$id")}, [
            field("id"),
            field("email"),
            fragment_ref("personFields"),
        ]),
    ], [
        fragment("personFields", "Person", [
            field("firstName"),
            field("lastName"),
        ]),
    ])

which renders as:

    query UserQuery($id: Integer = 1) {
      user(id: $id) {
        id
        email
        ...personFields
      }
    }
    fragment personFields on Person {
      firstName
      lastName
    }
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .ir import (
    Document,
    FieldNode,
    FragmentNode,
    FragmentRefNode,
    InlineFragmentNode,
    Name,
    Operation,
    SelectionNode,
    Variable,
)


def field(
    name: Name | tuple[Name, Name],
    arguments: Mapping[Any, Any] | None = None,
    children: Iterable[SelectionNode] | None = None,
    directives: Iterable[Any] | None = None,
) -> FieldNode:
    """Create a field node.

    Args:
        name: The field name, or a ``(name, alias)`` tuple
        arguments: Argument name to value mapping; empty means no arguments
        children: Subfield selection
        directives: Directive names or ``(name, arguments)`` pairs

    Examples:
        field("price")                      # price
        field(("price", "thePrice"))        # thePrice: price
        field("price", {"currency": "USD"}) # price(currency: "USD")
    """
    alias = None
    if isinstance(name, tuple):
        name, alias = name
    if not arguments:
        arguments = None
    return FieldNode(
        name=name,
        alias=alias,
        arguments=arguments,
        children=tuple(children or ()),
        directives=tuple(directives or ()),
    )


def fragment_ref(name: Name) -> FragmentRefNode:
    """Create a reference to a fragment: ``...name``."""
    return FragmentRefNode(name=name)


def fragment(name: Name, type: Name, children: Iterable[SelectionNode]) -> FragmentNode:
    """Create a fragment definition: ``fragment name on Type { ... }``."""
    return FragmentNode(name=name, type=type, children=tuple(children))


def inline_fragment(type: Name, children: Iterable[SelectionNode]) -> InlineFragmentNode:
    """Create an inline fragment: ``... on Type { ... }``."""
    return InlineFragmentNode(type=type, children=tuple(children))


def var(name: Name, type: str, default_value: Any = None) -> Variable:
    """Create a variable declaration."""
    return Variable(name=name, type=type, default_value=default_value)


def query(
    name: str,
    variables: Mapping[Name, Any] | None,
    fields: Iterable[FieldNode],
    fragments: Iterable[FragmentNode] | None = None,
) -> Document:
    """Create a query document.

    ``variables`` maps each variable name to its type, or to a
    ``(type, default_value)`` tuple.
    """
    return _build(Operation.QUERY, name, variables, fields, fragments)


def mutation(
    name: str,
    variables: Mapping[Name, Any] | None,
    fields: Iterable[FieldNode],
    fragments: Iterable[FragmentNode] | None = None,
) -> Document:
    """Create a mutation document. Arguments are the same as for ``query``."""
    return _build(Operation.MUTATION, name, variables, fields, fragments)


def _build(operation, name, variables, fields, fragments) -> Document:
    return Document(
        operation=operation,
        name=name,
        fields=tuple(fields or ()),
        fragments=tuple(fragments or ()),
        variables=_parse_variables(variables or {}),
    )


def _parse_variables(specs: Mapping[Name, Any]) -> tuple[Variable, ...]:
    declarations = []
    for var_name, spec in specs.items():
        if isinstance(spec, (tuple, list)):
            type_name, default_value = spec
            declarations.append(var(var_name, type_name, default_value))
        else:
            declarations.append(var(var_name, spec))
    return tuple(declarations)
