#!/usr/bin/env python3
"""Demonstration of composing GraphQL documents.

This script shows how to:
1. Build documents with the builder helpers
2. Merge them into a single operation
3. Execute the merged operation through a registry

Note: This demo doesn't make real API calls - it uses the in-memory
LocalBackend to answer the request.
"""

from gql_compose.core import (
    Client,
    LocalBackend,
    QueryRegistry,
    Response,
    Symbol,
    VariableConflictError,
    encode,
    field,
    fragment,
    fragment_ref,
    merge_many,
    query,
)

USER_QUERY = query(
    "UserQuery",
    {"userId": "Integer"},
    [
        field("user", {"id": Symbol("$userId")}, [
            field("id"),
            fragment_ref("personFields"),
        ]),
    ],
    [
        fragment("personFields", "Person", [
            field("firstName"),
            field("lastName"),
        ]),
    ],
)

PRODUCT_QUERY = query(
    "ProductQuery",
    {"sku": ("String!", "A-1")},
    [
        field(("product", "featured"), {"sku": Symbol("$sku")}, [
            field("title"),
            field("price", {"currency": "USD"}),
        ]),
    ],
)


def main():
    print("=== gql-compose demo ===\n")

    print("1. Single documents:\n")
    print(encode(USER_QUERY))
    print()
    print(encode(PRODUCT_QUERY))
    print()

    print("2. Merged document:\n")
    print(encode(merge_many([PRODUCT_QUERY, USER_QUERY], "ProductPage")))
    print()

    print("3. Variable collisions are refused:\n")
    try:
        merge_many([USER_QUERY, USER_QUERY], "Twice")
    except VariableConflictError as e:
        print(f"   {e}")
    print()

    print("4. Registry execution:\n")
    backend = LocalBackend()
    backend.expect(Response.success({
        "user": {"id": 1, "firstName": "Ada", "lastName": "Lovelace"},
        "featured": {"title": "Engine", "price": 100},
    }))

    registry = (
        QueryRegistry("ProductPage")
        .add_query(USER_QUERY, {"userId": 1})
        .add_query(PRODUCT_QUERY, {"sku": "A-1"})
        .add_resolver(lambda response, page: {**page, "user": response.data["user"]})
        .add_resolver(lambda response, page: {**page, "product": response.data["featured"]})
    )

    page = registry.execute(Client(backend), {})
    print(f"   {page}")


if __name__ == "__main__":
    main()
