"""Query registry combining several documents into one request.

A registry collects documents, the values of their variables and
resolver callbacks. On execution the documents are merged into a single
operation, sent through a client, and each resolver is folded over an
accumulator with the response.

Example usage:
    registry = QueryRegistry("ProductPage")
    registry.add_query(product_query, {"sku": "A-1"})
    registry.add_query(user_query, {"userId": 42})
    registry.add_resolver(lambda response, acc: {**acc, "product": response.data["product"]})

    page = registry.execute(client, {})
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .client import Client
from .errors import EmptyRegistryError
from .ir import Document
from .merge import merge_many
from .response import Response

logger = logging.getLogger(__name__)

Resolver = Callable[[Response, Any], Any]


class QueryRegistry:
    """Collects documents, variable values and resolvers."""

    def __init__(self, name: str):
        self.name = name
        # Most recently added first, so merging restores insertion order
        self.queries: list[Document] = []
        self.variables: list[dict[str, Any]] = []
        self.resolvers: list[Resolver] = []

    def add_query(self, document: Document, variables: Mapping[str, Any] | None = None) -> "QueryRegistry":
        """Add a document and the values of its variables."""
        self.queries.insert(0, document)
        if variables:
            self.variables.insert(0, dict(variables))
        return self

    def add_resolver(self, resolver: Resolver) -> "QueryRegistry":
        """Add a resolver, called after the ones already added."""
        return self.add_resolvers([resolver])

    def add_resolvers(self, resolvers: Iterable[Resolver]) -> "QueryRegistry":
        """Add several resolvers, keeping their order."""
        for resolver in resolvers:
            if not callable(resolver):
                raise TypeError(f"Resolver must be callable, got {type(resolver).__name__}")
            self.resolvers.append(resolver)
        return self

    def prepare(self) -> tuple[Document, dict[str, Any]]:
        """Merge the registered documents and variable values.

        Raises:
            EmptyRegistryError: If no document was added
            VariableConflictError: If two documents declare the same variable
        """
        if not self.queries:
            raise EmptyRegistryError(self.name)

        document = merge_many(self.queries, self.name)

        values: dict[str, Any] = {}
        for mapping in reversed(self.variables):
            values.update(mapping)

        return document, values

    def execute(self, client: Client, acc: Any, options: Mapping[str, Any] | None = None) -> Any:
        """Execute the merged document and fold the resolvers over ``acc``.

        Returns:
            The accumulator returned by the last resolver
        """
        document, values = self.prepare()
        logger.debug(
            "Executing registry %s: %d documents, %d resolvers",
            self.name,
            len(self.queries),
            len(self.resolvers),
        )

        response = client.execute(document, values, options)

        for resolver in self.resolvers:
            acc = resolver(response, acc)
        return acc
