"""Merging of independently built documents into a single operation.

Merging lets several page or widget queries be sent in one round trip.
Fields and fragments are concatenated; variable declarations are
unioned, and any variable name declared by both sides is an error.
"""

import logging
from collections.abc import Sequence

from .errors import MergeError, OperationMismatchError, VariableConflictError
from .ir import Document, Variable

logger = logging.getLogger(__name__)


def merge(a: Document, b: Document, name: str) -> Document:
    """Combine two documents of the same operation into one named ``name``.

    Fields and fragments of ``a`` come first.

    Raises:
        OperationMismatchError: If the operations differ
        VariableConflictError: If both documents declare a variable name
    """
    if a.operation is not b.operation:
        raise OperationMismatchError(a.operation.value, b.operation.value)

    variables = merge_variables(a.variables, b.variables)

    return Document(
        operation=a.operation,
        name=name,
        fields=a.fields + b.fields,
        fragments=a.fragments + b.fragments,
        variables=variables,
    )


def merge_variables(
    set_a: Sequence[Variable],
    set_b: Sequence[Variable],
) -> tuple[Variable, ...]:
    """Concatenate two sets of declarations, refusing name collisions.

    Only pairs across the two sets are compared; a name repeated within
    one set is kept as is.
    """
    repeated = [
        v_a.normalized_name
        for v_a in set_a
        for v_b in set_b
        if v_a.same_as(v_b)
    ]
    if repeated:
        raise VariableConflictError(repeated)
    return tuple(set_a) + tuple(set_b)


def merge_many(documents: Sequence[Document], name: str | None = None) -> Document:
    """Fold a list of documents into one.

    Each document is merged in front of the documents before it, so the
    merged fields come out in reverse list order:

        merge_many([d1, d2, d3]).fields == d3.fields + d2.fields + d1.fields

    A single document is returned as is, renamed when ``name`` is given.
    Without ``name`` the merged document keeps the first document's name.

    Raises:
        MergeError: If ``documents`` is empty
        VariableConflictError: On the first variable collision
    """
    if not documents:
        raise MergeError("no documents to merge")

    first, *remaining = documents
    if not remaining:
        return first.renamed(name) if name is not None else first

    logger.debug("Merging %d documents into %s", len(documents), name or first.name)

    result = first
    for document in remaining:
        result = merge(document, result, name if name is not None else result.name)
    return result
