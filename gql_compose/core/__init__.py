"""Core modules for building, merging and encoding GraphQL documents."""

from .backend import Backend, LocalBackend
from .builder import (
    field,
    fragment,
    fragment_ref,
    inline_fragment,
    mutation,
    query,
    var,
)
from .client import Client
from .encoder import Encoder, encode
from .errors import (
    DocumentError,
    EmptyRegistryError,
    GQLComposeError,
    MergeError,
    NoExpectedResponseError,
    NodeKindError,
    OperationMismatchError,
    VariableConflictError,
)
from .ir import (
    Document,
    EnumValue,
    FieldNode,
    FragmentNode,
    FragmentRefNode,
    FrozenMapping,
    InlineFragmentNode,
    Operation,
    SelectionNode,
    Symbol,
    Variable,
)
from .merge import merge, merge_many, merge_variables
from .registry import QueryRegistry
from .response import Response, ResponseStatus

__all__ = [
    # Document model
    "Document",
    "EnumValue",
    "FieldNode",
    "FragmentNode",
    "FragmentRefNode",
    "FrozenMapping",
    "InlineFragmentNode",
    "Operation",
    "SelectionNode",
    "Symbol",
    "Variable",
    # Builder
    "field",
    "fragment",
    "fragment_ref",
    "inline_fragment",
    "mutation",
    "query",
    "var",
    # Merge
    "merge",
    "merge_many",
    "merge_variables",
    # Encoder
    "Encoder",
    "encode",
    # Execution
    "Backend",
    "Client",
    "LocalBackend",
    "QueryRegistry",
    "Response",
    "ResponseStatus",
    # Errors
    "DocumentError",
    "EmptyRegistryError",
    "GQLComposeError",
    "MergeError",
    "NoExpectedResponseError",
    "NodeKindError",
    "OperationMismatchError",
    "VariableConflictError",
]
