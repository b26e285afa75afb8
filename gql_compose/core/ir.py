"""Document model for GraphQL operations.

This module defines immutable dataclasses that represent a GraphQL
query or mutation: the operation itself, its variable declarations and
the tree of selection nodes (fields, fragments, fragment references and
inline fragments).
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

from .errors import DocumentError, NodeKindError


@dataclass(frozen=True)
class Symbol:
    """A symbolic name token, rendered without quotes.

    Use it for names given as identifiers rather than strings, and for
    argument values that must not be quoted, e.g. ``Symbol("$input")``.
    """
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class EnumValue:
    """A schema enum literal, rendered as its inner value without quotes."""
    value: Any

    def __str__(self) -> str:
        return str(self.value)


Name = Union[str, Symbol]


class FrozenMapping(Mapping):
    """Read-only, hashable, ordered mapping for argument values.

    Nested mappings are frozen too, and lists become tuples.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[Any, Any] | None = None):
        self._items = {key: _freeze(value) for key, value in dict(items or {}).items()}

    def __getitem__(self, key):
        return self._items[key]

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __repr__(self) -> str:
        return f"FrozenMapping({self._items!r})"


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping) and not isinstance(value, FrozenMapping):
        return FrozenMapping(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _require_name(value: Any, what: str) -> None:
    if value is None or str(value) == "":
        raise DocumentError(f"{what} is required")


@dataclass(frozen=True)
class Variable:
    """Declaration of a variable expected by an operation.

    This is the definition of the variable, not its value.
    """
    name: Name
    type: str
    default_value: Any = None  # None means no default

    def __post_init__(self):
        _require_name(self.name, "Variable name")
        if not isinstance(self.type, str):
            raise DocumentError(
                f"Type of variable {self.name} must be a string, got {type(self.type).__name__}"
            )
        _require_name(self.type, f"Type of variable {self.name}")
        object.__setattr__(self, "default_value", _freeze(self.default_value))

    @property
    def normalized_name(self) -> str:
        return str(self.name)

    def same_as(self, other: "Variable") -> bool:
        """Check if both declarations name the same variable."""
        return self.normalized_name == other.normalized_name


@dataclass(frozen=True)
class FieldNode:
    """A field selection, optionally aliased, with arguments and subfields."""
    name: Name
    alias: Name | None = None
    arguments: Mapping[Any, Any] | None = None
    children: tuple["SelectionNode", ...] = ()
    # Each directive is a bare name or a (name, arguments) pair
    directives: tuple[Any, ...] = ()

    def __post_init__(self):
        _require_name(self.name, "Field name")
        object.__setattr__(self, "children", _selection_set(self.children or ()))
        object.__setattr__(self, "directives", _freeze(tuple(self.directives or ())))
        if self.arguments is not None:
            object.__setattr__(self, "arguments", FrozenMapping(self.arguments))


@dataclass(frozen=True)
class FragmentRefNode:
    """A reference to a fragment declared in the same document."""
    name: Name

    def __post_init__(self):
        _require_name(self.name, "Fragment reference name")


@dataclass(frozen=True)
class FragmentNode:
    """A named fragment definition on a type condition."""
    name: Name
    type: Name
    children: tuple["SelectionNode", ...]

    def __post_init__(self):
        _require_name(self.name, "Fragment name")
        _require_name(self.type, f"Type condition of fragment {self.name}")
        children = _selection_set(self.children or ())
        if not children:
            raise DocumentError(f"Fragment {self.name} needs at least one selection")
        object.__setattr__(self, "children", children)


@dataclass(frozen=True)
class InlineFragmentNode:
    """An anonymous fragment applied inline on a type condition."""
    type: Name
    children: tuple["SelectionNode", ...]

    def __post_init__(self):
        _require_name(self.type, "Inline fragment type condition")
        children = _selection_set(self.children or ())
        if not children:
            raise DocumentError(f"Inline fragment on {self.type} needs at least one selection")
        object.__setattr__(self, "children", children)


SelectionNode = Union[FieldNode, FragmentRefNode, FragmentNode, InlineFragmentNode]

# Fragment definitions only live at the top level of a document
_NESTED_KINDS = (FieldNode, FragmentRefNode, InlineFragmentNode)


def _selection_set(nodes) -> tuple:
    nodes = tuple(nodes)
    for node in nodes:
        if not isinstance(node, _NESTED_KINDS):
            raise NodeKindError(
                f"Expected a field, fragment reference or inline fragment, got {type(node).__name__}"
            )
    return nodes


def _only(nodes, kind: type, slot: str) -> tuple:
    nodes = tuple(nodes or ())
    for node in nodes:
        if not isinstance(node, kind):
            raise NodeKindError(f"Document {slot} must be {kind.__name__}, got {type(node).__name__}")
    return nodes


class Operation(Enum):
    """Operation types a document can represent."""
    QUERY = "query"
    MUTATION = "mutation"


@dataclass(frozen=True)
class Document:
    """A named GraphQL query or mutation.

    GraphQL allows anonymous operations, but a document always carries a
    name so that it can be traced in logs.

    ``fragments`` holds fragment definitions rendered after the root
    fields, and ``variables`` holds variable declarations (not values).
    """
    operation: Operation
    name: str
    fields: tuple[FieldNode, ...] = ()
    fragments: tuple[FragmentNode, ...] = ()
    variables: tuple[Variable, ...] = ()

    def __post_init__(self):
        try:
            operation = Operation(self.operation)
        except ValueError:
            raise DocumentError(f"Unknown operation: {self.operation!r}") from None
        object.__setattr__(self, "operation", operation)
        _require_name(self.name, f"Name of {operation.value}")
        object.__setattr__(self, "fields", _only(self.fields, FieldNode, "fields"))
        object.__setattr__(self, "fragments", _only(self.fragments, FragmentNode, "fragments"))
        object.__setattr__(self, "variables", _only(self.variables, Variable, "variables"))

    def add_field(self, node: FieldNode) -> "Document":
        """Return a copy with ``node`` prepended to the root fields."""
        if not isinstance(node, FieldNode):
            raise NodeKindError(f"add_field expects a FieldNode, got {type(node).__name__}")
        return replace(self, fields=(node,) + self.fields)

    def add_fragment(self, node: FragmentNode) -> "Document":
        """Return a copy with ``node`` prepended to the fragment definitions."""
        if not isinstance(node, FragmentNode):
            raise NodeKindError(f"add_fragment expects a FragmentNode, got {type(node).__name__}")
        return replace(self, fragments=(node,) + self.fragments)

    def add_variable(self, variable: Variable) -> "Document":
        """Return a copy with ``variable`` prepended to the declarations."""
        if not isinstance(variable, Variable):
            raise NodeKindError(f"add_variable expects a Variable, got {type(variable).__name__}")
        return replace(self, variables=(variable,) + self.variables)

    def renamed(self, name: str) -> "Document":
        return replace(self, name=name)

    @property
    def variable_names(self) -> list[str]:
        return [v.normalized_name for v in self.variables]
