"""Exceptions raised while building, merging and executing documents."""


class GQLComposeError(Exception):
    """Base class for all gql-compose errors."""


class DocumentError(GQLComposeError, ValueError):
    """A document or node is missing a required field."""


class NodeKindError(GQLComposeError, TypeError):
    """A selection node of the wrong kind was given."""


class MergeError(GQLComposeError):
    """Documents cannot be merged."""


class OperationMismatchError(MergeError):
    """Raised when merging a query with a mutation."""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        super().__init__(f"cannot merge a {left} with a {right}")


class VariableConflictError(MergeError):
    """Raised when two documents declare the same variable name.

    Attributes:
        names: Every colliding variable name, once per colliding pair
    """

    def __init__(self, names: list[str]):
        self.names = tuple(names)
        quoted = ", ".join(f'"{name}"' for name in self.names)
        super().__init__(f"variables declared twice: {quoted}")


class EmptyRegistryError(GQLComposeError):
    """Raised when executing a registry with no documents."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("no queries available")


class NoExpectedResponseError(GQLComposeError, RuntimeError):
    """Raised by LocalBackend when no response was expected."""
