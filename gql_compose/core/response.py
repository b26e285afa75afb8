"""Response record returned by backends.

A GraphQL server can answer with data, with errors, or with both at
once when only part of the selection could be resolved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResponseStatus(Enum):
    """Outcome of executing a document."""
    SUCCESS = "success"
    FAILURE = "failure"
    PARTIAL = "partial"  # Data and errors together


@dataclass(frozen=True)
class Response:
    """Result of executing a document against a backend."""
    status: ResponseStatus
    data: Any = None
    errors: list[dict[str, Any]] | None = None

    @classmethod
    def success(cls, data: Any) -> "Response":
        """Create a successful response with the given data.

        Example:
            Response.success({"user": {"id": 1}})
        """
        return cls(status=ResponseStatus.SUCCESS, data=data)

    @classmethod
    def failure(cls, errors: list[dict[str, Any]]) -> "Response":
        """Create a failed response with the given errors.

        Example:
            Response.failure([{"message": "not found", "locations": [{"line": 2, "column": 5}]}])
        """
        return cls(status=ResponseStatus.FAILURE, errors=errors)

    @classmethod
    def partial_success(cls, data: Any, errors: list[dict[str, Any]]) -> "Response":
        """Create a response carrying both data and errors."""
        return cls(status=ResponseStatus.PARTIAL, data=data, errors=errors)

    @property
    def is_success(self) -> bool:
        return self.status is ResponseStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.status is ResponseStatus.FAILURE

    @property
    def is_partial(self) -> bool:
        return self.status is ResponseStatus.PARTIAL
