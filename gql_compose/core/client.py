"""Client facade dispatching documents to a backend."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .backend import Backend
from .ir import Document
from .response import Response

logger = logging.getLogger(__name__)


class Client:
    """Executes documents through a pluggable backend.

    Examples:
        client = Client(LocalBackend())
        response = client.execute(user_query, {"id": 1})
        if response.is_success:
            ...
    """

    def __init__(self, backend: Backend):
        if not isinstance(backend, Backend):
            raise TypeError(f"{type(backend).__name__} does not implement execute_query")
        self.backend = backend

    def execute(
        self,
        document: Document,
        variables: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Response:
        """Execute a document with the given variable values and options."""
        logger.debug(
            "Executing %s %s with variables %s",
            document.operation.value,
            document.name,
            sorted(str(k) for k in (variables or {})),
        )
        return self.backend.execute_query(
            document,
            self._serialize_variables(variables or {}),
            dict(options or {}),
        )

    def _serialize_variables(self, variables: Mapping[str, Any]) -> dict[str, Any]:
        """Serialize variable values.

        Handles Pydantic models by converting them to dicts.
        """
        result = {}
        for key, value in variables.items():
            if value is None:
                continue  # Skip None values
            if isinstance(value, BaseModel):
                result[key] = value.model_dump(by_alias=True, exclude_none=True)
            elif isinstance(value, list):
                result[key] = [
                    v.model_dump(by_alias=True, exclude_none=True) if isinstance(v, BaseModel) else v
                    for v in value
                ]
            else:
                result[key] = value
        return result
