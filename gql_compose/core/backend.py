"""Backends that execute documents.

A backend is anything that implements the Backend protocol. No network
transport ships with this package; LocalBackend is an in-memory double
for tests.

Example:
    class HttpBackend:
        def __init__(self, session, url):
            self.session = session
            self.url = url

        def execute_query(self, document, variables, options):
            payload = {"query": encode(document), "variables": variables}
            body = self.session.post(self.url, json=payload, **options).json()
            ...
            return Response.success(body["data"])
"""

import logging
import threading
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from .errors import NoExpectedResponseError
from .ir import Document
from .response import Response

logger = logging.getLogger(__name__)

ResponseFactory = Callable[[Document, dict[str, Any], dict[str, Any]], Response]


@runtime_checkable
class Backend(Protocol):
    """Protocol for backends executing documents."""

    def execute_query(
        self,
        document: Document,
        variables: dict[str, Any],
        options: dict[str, Any],
    ) -> Response:
        """Execute a document.

        Args:
            document: The query or mutation to execute
            variables: Values for the declared variables
            options: Backend specific options

        Returns:
            The response of the execution
        """
        ...


class LocalBackend:
    """Backend that returns a canned response, for tests.

    Example:
        backend = LocalBackend()
        backend.expect(Response.success({"user": {"id": 1}}))
        client = Client(backend)
        client.execute(user_query, {"id": 1})  # the canned response

    A callable can be expected instead of a response. It receives the
    document, variables and options, so a test can assert on them.
    """

    def __init__(self):
        self._expected: Response | ResponseFactory | None = None
        self._lock = threading.Lock()

    def expect(self, response: Response | ResponseFactory) -> None:
        """Store the response for the next call to execute_query."""
        with self._lock:
            self._expected = response

    def execute_query(
        self,
        document: Document,
        variables: dict[str, Any],
        options: dict[str, Any],
    ) -> Response:
        """Return the expected response and forget it."""
        with self._lock:
            expected, self._expected = self._expected, None

        if expected is None:
            raise NoExpectedResponseError("there is no response")
        if isinstance(expected, Response):
            logger.debug("Returning canned response for %s", document.name)
            return expected
        logger.debug("Calling response factory for %s", document.name)
        return expected(document, variables, options)
