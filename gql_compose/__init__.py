"""Composable GraphQL documents: build, merge and encode queries."""

__version__ = "0.1.0"
