"""Encoder for GraphQL documents.

Renders a Document into GraphQL text. The output is exact: two spaces of
indentation per level, one node per line, and no trailing newline.
"""

from collections.abc import Mapping
from typing import Any

from .ir import (
    Document,
    EnumValue,
    FieldNode,
    FragmentNode,
    FragmentRefNode,
    InlineFragmentNode,
    SelectionNode,
    Variable,
)

INDENT = 2


class Encoder:
    """Encodes documents into GraphQL query bodies."""

    def encode(self, document: Document) -> str:
        """Encode a document.

        Args:
            document: The query or mutation to render

        Returns:
            GraphQL text, with fragment definitions after the operation
        """
        variables = self._encode_variables(document.variables) if document.variables else ""
        body = self._encode_nodes(document.fields, INDENT)

        text = f"{document.operation.value} {document.name}{variables} {{\n{body}\n}}"

        if document.fragments:
            text += "\n" + self._encode_nodes(document.fragments, 0)

        return text

    def _encode_variables(self, variables: tuple[Variable, ...]) -> str:
        """Build the declaration list: ($id: ID!, $first: Int = 10)"""
        return "(" + ", ".join(self._encode_variable(v) for v in variables) + ")"

    def _encode_variable(self, variable: Variable) -> str:
        decl = f"${variable.name}: {variable.type}"
        if variable.default_value is not None:
            decl += f" = {self.encode_value(variable.default_value)}"
        return decl

    def _encode_nodes(self, nodes: tuple[SelectionNode, ...], indentation: int) -> str:
        return "\n".join(self._encode_node(node, indentation) for node in nodes)

    def _encode_node(self, node: SelectionNode, indentation: int) -> str:
        indent = " " * indentation

        if isinstance(node, FieldNode):
            return indent + self._encode_field(node, indentation)
        if isinstance(node, FragmentRefNode):
            return f"{indent}...{node.name}"
        if isinstance(node, FragmentNode):
            return f"{indent}fragment {node.name} on {node.type}" + self._encode_block(
                node.children, indentation
            )
        if isinstance(node, InlineFragmentNode):
            return f"{indent}... on {node.type}" + self._encode_block(node.children, indentation)

        raise TypeError(f"Cannot encode {type(node).__name__}")

    def _encode_field(self, node: FieldNode, indentation: int) -> str:
        parts = []
        if node.alias is not None:
            parts.append(f"{node.alias}: ")
        parts.append(str(node.name))
        parts.append(self.encode_arguments(node.arguments))
        if node.directives:
            parts.append(" " + " ".join(self._encode_directive(d) for d in node.directives))
        if node.children:
            parts.append(self._encode_block(node.children, indentation))
        return "".join(parts)

    def _encode_block(self, children: tuple[SelectionNode, ...], indentation: int) -> str:
        """Build ' {\\n<children>\\n<indent>}' for a selection set."""
        inner = self._encode_nodes(children, indentation + INDENT)
        return f" {{\n{inner}\n{' ' * indentation}}}"

    def _encode_directive(self, directive: Any) -> str:
        if isinstance(directive, tuple):
            name, arguments = directive
            return f"@{name}{self.encode_arguments(arguments)}"
        return f"@{directive}"

    def encode_arguments(self, arguments: Mapping[Any, Any] | None) -> str:
        """Build an argument list: (id: $id, first: 10), or '' when empty."""
        if not arguments:
            return ""
        return "(" + self._encode_pairs(arguments) + ")"

    def _encode_pairs(self, mapping: Mapping[Any, Any]) -> str:
        return ", ".join(f"{key}: {self.encode_value(value)}" for key, value in mapping.items())

    def encode_value(self, value: Any) -> str:
        """Render an argument or default value."""
        if isinstance(value, EnumValue):
            return str(value.value)
        if isinstance(value, bool):
            return "true" if value else "false"
        if value is None:
            return "null"
        if isinstance(value, str):
            return f'"{value}"'
        if isinstance(value, (list, tuple)):
            # Elements are joined without a separator, kept for compatibility
            return "".join(self.encode_value(v) for v in value)
        if isinstance(value, Mapping):
            return "{" + self._encode_pairs(value) + "}"
        return str(value)


def encode(document: Document) -> str:
    """Encode a document with the default encoder."""
    return Encoder().encode(document)
