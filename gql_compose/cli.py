"""Command-line interface for gql-compose."""

import importlib
import importlib.util
import logging
from pathlib import Path

import click
from graphql import GraphQLSyntaxError, parse

from . import __version__
from .core.encoder import encode
from .core.errors import GQLComposeError
from .core.ir import Document
from .core.merge import merge_many


def load_document(ref: str) -> Document:
    """Load a Document from 'package.module:NAME' or 'path/to/file.py:NAME'."""
    module_ref, sep, attribute = ref.rpartition(":")
    if not sep or not module_ref or not attribute:
        raise click.BadParameter(f"Expected MODULE:NAME, got {ref!r}")

    try:
        if module_ref.endswith(".py"):
            path = Path(module_ref).resolve()
            if not path.is_file():
                raise click.BadParameter(f"No such file: {module_ref}")
            spec = importlib.util.spec_from_file_location(path.stem, path)
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)
        else:
            try:
                module = importlib.import_module(module_ref)
            except ImportError as e:
                raise click.BadParameter(f"Cannot import {module_ref}: {e}") from e
    except GQLComposeError as e:
        # Building a document at import time failed
        raise click.ClickException(f"{module_ref}: {e}") from e

    try:
        document = getattr(module, attribute)
    except AttributeError:
        raise click.BadParameter(f"{module_ref} has no attribute {attribute}") from None

    if not isinstance(document, Document):
        raise click.BadParameter(f"{ref} is a {type(document).__name__}, not a Document")
    return document


def emit(text: str, output: str | None, check: bool, verbose: bool):
    """Optionally check the rendered text, then print or write it."""
    if check:
        try:
            parse(text)
        except GraphQLSyntaxError as e:
            raise click.ClickException(f"Rendered document is not valid GraphQL: {e.message}") from e
        if verbose:
            click.echo("  Syntax check passed", err=True)

    if output:
        output_path = Path(output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n")
        click.echo(f"Done! Wrote {output_path}", err=True)
    else:
        click.echo(text)


check_option = click.option(
    "--check",
    is_flag=True,
    help="Parse the rendered text with graphql-core and fail on syntax errors.",
)
output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write the rendered document to this file instead of stdout.",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)


@click.group()
@click.version_option(__version__)
def main():
    """Compose GraphQL documents defined in Python.

    Documents are referenced as package.module:NAME or path/to/file.py:NAME.
    """
    pass


@main.command()
@click.argument("ref")
@check_option
@output_option
@verbose_option
def render(ref: str, check: bool, output: str | None, verbose: bool):
    """Render a document as GraphQL text.

    Examples:

        gql-compose render myapp.queries:USER_QUERY

        gql-compose render ./queries.py:USER_QUERY --check -o user.graphql
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    document = load_document(ref)
    if verbose:
        click.echo(f"Rendering {document.operation.value} {document.name}...", err=True)
        click.echo(f"  Fields: {len(document.fields)}", err=True)
        click.echo(f"  Fragments: {len(document.fragments)}", err=True)
        click.echo(f"  Variables: {len(document.variables)}", err=True)

    emit(encode(document), output, check, verbose)


@main.command()
@click.argument("refs", nargs=-1, required=True)
@click.option(
    "--name",
    "-n",
    default=None,
    help="Name of the merged operation (default: name of the first document).",
)
@check_option
@output_option
@verbose_option
def merge(refs: tuple[str, ...], name: str | None, check: bool, output: str | None, verbose: bool):
    """Merge several documents into one operation and render it.

    Fields of later documents come first in the merged operation.

    Examples:

        gql-compose merge app.queries:USER app.queries:PRODUCT --name Page
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    documents = [load_document(ref) for ref in refs]
    if verbose:
        click.echo(f"Merging {len(documents)} documents...", err=True)

    try:
        merged = merge_many(documents, name)
    except GQLComposeError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"  Variables: {', '.join(merged.variable_names) or '(none)'}", err=True)

    emit(encode(merged), output, check, verbose)


if __name__ == "__main__":
    main()
