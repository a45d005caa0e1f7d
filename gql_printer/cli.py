"""Command-line interface for gql-printer."""

import logging
import shutil
import tarfile
import tempfile
import zipfile
from dataclasses import replace
from pathlib import Path

import click
from graphql import GraphQLError

from .core.errors import UnsupportedNodeError
from .core.hooks import AddHeaderHook, FilterDefinitionsHook, HookRunner
from .core.nodes import Document
from .core.parser import DocumentParser, parse_document
from .core.printer import render
from .core.signature import query_signature

ARCHIVE_SUFFIXES = (".zip", ".tar.gz", ".tgz")


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    name = archive_path.name.lower()
    if name.endswith(".zip"):
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(temp_dir)
    elif name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            # Extraction filters arrived in a 3.10 point release
            if hasattr(tarfile, "data_filter"):
                tar_ref.extractall(temp_dir, filter="data")
            else:
                tar_ref.extractall(temp_dir)
    else:
        shutil.rmtree(temp_dir)
        raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    return temp_dir


def load_document(source: str, verbose: bool = False) -> Document:
    """Parse a GraphQL file, directory or archive into one document."""
    source_path = Path(source).resolve()
    temp_dir = None

    try:
        actual_path = source_path
        if source_path.is_file() and source_path.name.lower().endswith(ARCHIVE_SUFFIXES):
            click.echo(f"Extracting archive {source_path.name}...", err=True)
            temp_dir = extract_archive(source_path)
            actual_path = Path(temp_dir)
            if verbose:
                click.echo(f"  Extracted to: {temp_dir}", err=True)

        if verbose:
            click.echo(f"Source: {actual_path}", err=True)

        parser = DocumentParser(str(actual_path))
        try:
            document = parser.parse_all()
        except (GraphQLError, UnsupportedNodeError) as e:
            raise click.ClickException(f"{parser.current_file}: {e}") from e
        if not parser.files:
            raise click.ClickException(f"No GraphQL files found in {source_path.name}")

        if verbose:
            click.echo(f"  Definitions: {len(document.definitions)}", err=True)
        return document
    finally:
        # Clean up temp directory
        if temp_dir:
            shutil.rmtree(temp_dir)


@click.group()
@click.version_option(package_name="gql-printer")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
def main(debug: bool):
    """Print GraphQL documents from their AST.

    Parse GraphQL sources and print them back in canonical form.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("print")
@click.argument("source", type=click.Path(exists=True))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Write the printed document to this file instead of stdout.",
)
@click.option(
    "--header",
    help="Header line to put above the printed document (e.g. a # comment).",
)
@click.option(
    "--exclude-prefix",
    help="Drop definitions whose names start with this prefix (e.g. __).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def print_document(source: str, output: str | None, header: str | None,
                   exclude_prefix: str | None, verbose: bool):
    """Print a GraphQL file, directory or archive in canonical form.

    Examples:

        gql-printer print ./schema.graphqls

        gql-printer print ./schema --exclude-prefix __ -o ./dump.graphql

        gql-printer print ./queries.tgz --header "# Generated - do not edit"
    """
    document = load_document(source, verbose)

    runner = HookRunner()
    if exclude_prefix:
        runner.add_pre_hook(FilterDefinitionsHook(exclude_prefix=exclude_prefix))
    if header:
        runner.add_post_hook(AddHeaderHook(header))

    document = runner.run_pre_hooks(document)
    text = runner.run_post_hooks(render(document))

    if output is None:
        click.echo(text)
        return

    output_path = Path(output).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text + "\n")

    if verbose:
        click.echo(f"  Lines: {len(text.splitlines())}", err=True)
    click.echo(f"Done! Wrote {output_path}", err=True)


@main.command()
@click.argument("source", type=click.Path(exists=True))
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def check(source: str, verbose: bool):
    """Check that printing round-trips through the parser.

    The printed document must parse back to the same tree, and printing
    that tree again must give the same text.
    """
    document = load_document(source, verbose)
    text = render(document)

    try:
        reparsed = parse_document(text)
    except (GraphQLError, UnsupportedNodeError) as e:
        raise click.ClickException(f"Printed document does not parse: {e}") from e

    # Definitions that print as nothing (a default schema block) can't come back
    expected = replace(
        document,
        definitions=tuple(d for d in document.definitions if render(d)),
    )
    if reparsed != expected:
        raise click.ClickException("Round trip mismatch: reparsed document differs")
    if render(reparsed) != text:
        raise click.ClickException("Printing is not idempotent")

    if verbose:
        click.echo(f"  Signature: {query_signature(document)}")
    click.echo(f"OK: {len(expected.definitions)} definitions round-trip")


@main.command()
@click.argument("source", type=click.Path(exists=True))
def signature(source: str):
    """Print the query signature (SHA-256 of the printed document)."""
    click.echo(query_signature(load_document(source)))


if __name__ == "__main__":
    main()
