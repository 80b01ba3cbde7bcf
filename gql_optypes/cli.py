"""Command-line interface for gql-optypes."""

import logging
from pathlib import Path

import click
from graphql import GraphQLError
from rich.logging import RichHandler

from .core.config import Dialect, SynthesisConfig, load_config
from .core.errors import SynthesisError
from .core.generator import CodeGenerator
from .core.loader import load_documents, load_schema
from .core.synthesizer import synthesize

# Problems with the inputs, reported without a traceback
USER_ERRORS = (SynthesisError, GraphQLError, FileNotFoundError, ValueError)


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_config(config_path: str | None, dialect: str | None, add_typename: bool | None) -> SynthesisConfig:
    """Load the config file and apply command-line overrides."""
    config = load_config(Path(config_path) if config_path else None)
    overrides = {}
    if dialect is not None:
        overrides["dialect"] = Dialect(dialect)
    if add_typename is not None:
        overrides["add_typename"] = add_typename
    return config.model_copy(update=overrides) if overrides else config


schema_option = click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to a schema file, a directory of schema files, or an introspection JSON.",
)
documents_option = click.option(
    "--documents",
    "-d",
    required=True,
    multiple=True,
    type=click.Path(exists=True),
    help="Operation document or directory of documents. Repeatable.",
)
config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with synthesis options.",
)
dialect_option = click.option(
    "--dialect",
    type=click.Choice([d.value for d in Dialect]),
    default=None,
    help="Target type language (overrides the config file).",
)
typename_option = click.option(
    "--add-typename/--skip-typename",
    default=None,
    help="Add an optional __typename to every object type (overrides the config file).",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)


@click.group()
@click.version_option(package_name="gql-optypes")
def main():
    """Generate result types for GraphQL operations.

    Reads a schema and operation documents and writes TypeScript or Flow
    types describing exactly what each operation returns.
    """
    pass


@main.command()
@schema_option
@documents_option
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output file for the generated types.",
)
@config_option
@dialect_option
@typename_option
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with a custom operations.j2 template.",
)
@click.option("--header", default=None, help="Text placed at the top of the output file.")
@verbose_option
def generate(schema, documents, output, config_path, dialect, add_typename, template_dir, header, verbose):
    """Generate result types for every operation and fragment.

    Examples:

        gql-optypes generate -s ./schema.graphql -d ./src/queries -o ./src/types.ts

        gql-optypes generate -s ./schema -d ./queries --dialect flow -o ./types.js
    """
    configure_logging(verbose)
    try:
        config = build_config(config_path, dialect, add_typename)
    except ValueError as e:
        raise click.ClickException(str(e))

    if verbose:
        click.echo(f"Schema: {schema}")
        click.echo(f"Documents: {', '.join(documents)}")
        click.echo(f"Output: {output}")
        click.echo(f"Dialect: {config.dialect.value}")

    try:
        click.echo("Loading schema and documents...")
        graphql_schema = load_schema(schema)
        document = load_documents(documents)

        if verbose:
            click.echo(f"  Definitions: {len(document.definitions)}")

        click.echo("Generating types...")
        generator = CodeGenerator(
            graphql_schema, document, config, template_dir=template_dir, header=header
        )
        generator.generate(output)
    except USER_ERRORS as e:
        raise click.ClickException(str(e))

    click.echo(f"Done! Generated {len(generator.declarations)} declarations in {output}")


@main.command(name="list")
@schema_option
@documents_option
@config_option
@verbose_option
def list_declarations(schema, documents, config_path, verbose):
    """List the declarations that would be generated, one per line."""
    configure_logging(verbose)
    try:
        config = build_config(config_path, None, None)
        declarations = synthesize(load_schema(schema), load_documents(documents), config)
    except USER_ERRORS as e:
        raise click.ClickException(str(e))

    for declaration in declarations:
        click.echo(f"{declaration.name}\t{declaration.kind.value}")


if __name__ == "__main__":
    main()
