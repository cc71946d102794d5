"""Command-line interface for gql-oclif."""

import click
from pathlib import Path
from pydantic import ValidationError

from .core.config import OclifConfig
from .core.directive import OCLIF_DIRECTIVE_SDL
from .core.errors import CodegenError
from .core.generator import GeneratedCommand, generate_command
from .core.hooks import AddHeaderHook, HookRunner
from .core.loader import SchemaLoader, collect_documents


def load_config(config_path: str | None, **overrides) -> OclifConfig:
    """Load the JSON config (if any) and apply CLI overrides on top."""
    try:
        config = OclifConfig.from_file(config_path) if config_path else OclifConfig()
        updates = {key: value for key, value in overrides.items() if value is not None}
        return OclifConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--config")


@click.group()
@click.version_option()
def main():
    """Generate oclif commands from GraphQL operations.

    Each operation document becomes one TypeScript command class.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory.",
)
@click.option(
    "--documents",
    "-d",
    required=True,
    type=click.Path(exists=True),
    help="Path to an operation document or a directory of them.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output directory for generated commands.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True),
    help="JSON config file (clientPath, enumsAsStrings, scalars, header).",
)
@click.option(
    "--client-path",
    default=None,
    help="Import path of the GraphQL client module (default: ../../client).",
)
@click.option(
    "--header",
    default=None,
    help="Header line to prepend to every generated file.",
)
@click.option(
    "--enums-as-strings",
    is_flag=True,
    help="Map enum variables to string flags instead of failing.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    documents: str,
    output: str,
    config_path: str | None,
    client_path: str | None,
    header: str | None,
    enums_as_strings: bool,
    template_dir: str | None,
    verbose: bool,
):
    """Generate oclif commands from GraphQL operation documents.

    Every document must hold exactly one named operation. Nothing is
    written if any document fails to generate.

    Examples:

        gql-oclif generate --schema ./schema.graphql --documents ./operations --output ./src/commands

        gql-oclif generate -s ./schema -d ./ops -o ./commands --client-path ../client
    """
    config = load_config(
        config_path,
        client_path=client_path,
        header=header,
        enums_as_strings=enums_as_strings or None,
        template_dir=template_dir,
    )
    output_path = Path(output).resolve()

    if verbose:
        click.echo(f"Schema: {Path(schema).resolve()}")
        click.echo(f"Documents: {Path(documents).resolve()}")
        click.echo(f"Output: {output_path}")
        click.echo(f"Client path: {config.client_path}")

    hooks = HookRunner()
    if config.header:
        hooks.add_post_hook(AddHeaderHook(config.header))

    try:
        click.echo("Loading schema...")
        graphql_schema = SchemaLoader(schema).load()

        click.echo("Parsing documents...")
        parsed = collect_documents(documents)
        if verbose:
            click.echo(f"  Documents: {len(parsed)}")

        click.echo("Generating commands...")
        generated: list[GeneratedCommand] = []
        for relative_path, document in parsed:
            output_file = str(relative_path.with_suffix(".ts"))
            generated.append(
                generate_command(graphql_schema, document, config, output_file)
            )
            if verbose:
                click.echo(f"  {relative_path} -> {output_file}")
    except CodegenError as e:
        raise click.ClickException(str(e))

    for command in generated:
        target = output_path / command.output_file
        target.parent.mkdir(parents=True, exist_ok=True)
        content = hooks.run_post_hooks(target.name, command.text)
        with open(target, "w") as f:
            f.write(content)

    click.echo(f"Done! Generated {len(generated)} commands in {output_path}")


@main.command()
def directive():
    """Print the @oclif directive definition to add to a schema."""
    click.echo(OCLIF_DIRECTIVE_SDL)


if __name__ == "__main__":
    main()
