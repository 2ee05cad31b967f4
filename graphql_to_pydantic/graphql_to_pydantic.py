import json
import logging

import click
from graphql import GraphQLSyntaxError, parse

from .cli_utils import reconstruct_command_line
from .pipeline import CodeGeneratorConfig, GeneratorError, PipelineGenerator


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail when a type is referenced but never declared",
)
@click.option(
    "--add-generation-comment",
    is_flag=True,
    default=False,
    help="Start the generated module with the command that produced it",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def graphql_to_pydantic(config, strict, add_generation_comment, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    with open(path, encoding="utf-8") as f:
        source = f.read()

    if config is not None:
        with open(config) as f:
            config = json.load(f)
            config = CodeGeneratorConfig.from_dict(config)
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file when set
    if strict:
        config.strict_references = True
    if add_generation_comment:
        config.add_generation_comment = True

    try:
        document = parse(source)
    except GraphQLSyntaxError as e:
        raise click.ClickException(f"Invalid GraphQL schema {path}: {e.message}") from e

    codegen = PipelineGenerator(config)
    comment = f"Generated by {reconstruct_command_line(graphql_to_pydantic)}"

    try:
        result = codegen.generate(document, generation_comment=comment)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    with open(output, "w", encoding="utf-8") as f:
        f.write(result.source)
