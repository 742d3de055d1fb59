import logging

import click
import jinja2

from .backends import backend_names
from .cli_utils import format_command_line
from .config import GeneratorConfig, load_config
from .errors import CodegenError
from .generator import CodeGenerator
from .schema_registry import discover_schema_paths


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--templates-dir", "-t", default=None, type=click.Path(exists=True, file_okay=False, resolve_path=True), help="Directory holding the templates")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug information on stderr")
@click.argument("backend", type=click.Choice(backend_names(), case_sensitive=False))
@click.argument("schema_path", type=click.Path(exists=True))
@click.argument("template_name", type=str)
def json_schema_to_types(config, templates_dir, verbose, backend, schema_path, template_name):
    """Render TEMPLATE_NAME for BACKEND from the schema file or directory SCHEMA_PATH."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config_path = config
    config = load_config(config_path) if config_path is not None else GeneratorConfig()
    if templates_dir is not None:
        config.templates_directory = templates_dir

    paths = discover_schema_paths(schema_path)
    if not paths:
        raise click.ClickException(f"No *.json schema found in {schema_path}")

    try:
        codegen = CodeGenerator(backend, paths, config, command_line=format_command_line(backend, schema_path, template_name, config_path, templates_dir))
        output = codegen.render(template_name)
    except CodegenError as e:
        raise click.ClickException(str(e)) from e
    except jinja2.TemplateError as e:
        raise click.ClickException(f"Template error in {template_name}: {e}") from e

    click.echo(output, nl=False)
