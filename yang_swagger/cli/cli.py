from pathlib import Path
import click
import yaml

from datetime import date
from rich.console import Console

from yang_swagger.codegen import DefinitionRegistry, TypeConverter, collect_leaf_properties
from yang_swagger.config import settings
from yang_swagger.gen_logging import configure_logging
from yang_swagger.language import load_schema_context

console = Console(stderr=True)


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


def build_swagger_document(model_paths, enum_models: bool = True) -> dict:
    """Load the YANG modules and convert every leaf to a Swagger property."""
    ctx = load_schema_context(*model_paths)
    registry = DefinitionRegistry()
    converter = TypeConverter(ctx, enum_models=enum_models)
    converter.set_data_object_builder(registry)

    properties = collect_leaf_properties(ctx, converter)
    return {
        "definitions": registry.definitions,
        "properties": {path: prop.to_swagger() for path, prop in properties.items()},
    }


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every converted type.")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors.")
@click.pass_context
def cli(context, verbose, quiet):
    context.ensure_object(dict)
    configure_logging(verbose=verbose, quiet=quiet, level=settings.LOG_LEVEL)


@cli.command("validate", help="YANG module validation")
@click.pass_context
@click.argument("model_paths", nargs=-1, required=True)
def validate(context, model_paths):
    try:
        ctx = load_schema_context(*model_paths)
        names = ", ".join(m.name for m in ctx.modules)
        console.print(f"{_stamp()} Module validation success: {names}", style="green")
    except Exception as e:
        console.print(f"{_stamp()} Validation failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("convert", help="Convert YANG leaf types to Swagger properties")
@click.pass_context
@click.argument("model_paths", nargs=-1, required=True)
@click.option("--output", "-o", "output_file", default=None, help="Write YAML here instead of stdout.")
@click.option(
    "--enum-models/--no-enum-models",
    default=settings.ENUM_MODELS,
    show_default=True,
    help="Register enumerations as definitions instead of plain strings.",
)
def convert(context, model_paths, output_file, enum_models):
    try:
        document = build_swagger_document(model_paths, enum_models=enum_models)
    except Exception as e:
        console.print(f"{_stamp()} Conversion failed with error(s): {e}", style="red")
        context.exit(1)

    text = yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
    if output_file:
        out_path = Path(output_file)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text)
        console.print(f"{_stamp()} Swagger properties written to: {out_path}", style="green")
    else:
        click.echo(text, nl=False)


def main():
    cli(prog_name="yang2swagger")
