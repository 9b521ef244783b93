from datetime import date

import click
from rich.console import Console
from rich.table import Table
from textx.exceptions import TextXError

from jcr_lexicon.config import get_settings
from jcr_lexicon.errors import NamespaceFileError
from jcr_lexicon.lex_logging import configure_logging
from jcr_lexicon.lib.namespaces import load_namespace_mapping, load_registry_from_settings
from jcr_lexicon.validation import QualifiedValidator, is_valid_date_string

console = Console()


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


def _report(label: str, candidate: str, diagnosis) -> None:
    if diagnosis.valid:
        console.print(f"{label} '{candidate}': valid", style="green", markup=False)
        return
    where = ""
    if diagnosis.segment_index is not None:
        where = f" at segment {diagnosis.segment_index} '{diagnosis.segment}'"
    console.print(f"{label} '{candidate}': invalid{where} - {diagnosis.error}", style="red", markup=False)


@click.group()
@click.option("--namespaces", "namespaces_file", type=click.Path(dir_okay=False),
              default=None, help="Namespace declaration file (.cnd, .yaml).")
@click.option("--no-builtins", is_flag=True, default=False,
              help="Do not include the builtin jcr/nt/mix/xml/sv namespaces.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.option("-q", "--quiet", is_flag=True, default=False, help="Errors only.")
@click.pass_context
def cli(context, namespaces_file, no_builtins, verbose, quiet):
    context.ensure_object(dict)
    settings = get_settings(
        NAMESPACES_FILE=namespaces_file,
        INCLUDE_BUILTIN_NAMESPACES=False if no_builtins else None,
    )
    configure_logging(verbose=verbose, quiet=quiet, level=settings.LOG_LEVEL)
    context.obj["settings"] = settings


def _registry(context):
    settings = context.obj["settings"]
    try:
        return load_registry_from_settings(settings)
    except (NamespaceFileError, TextXError) as e:
        console.print(f"{_stamp()} Cannot load namespaces: {e}", style="red", markup=False)
        context.exit(1)


@cli.command("name", help="Validate item names (syntax and namespace prefix).")
@click.pass_context
@click.argument("names", nargs=-1, required=True)
def name_cmd(context, names):
    validator = QualifiedValidator(_registry(context))
    results = [validator.diagnose_name(n) for n in names]
    for candidate, diagnosis in zip(names, results):
        _report("Name", candidate, diagnosis)
    context.exit(0 if all(results) else 1)


@cli.command("path", help="Validate paths segment by segment.")
@click.pass_context
@click.argument("paths", nargs=-1, required=True)
def path_cmd(context, paths):
    validator = QualifiedValidator(_registry(context))
    results = [validator.diagnose_path(p) for p in paths]
    for candidate, diagnosis in zip(paths, results):
        _report("Path", candidate, diagnosis)
    context.exit(0 if all(results) else 1)


@cli.command("date", help="Validate date strings (YYYY-MM-DDThh:mm:ss.sssZ).")
@click.pass_context
@click.argument("values", nargs=-1, required=True)
def date_cmd(context, values):
    ok = True
    for value in values:
        if is_valid_date_string(value):
            console.print(f"Date '{value}': valid", style="green", markup=False)
        else:
            ok = False
            console.print(f"Date '{value}': invalid", style="red", markup=False)
    context.exit(0 if ok else 1)


@cli.command("namespaces", help="List the active namespace registry.")
@click.pass_context
def namespaces_cmd(context):
    registry = _registry(context)
    table = Table(title="Namespaces")
    table.add_column("Prefix", style="cyan")
    table.add_column("URI")
    for prefix in sorted(registry):
        table.add_row(prefix, registry.get_uri(prefix))
    console.print(table)
    context.exit(0)


@cli.command("check-namespaces", help="Validate a namespace declaration file.")
@click.pass_context
@click.argument("namespace_file", type=click.Path(dir_okay=False))
def check_namespaces(context, namespace_file):
    try:
        mapping = load_namespace_mapping(namespace_file)
        console.print(
            f"{_stamp()} Namespace file is valid ({len(mapping)} declaration(s)).",
            style="green", markup=False,
        )
    except (NamespaceFileError, TextXError) as e:
        console.print(f"{_stamp()} Validation failed with error(s): {e}", style="red", markup=False)
        context.exit(1)
    else:
        context.exit(0)


def main():
    cli()


if __name__ == "__main__":
    main()
