import uuid
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from uuid_gen.config import GeneratorConfig
from uuid_gen.errors import UuidGenError, InvalidNamespaceError
from uuid_gen.generator import UuidGenerator
from uuid_gen.metrics import configure_logging
from uuid_gen.namespaces import NamespaceTag

app = typer.Typer(help="RFC 9562 UUID generator")
console = Console()


def _load_config(entropy_url: Optional[str]) -> GeneratorConfig:
    config = GeneratorConfig.from_env()
    if entropy_url:
        config = GeneratorConfig(
            entropy_url=entropy_url,
            entropy_timeout=config.entropy_timeout,
            strict_format=config.strict_format,
            log_level=config.log_level,
        )
    configure_logging(config.log_level, json_format=False)
    return config


def _parse_namespace(value: str):
    try:
        return NamespaceTag(value.lower())
    except ValueError:
        pass
    try:
        return uuid.UUID(value)
    except ValueError:
        raise InvalidNamespaceError(
            f"Namespace must be one of dns/url/oid/x500 or a UUID, got {value!r}",
            value=value,
        ) from None


@app.command()
def v7(
    count: int = typer.Option(1, "--count", "-n", help="Number of identifiers to generate"),
    fmt: str = typer.Option("standard", "--format", "-f", help="standard, hex, urn or raw"),
    entropy_url: Optional[str] = typer.Option(None, help="Remote entropy service URL"),
):
    """Generate time-ordered v7 identifiers."""
    try:
        config = _load_config(entropy_url)
        with UuidGenerator.from_config(config) as gen:
            for uid in gen.v7_batch(count):
                console.print(gen.render(uid, fmt), markup=False, highlight=False)
    except UuidGenError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.command()
def v5(
    namespace: str = typer.Argument(..., help="dns, url, oid, x500 or a namespace UUID"),
    name: str = typer.Argument(..., help="Name to hash"),
    fmt: str = typer.Option("standard", "--format", "-f", help="standard, hex, urn or raw"),
):
    """Generate a deterministic name-based v5 identifier."""
    try:
        config = _load_config(None)
        gen = UuidGenerator(strict_format=config.strict_format)
        uid = gen.v5(_parse_namespace(namespace), name)
        console.print(gen.render(uid, fmt), markup=False, highlight=False)
    except UuidGenError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.command()
def namespaces():
    """List the predefined v5 namespaces."""
    table = Table(title="RFC 9562 Namespaces")
    table.add_column("Tag", style="cyan")
    table.add_column("UUID", style="magenta")

    for tag in NamespaceTag:
        table.add_row(tag.value, str(uuid.UUID(bytes=tag.value_bytes)))

    console.print(table)


if __name__ == "__main__":
    app()
