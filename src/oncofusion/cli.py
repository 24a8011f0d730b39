"""Command-line interface for OncoFusion.

Main command:
    fusion read GENE FUSION_STRING [--separator SEP ...] [--flip A:B] [--filter-pair A:B]

Configuration:
    --config PATH  JSON reader configuration (separators, filter_set, flip_set)
    Environment: ONCOFUSION_READER_CONFIG=path/to/config.json
    Command-line filters and flips are added to the file's sets; command-line
    separators replace the file's separator list.

Logging:
    --log-level  Set log level (DEBUG, INFO, WARN, ERROR). Default: INFO
    Environment: ONCOFUSION_LOG_LEVEL=DEBUG|INFO|WARN|ERROR
"""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel

from oncofusion import __version__
from oncofusion.config.constants import PAIR_ARGUMENT_SEPARATOR
from oncofusion.config.debug import get_logger, set_log_level
from oncofusion.models import FusionPair, KnownFusionOutput, PromiscuousGene
from oncofusion.normalization.fusion_reader import FusionReader, ReaderConfig

load_dotenv()

app = typer.Typer(
    name="fusion",
    help="Read gene fusion events from knowledge-base descriptions",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    table = "table"
    json = "json"
    tsv = "tsv"


def _parse_pairs(values: list[str] | None) -> set[FusionPair]:
    return {FusionPair.from_string(value, PAIR_ARGUMENT_SEPARATOR) for value in values or []}


def build_config(
    config_path: Path | None,
    separators: list[str] | None,
    filter_pairs: list[str] | None,
    filter_genes: list[str] | None,
    flips: list[str] | None,
) -> ReaderConfig:
    """Merge the file (or environment) configuration with command-line options."""
    base = ReaderConfig.from_file(config_path) if config_path else ReaderConfig.from_env()

    filter_set = set(base.filter_set) | _parse_pairs(filter_pairs)
    filter_set |= {PromiscuousGene(gene=gene.strip()) for gene in filter_genes or []}

    return ReaderConfig(
        separators=separators or base.separators,
        filter_set=filter_set,
        flip_set=set(base.flip_set) | _parse_pairs(flips),
    )


@app.command()
def read(
    gene: str = typer.Argument(..., help="Gene symbol of the knowledge-base entry (e.g., ALK)"),
    fusion_string: str = typer.Argument(..., help="Fusion description (e.g., EML4-ALK)"),
    separator: Optional[list[str]] = typer.Option(
        None, "--separator", "-s", help="Separator to try, in priority order (repeatable). Default: -"
    ),
    filter_pair: Optional[list[str]] = typer.Option(
        None, "--filter-pair", help="Suppress this FIVE:THREE pair (repeatable)"
    ),
    filter_gene: Optional[list[str]] = typer.Option(
        None, "--filter-gene", help="Suppress this promiscuous gene (repeatable)"
    ),
    flip: Optional[list[str]] = typer.Option(
        None, "--flip", help="Swap orientation of this FIVE:THREE pair (repeatable)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="JSON reader configuration"),
    transcript: str = typer.Option("", "--transcript", "-t", help="Transcript for the output row"),
    info: str = typer.Option("", "--info", "-i", help="Additional info for the output row"),
    output_format: OutputFormat = typer.Option(OutputFormat.table, "--format", "-f", help="Output format"),
    log_level: str = typer.Option("INFO", "--log-level", "-l", help="Log level: DEBUG, INFO, WARN, ERROR"),
) -> None:
    """Resolve the fusion event for one knowledge-base entry.

    Examples:
        fusion read ABL1 BCR-ABL1
        fusion read FOO FOO_BAR -s - -s _
        fusion read ALK EML4-ALK --flip EML4:ALK
        fusion read ALK EML4-ALK --format tsv --transcript ENST00000389048
    """
    logger = get_logger(__name__)

    try:
        set_log_level(log_level)
        reader = FusionReader(build_config(config, separator, filter_pair, filter_gene, flip))
        event = reader.read(gene, fusion_string)
    except ValueError as e:
        logger.debug(f"Failed to read {gene} / {fusion_string!r}: {e}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    logger.debug(f"Read {gene} / {fusion_string!r} -> {event!r}")

    if output_format == OutputFormat.json:
        typer.echo(json.dumps(event.model_dump(mode="json") if event is not None else None, indent=2))
        return

    if output_format == OutputFormat.tsv:
        if event is None:
            return
        row = KnownFusionOutput(gene=gene.strip(), transcript=transcript, info=info, event=event)
        typer.echo("\t".join(KnownFusionOutput.header(type(event))))
        typer.echo("\t".join(row.record))
        return

    if event is None:
        body = "[yellow]filtered[/yellow]"
        title = "Suppressed"
    elif isinstance(event, FusionPair):
        body = f"[dim]5':[/dim] {event.five_gene}\n[dim]3':[/dim] {event.three_gene}"
        title = "Fusion pair"
    else:
        body = f"[dim]Gene:[/dim] {event.gene}"
        title = "Promiscuous gene"

    console.print(Panel(body, title=f"[bold]{title}[/bold]", subtitle=f"{gene} / {fusion_string}", padding=(0, 2)))


@app.command()
def version() -> None:
    """Print the OncoFusion version."""
    typer.echo(__version__)


if __name__ == "__main__":
    app()
