"""dbsnp-rod: inspect and classify dbSNP catalog files."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigValidationError, DbSNPConfig, load_config
from .genome_loc import ContigLocator, GenomicLocationError
from .models import DbSNPRecord
from .parser import MalformedRecordError
from .reader import DbSNPReader
from .utils import first_real_snp, iter_snps


class OutputFormat(str, Enum):
    full = "full"
    simple = "simple"
    medium = "medium"
    replay = "replay"


def version_callback(value: bool) -> None:
    if value:
        print(__version__)
        raise typer.Exit()


app = typer.Typer(name="dbsnp-rod", help="Parse and classify dbSNP catalog records")
console = Console()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = None,
) -> None:
    pass


def setup_logging(verbose: bool, quiet: bool, level_name: str | None = None) -> None:
    """Configure logging based on verbosity flags."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    elif level_name:
        level = getattr(logging, level_name.upper(), logging.INFO)
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("dbsnp_rod").setLevel(level)


def _resolve_config(
    config_file: Path | None,
    reference: Path | None,
    skip_malformed: bool | None,
) -> DbSNPConfig:
    """Merge the optional TOML config with command-line overrides."""
    overrides: dict = {}
    if reference is not None:
        overrides["reference_index"] = str(reference.resolve())
    if skip_malformed is not None:
        overrides["skip_malformed"] = skip_malformed

    if config_file is not None:
        return load_config(config_file, overrides=overrides)

    config = DbSNPConfig()
    if reference is not None:
        config.reference_index = reference
    if skip_malformed is not None:
        config.skip_malformed = skip_malformed
    return config


def _open_reader(
    dbsnp_path: Path,
    config_file: Path | None,
    reference: Path | None,
    skip_malformed: bool | None,
    verbose: bool,
    quiet: bool,
) -> DbSNPReader:
    if not dbsnp_path.exists():
        raise FileNotFoundError(f"dbSNP file not found: {dbsnp_path}")

    config = _resolve_config(config_file, reference, skip_malformed)
    setup_logging(verbose, quiet, config.log_level)
    locator: ContigLocator = config.build_locator()

    return DbSNPReader(
        dbsnp_path,
        locator,
        skip_malformed=config.skip_malformed,
        name=config.track_name,
    )


def _format_record(record: DbSNPRecord, output_format: OutputFormat) -> str:
    if output_format == OutputFormat.simple:
        return record.to_simple_string()
    if output_format == OutputFormat.medium:
        return record.to_medium_string()
    if output_format == OutputFormat.replay:
        return record.to_catalog_line()
    return record.to_tsv()


ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="TOML configuration file")
]
ReferenceOption = Annotated[
    Path | None,
    typer.Option("--reference", "-R", help="Reference index (.fai or .dict) for contig checks"),
]
SkipOption = Annotated[
    bool | None,
    typer.Option(
        "--skip-malformed/--strict",
        help="Skip records that fail to parse instead of stopping",
        show_default=False,
    ),
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Enable verbose logging")
]
QuietOption = Annotated[bool, typer.Option("--quiet", "-q", help="Suppress non-error output")]


@app.command()
def parse(
    dbsnp_path: Path = typer.Argument(..., help="Path to dbSNP file (.txt, .txt.gz)"),
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output form for each record")
    ] = OutputFormat.full,
    config_file: ConfigOption = None,
    reference: ReferenceOption = None,
    skip_malformed: SkipOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Parse a dbSNP file and print every record.

    Examples:

        dbsnp-rod parse snp130.txt.gz --format medium

        dbsnp-rod parse snp130.txt --format replay --strict
    """
    try:
        reader = _open_reader(dbsnp_path, config_file, reference, skip_malformed, verbose, quiet)
        for record in reader:
            typer.echo(_format_record(record, output_format))
    except (
        FileNotFoundError,
        ConfigValidationError,
        MalformedRecordError,
        GenomicLocationError,
    ) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None


@app.command()
def snps(
    dbsnp_path: Path = typer.Argument(..., help="Path to dbSNP file (.txt, .txt.gz)"),
    first: bool = typer.Option(False, "--first", help="Only print the first SNP"),
    config_file: ConfigOption = None,
    reference: ReferenceOption = None,
    skip_malformed: SkipOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Print the SNP records of a dbSNP file in descriptive form."""
    try:
        reader = _open_reader(dbsnp_path, config_file, reference, skip_malformed, verbose, quiet)
        if first:
            record = first_real_snp(reader)
            if record is None:
                if not quiet:
                    console.print("[yellow]No SNP records found[/yellow]")
                raise typer.Exit(1)
            typer.echo(record.to_medium_string())
            return

        for record in iter_snps(reader):
            typer.echo(record.to_medium_string())
    except (
        FileNotFoundError,
        ConfigValidationError,
        MalformedRecordError,
        GenomicLocationError,
    ) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None


@app.command()
def stats(
    dbsnp_path: Path = typer.Argument(..., help="Path to dbSNP file (.txt, .txt.gz)"),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
    config_file: ConfigOption = None,
    reference: ReferenceOption = None,
    skip_malformed: SkipOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Count records of each class in a dbSNP file."""
    counts = {
        "records": 0,
        "snps": 0,
        "indels": 0,
        "insertions": 0,
        "deletions": 0,
        "hapmap": 0,
        "two_hit": 0,
        "biallelic": 0,
    }

    try:
        reader = _open_reader(dbsnp_path, config_file, reference, skip_malformed, verbose, quiet)
        for record in reader:
            counts["records"] += 1
            counts["snps"] += record.is_snp()
            counts["indels"] += record.is_indel()
            counts["insertions"] += record.is_insertion()
            counts["deletions"] += record.is_deletion()
            counts["hapmap"] += record.is_hapmap()
            counts["two_hit"] += record.is_2hit_2allele()
            counts["biallelic"] += record.is_biallelic()
    except (
        FileNotFoundError,
        ConfigValidationError,
        MalformedRecordError,
        GenomicLocationError,
    ) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    counts["malformed"] = reader.stats.malformed
    counts["bad_locations"] = reader.stats.bad_locations

    if json_output:
        typer.echo(json.dumps(counts, indent=2))
        return

    table = Table(title=f"dbSNP records in {dbsnp_path.name}")
    table.add_column("Class", style="cyan")
    table.add_column("Count", justify="right", style="green")
    for key, value in counts.items():
        table.add_row(key, f"{value:,}")
    console.print(table)


if __name__ == "__main__":
    app()
