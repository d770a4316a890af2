"""Command-line interface for the sheet analyzer."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .grid import RowPreview
from .loaders.grid_loader import GridLoader
from .profiling.models import AnalysisReport
from .profiling.profiler import AnalysisConfig, SheetProfiler
from .reporting.csv_generator import CSVGenerator
from .reporting.report_generator import ReportGenerator, SUPPORTED_FORMATS
from .utils.config_loader import ConfigLoader
from .utils.logger import setup_logging


def _fmt(value: Optional[float]) -> str:
    return 'N/A' if value is None else f"{value:.2f}"


def print_report(report: AnalysisReport, console: Console) -> None:
    """Print column statistics and quality summary as rich tables."""
    table = Table(title="Column Statistics")
    table.add_column("Column")
    table.add_column("Type")
    table.add_column("Non-empty", justify="right")
    table.add_column("Missing", justify="right")
    table.add_column("Unique", justify="right")
    table.add_column("Mean / Most common")

    for stat in report.columns:
        if stat.numeric is not None:
            detail = f"mean {_fmt(stat.numeric.mean)}, median {_fmt(stat.numeric.median)}"
        elif stat.categorical is not None and stat.categorical.most_common:
            value, count = stat.categorical.most_common[0]
            detail = f"{value} ({count})"
        else:
            detail = 'N/A'

        table.add_row(
            stat.name,
            stat.type.value,
            str(stat.non_empty),
            f"{stat.missing} ({stat.missing_percent}%)",
            str(stat.unique_count),
            detail
        )

    console.print(table)

    quality = report.quality
    console.print(
        f"Completeness: {quality.completeness}% ({quality.completeness_class}) | "
        f"Duplicate rows: {quality.duplicate_count} ({quality.duplicate_class}) | "
        f"Avg missing: {quality.avg_missing_percent}% ({quality.missing_class})"
    )


def print_preview(preview: RowPreview, console: Console) -> None:
    """Print the leading rows of a grid as a rich table."""
    table = Table(title="Data Preview")
    for name in preview.header:
        table.add_column(escape(name))

    for row in preview.rows:
        table.add_row(*(escape(value) for value in row))

    console.print(table)
    if preview.note:
        console.print(f"[italic]{preview.note}[/italic]")


@click.group()
@click.version_option(version=__version__)
def cli():
    """Spreadsheet column analysis tool."""
    pass


@cli.command('analyze')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--sheet', '-s', help='Sheet to analyze (default: first sheet)')
@click.option('--config', '-c', help='Path to config YAML file')
@click.option('--env', '-e', help='Path to .env file')
@click.option('--output-dir', '-o', default=None, help='Output directory for reports')
@click.option('--formats', '-f', multiple=True, type=click.Choice(SUPPORTED_FORMATS),
              help='Report formats (json, html, csv, xlsx)')
@click.option('--bins', '-b', type=int, help='Histogram bin count')
@click.option('--preview', '-p', is_flag=True, help='Print the leading data rows')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def analyze_command(
    file: str,
    sheet: Optional[str],
    config: Optional[str],
    env: Optional[str],
    output_dir: Optional[str],
    formats: tuple,
    bins: Optional[int],
    preview: bool,
    verbose: bool
):
    """
    Analyze a spreadsheet and write reports.

    Examples:
        sheet-analyzer analyze sales.xlsx --sheet Q3 -f json -f html

        sheet-analyzer analyze export.csv -o ./reports -b 20
    """
    try:
        logger = setup_logging()
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)

        click.echo(f"\n📊 Sheet Analyzer")
        click.echo(f"{'='*60}\n")

        click.echo("Loading configuration...")
        config_loader = ConfigLoader(config_path=config, env_path=env)
        analysis = dict(config_loader.get_analysis_config())
        if bins is not None:
            analysis['histogram'] = {**analysis.get('histogram', {}), 'bins': bins}
        analysis_config = AnalysisConfig.from_dict(analysis)

        loader = GridLoader(max_file_size_mb=config_loader.get('loader.max_file_size_mb', 10))
        click.echo(f"Loading {file}...")
        grid = loader.load(file, sheet=sheet)
        click.echo(f"  {grid.row_count:,} data rows, {grid.width} columns")

        click.echo("Analyzing columns...")
        report = SheetProfiler(analysis_config).profile(grid)
        console = Console()
        print_report(report, console)

        row_preview = grid.preview(config_loader.get('reporting.preview_rows', 100))
        if preview:
            print_preview(row_preview, console)

        report_dir = output_dir or config_loader.get('reporting.output_dir', './reports')
        report_formats = list(formats) or config_loader.get('reporting.formats', ['json', 'html'])
        source_name = Path(file).stem + (f"_{sheet}" if sheet else "")

        click.echo(f"\nGenerating reports...")
        report_files = ReportGenerator(report_dir).generate_report(
            report, source_name, report_formats, preview=row_preview
        )

        click.echo(f"\n✅ Reports generated:")
        for fmt, path in report_files.items():
            click.echo(f"  {fmt.upper()}: {path}")

    except Exception as e:
        click.echo(f"\n❌ Error: {str(e)}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


@cli.command('sheets')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def sheets_command(file: str):
    """List the sheets of a workbook."""
    try:
        for name in GridLoader().list_sheets(file):
            click.echo(name)
    except Exception as e:
        click.echo(f"❌ Error: {str(e)}", err=True)
        sys.exit(1)


@cli.command('export-csv')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--sheet', '-s', help='Sheet to export (default: first sheet)')
@click.option('--output', '-o', help='Output CSV path (default: <sheet>_analysis.csv)')
def export_csv_command(file: str, sheet: Optional[str], output: Optional[str]):
    """Re-export one sheet of a workbook as CSV."""
    try:
        grid = GridLoader().load(file, sheet=sheet)
        target = output or f"{sheet or Path(file).stem}_analysis.csv"
        path = CSVGenerator.export_grid(grid, target)
        click.echo(f"✅ CSV saved to: {path}")
    except Exception as e:
        click.echo(f"❌ Error: {str(e)}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    cli()
