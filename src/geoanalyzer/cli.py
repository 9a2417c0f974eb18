"""
GeoAnalyzer CLI - Command Line Interface

Entry point for classifying and prioritizing a site's discovered URLs
before they are handed to the crawler.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from geoanalyzer import __version__
from geoanalyzer.core.constants import DEFAULTS
from geoanalyzer.core.exceptions import GeoAnalyzerError
from geoanalyzer.core.models import SiteConfig, UrlFilterResult


# Create CLI app
app = typer.Typer(
    name="geoanalyzer",
    help="GeoAnalyzer - URL discovery and crawl prioritization",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for output
console = Console()


class OutputFormat(str, Enum):
    """Output format for the filter command."""
    TABLE = "table"
    JSON = "json"
    URLS = "urls"


PRIORITY_STYLES = {
    "high": "green",
    "medium": "yellow",
    "low": "dim",
}


# ============================================================================
# Helpers
# ============================================================================

def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _build_registry(config_dir: Optional[Path]):
    from geoanalyzer.sites import default_registry

    registry = default_registry()
    if config_dir is not None:
        registry.load_directory(config_dir)
    return registry


def _read_urls(urls_file: Path) -> list[str]:
    """Read one URL per line, skipping blank lines and # comments."""
    urls = []
    with urls_file.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                urls.append(line)
    return urls


def _priority_band(result: UrlFilterResult) -> str:
    if result.is_high_priority:
        return "high"
    if result.is_medium_priority:
        return "medium"
    return "low"


def _results_table(results: list[UrlFilterResult], config: SiteConfig) -> Table:
    table = Table(title=f"URL Priorities for {config.domain}")
    table.add_column("Priority", style="cyan", justify="right")
    table.add_column("Category", style="magenta")
    table.add_column("Crawl", justify="center")
    table.add_column("URL", overflow="fold")
    table.add_column("Reason", style="dim")

    for result in results:
        style = PRIORITY_STYLES[_priority_band(result)]
        crawl = "[green]yes[/green]" if result.should_crawl else "[red]no[/red]"
        table.add_row(
            f"[{style}]{result.priority}[/{style}]",
            result.category.value,
            crawl,
            result.url,
            result.reason or "",
        )

    return table


# ============================================================================
# Main Commands
# ============================================================================

@app.command()
def classify(
    url: str = typer.Argument(..., help="URL to classify"),
    site: Optional[str] = typer.Option(
        None,
        "--site",
        "-s",
        help="Site domain whose rules apply (defaults to the URL's host)",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Directory of YAML site configurations",
        exists=True,
        file_okay=False,
    ),
) -> None:
    """
    Classify a single URL against a site's rule table.
    """
    from geoanalyzer.classifier import classify_url

    try:
        registry = _build_registry(config_dir)
        config = registry.get(site) if site else registry.for_url(url)
        if config is None:
            console.print(f"[red]Error:[/red] Cannot determine site for '{url}'. Use --site.", highlight=False)
            raise typer.Exit(code=1)

        result = classify_url(url, config)

        style = PRIORITY_STYLES[_priority_band(result)]
        console.print(Panel.fit(
            f"URL: [yellow]{result.url}[/yellow]\n"
            f"Site: [blue]{config.name}[/blue]\n"
            f"Priority: [{style}]{result.priority}[/{style}]\n"
            f"Category: [magenta]{result.category.value}[/magenta]\n"
            f"Crawl: {'[green]yes[/green]' if result.should_crawl else '[red]no[/red]'}"
            + (f"\nReason: {result.reason}" if result.reason else ""),
            title="Classification",
        ))

    except typer.Exit:
        raise
    except GeoAnalyzerError as e:
        console.print(f"[red]Error:[/red] {e}", highlight=False)
        raise typer.Exit(code=1)


@app.command("filter")
def filter_command(
    urls_file: Path = typer.Argument(
        ...,
        help="File with one URL per line",
        exists=True,
        dir_okay=False,
    ),
    site: Optional[str] = typer.Option(
        None,
        "--site",
        "-s",
        help="Site domain whose rules apply (defaults to the first URL's host)",
    ),
    limit: int = typer.Option(
        DEFAULTS["crawl_limit"],
        "--limit",
        "-l",
        min=0,
        help="Crawl budget (0 for no cap)",
    ),
    show_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Show excluded URLs in table output",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat(DEFAULTS["output_format"]),
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write JSON results to this file",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Directory of YAML site configurations",
        exists=True,
        file_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
) -> None:
    """
    Deduplicate, classify, and prioritize a list of discovered URLs.
    """
    from geoanalyzer.classifier import UrlPrioritizer
    from geoanalyzer.reporting.exporters.json import JSONExporter

    _setup_logging(verbose)

    try:
        urls = _read_urls(urls_file)
        registry = _build_registry(config_dir)

        if site:
            config = registry.get(site)
        else:
            config = next(
                (c for c in (registry.for_url(u) for u in urls) if c is not None),
                None,
            )
        if config is None:
            console.print("[red]Error:[/red] Cannot determine site from input. Use --site.")
            raise typer.Exit(code=1)

        prioritizer = UrlPrioritizer()
        discovery = prioritizer.discover(urls, config)
        exporter = JSONExporter()

        if output:
            exporter.export(discovery, config, output, limit=limit)

        if output_format == OutputFormat.JSON:
            typer.echo(exporter.dumps(discovery, config, limit=limit))
            return

        crawl_urls = prioritizer.get_crawlable_urls(discovery.prioritized_urls, limit)

        if output_format == OutputFormat.URLS:
            for url in crawl_urls:
                typer.echo(url)
            return

        shown = discovery.prioritized_urls
        if not show_all:
            shown = [r for r in shown if r.should_crawl]
        console.print(_results_table(shown, config))

        console.print(
            f"[bold]{discovery.total_urls}[/bold] unique URLs: "
            f"[green]{discovery.crawlable_urls} crawlable[/green], "
            f"[red]{discovery.skipped_urls} skipped[/red]",
            highlight=False,
        )
        budget = f"first {limit}" if limit else "no cap"
        console.print(f"[blue]Crawl set ({budget}):[/blue] {len(crawl_urls)} URLs", highlight=False)
        if output:
            console.print(f"[green]✓[/green] Results exported to: {output}", highlight=False)

    except typer.Exit:
        raise
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading URLs:[/red] {e}", highlight=False)
        raise typer.Exit(code=1)
    except GeoAnalyzerError as e:
        console.print(f"[red]Error:[/red] {e}", highlight=False)
        raise typer.Exit(code=1)


@app.command()
def sites(
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Directory of YAML site configurations",
        exists=True,
        file_okay=False,
    ),
) -> None:
    """List registered site configurations."""
    try:
        registry = _build_registry(config_dir)

        table = Table(title="Site Configurations")
        table.add_column("Name", style="cyan")
        table.add_column("Domain", style="green")
        table.add_column("Patterns", justify="right")
        table.add_column("Priority URLs", justify="right")

        for config in registry.configs():
            table.add_row(
                config.name,
                config.domain,
                str(len(config.patterns)),
                str(len(config.priority_urls)),
            )

        console.print(table)

    except GeoAnalyzerError as e:
        console.print(f"[red]Error loading sites:[/red] {e}", highlight=False)
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold cyan]GeoAnalyzer[/bold cyan] version [yellow]{__version__}[/yellow]")


# ============================================================================
# Entry Point
# ============================================================================

def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
