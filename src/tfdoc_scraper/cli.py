"""CLI entry point for tfdoc-scraper."""

import sys
from pathlib import Path

import click
from loguru import logger

from tfdoc_scraper.config import Settings, settings
from tfdoc_scraper.errors import TfDocError
from tfdoc_scraper.generator.hcl import generate_hcl
from tfdoc_scraper.generator.serialize import dump_record
from tfdoc_scraper.scraper.base import DocKind, ProviderRecord, ResourceRecord
from tfdoc_scraper.scraper.pipeline import TfScraper

OUTPUT_FORMATS = ["hcl", "json", "yaml"]


def _scrape(kind: DocKind, name: str, cfg: Settings) -> ResourceRecord | ProviderRecord:
    """Run the scraper, turning library errors into CLI errors."""
    try:
        return TfScraper(kind, name, settings=cfg).scrape()
    except TfDocError as e:
        raise click.ClickException(str(e)) from e


def _render(record: ResourceRecord | ProviderRecord, fmt: str, required_only: bool = False) -> str:
    if fmt == "hcl":
        return generate_hcl(record, required_only=required_only)
    return dump_record(record, fmt)


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        click.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Saved to {output}", err=True)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.option("--base-url", default=None, help="Documentation site root URL.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, base_url: str | None):
    """tfdoc — scrape Terraform provider and resource documentation."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else settings.log_level)
    ctx.obj = Settings(base_url=base_url) if base_url else settings


@main.command()
@click.argument("name")
@click.option("--format", "fmt", default="hcl", type=click.Choice(OUTPUT_FORMATS), help="Output format.")
@click.option("--required-only", is_flag=True, help="Only include required arguments (hcl).")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write output to a file.")
@click.pass_obj
def resource(cfg: Settings, name: str, fmt: str, required_only: bool, output: Path | None):
    """Scrape the arguments of a resource such as aws_instance."""
    record = _scrape(DocKind.RESOURCE, name, cfg)
    _emit(_render(record, fmt, required_only), output)


@main.command()
@click.argument("name")
@click.option("--format", "fmt", default="hcl", type=click.Choice(OUTPUT_FORMATS), help="Output format.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write output to a file.")
@click.pass_obj
def provider(cfg: Settings, name: str, fmt: str, output: Path | None):
    """Scrape the resource list of a provider such as aws."""
    record = _scrape(DocKind.PROVIDER, name, cfg)
    _emit(_render(record, fmt), output)
