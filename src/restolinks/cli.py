"""CLI interface for restolinks."""
import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from .config import get_settings
from .exceptions import RestolinksError
from .maps_utils import is_valid_google_maps_url, extract_google_maps_data
from .form_utils import describe_image_link
from .output_formatting import (
    display_place_extraction,
    display_image_link,
    display_batch_results,
    place_row,
    image_row,
    save_json,
    save_csv
)


console = Console()


def _setup_logging(verbose: bool) -> None:
    logger = logging.getLogger('restolinks')
    if verbose and not logger.handlers:
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version="0.1.0")
@click.option('--json', 'output_json', is_flag=True, help='Output results as JSON instead of formatted tables')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging from the parsers')
@click.pass_context
def cli(ctx, output_json, verbose):
    """restolinks - Restaurant link normalizer

    Turns Google Maps links into place data and image share links into
    direct image URLs.
    """
    ctx.ensure_object(dict)
    ctx.obj['output_json'] = output_json
    _setup_logging(verbose)


@cli.command()
@click.argument('url')
@click.option('--strict', is_flag=True, help='Abort when the URL is not on a Google Maps host')
@click.pass_context
def maps(ctx, url, strict):
    """Extract place data from a Google Maps link.

    Examples:

        restolinks maps "https://www.google.com/maps/place/Bella+Italia/@41.3851,2.1734,15z"

        restolinks --json maps "https://www.google.com/maps?q=Pizza+Place+Barcelona"
    """
    json_mode = ctx.obj.get('output_json', False)
    valid = is_valid_google_maps_url(url)

    if not valid:
        if strict:
            if json_mode:
                print(json.dumps({'source_url': url, 'valid': False, 'error': 'Not a Google Maps link'}, indent=2))
                ctx.exit(1)
            console.print("[bold red]Error:[/bold red] Not a Google Maps link")
            raise click.Abort()
        if not json_mode:
            console.print("[yellow]⚠[/yellow] Not a recognized Google Maps host, extracting anyway")

    result = extract_google_maps_data(url)

    if not json_mode:
        if result.found:
            console.print("[bold green]✓[/bold green] Place data extracted")
        else:
            console.print("[bold red]✗[/bold red] Link not recognized")

    display_place_extraction(result, valid=valid, json_mode=json_mode)


@cli.command()
@click.argument('url')
@click.pass_context
def image(ctx, url):
    """Convert an Imgur or Cloudinary link into a direct image URL.

    Examples:

        restolinks image https://imgur.com/a/ABC123#XYZ9

        restolinks image https://res.cloudinary.com/demo/image/upload/v1/sample.jpg
    """
    json_mode = ctx.obj.get('output_json', False)

    try:
        link = describe_image_link(url)
    except RestolinksError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise click.Abort()

    if not json_mode:
        if link.provider:
            console.print(f"[bold green]✓[/bold green] {link.provider.capitalize()} link")
        else:
            console.print("[yellow]⚠[/yellow] Not an Imgur or Cloudinary link, left unchanged")

    display_image_link(link, json_mode=json_mode)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', help='Output file for results')
@click.option('--format', '-f', type=click.Choice(['json', 'csv']), default='json', help='Output format')
@click.pass_context
def batch(ctx, file, output, format):
    """Normalize every link in a file (one per line).

    Blank lines and lines starting with # are skipped. Google Maps links
    are extracted, everything else goes through the image normalizer.

    Examples:

        restolinks batch links.txt

        restolinks batch links.txt -o restaurants.csv --format csv
    """
    json_mode = ctx.obj.get('output_json', False)

    try:
        quality = get_settings().image_quality
    except RestolinksError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise click.Abort()

    with open(file, 'r', encoding='utf-8') as f:
        links = [line.strip() for line in f]
    links = [link for link in links if link and not link.startswith('#')]

    if not links:
        console.print("[bold yellow]No links found[/bold yellow]")
        return

    rows = []
    for link in links:
        if is_valid_google_maps_url(link):
            rows.append(place_row(extract_google_maps_data(link), valid=True))
        else:
            rows.append(image_row(describe_image_link(link, quality=quality)))

    display_batch_results(rows, json_mode=json_mode)

    if output:
        if format == 'csv':
            save_csv(output, rows)
        else:
            save_json(output, rows)
        if not json_mode:
            console.print(f"\n[dim]💾 Results saved to {output}[/dim]")


if __name__ == '__main__':
    cli()
