"""Output formatting utilities for CLI display."""
import json
import csv
from rich.console import Console
from rich.table import Table
from rich import box


console = Console()

BATCH_FIELDS = [
    'kind', 'source_url', 'valid', 'name', 'address', 'location',
    'latitude', 'longitude', 'direct_url', 'provider', 'image_id',
]


def display_place_extraction(result, valid=True, json_mode=False):
    """Display a Maps extraction result.

    Args:
        result: PlaceExtraction object
        valid: Whether the link passed the Maps host check
        json_mode: If True, output as JSON instead of rich tables
    """
    if json_mode:
        output = result.to_dict()
        output['valid'] = valid
        print(json.dumps(output, indent=2))
        return

    table = Table(show_header=False, box=box.ROUNDED)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Name", result.name or "N/A")
    table.add_row("Address", result.address or "N/A")
    table.add_row("Location", result.location or "N/A")
    if result.has_coordinates:
        table.add_row("Latitude", str(result.latitude))
        table.add_row("Longitude", str(result.longitude))
    table.add_row("Source", result.source_url)

    console.print(table)


def display_image_link(link, json_mode=False):
    """Display a normalized image link.

    Args:
        link: ImageLink object
        json_mode: If True, output as JSON instead of rich tables
    """
    if json_mode:
        output = {
            'source_url': link.source_url,
            'direct_url': link.direct_url,
            'provider': link.provider,
            'image_id': link.image_id,
            'converted': link.converted
        }
        print(json.dumps(output, indent=2))
        return

    table = Table(show_header=False, box=box.ROUNDED)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Provider", link.provider or "Unknown")
    table.add_row("Image ID", link.image_id or "Not found")
    table.add_row("Direct URL", link.direct_url)
    table.add_row("Source", link.source_url)

    console.print(table)


def place_row(result, valid):
    """Flatten a PlaceExtraction into a batch row."""
    row = dict.fromkeys(BATCH_FIELDS)
    row.update(result.to_dict())
    row['kind'] = 'maps'
    row['valid'] = valid
    return row


def image_row(link):
    """Flatten an ImageLink into a batch row."""
    row = dict.fromkeys(BATCH_FIELDS)
    row.update({
        'kind': 'image',
        'source_url': link.source_url,
        'valid': link.provider is not None,
        'direct_url': link.direct_url,
        'provider': link.provider,
        'image_id': link.image_id
    })
    return row


def display_batch_results(rows, json_mode=False):
    """Display batch results.

    Args:
        rows: List of batch rows (see place_row and image_row)
        json_mode: If True, output as JSON instead of rich tables
    """
    if json_mode:
        print(json.dumps(rows, indent=2))
        return

    table = Table(box=box.ROUNDED)
    table.add_column("#", style="dim", width=3)
    table.add_column("Kind", style="cyan")
    table.add_column("Link", style="blue")
    table.add_column("Result", style="green")

    for i, row in enumerate(rows, 1):
        link = row['source_url']
        if len(link) > 50:
            link = link[:50] + "..."

        if row['kind'] == 'maps':
            summary = row['name'] or row['location'] or "[red]Not recognized[/red]"
        else:
            summary = row['direct_url'] if row['valid'] else "[yellow]Unchanged[/yellow]"

        table.add_row(str(i), row['kind'], link, summary)

    console.print(table)

    recognized = sum(1 for r in rows if r['valid'])
    console.print(f"\n[dim]{recognized}/{len(rows)} links recognized[/dim]")


def save_json(filename, data):
    """Save data to JSON file.

    Args:
        filename: Output filename
        data: Data to save
    """
    with open(filename, 'w') as f:
        json.dump(data, f, indent=2)


def save_csv(filename, data):
    """Save data to CSV file.

    Args:
        filename: Output filename
        data: List of dictionaries to save
    """
    if not data:
        return

    with open(filename, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=data[0].keys())
        writer.writeheader()
        writer.writerows(data)
