import sys
import click
import logging
import requests
from crawler.scrapers.websites.smartphone_scraper import SmartphoneScraper
from crawler.normalization.dates import resolve_date
from crawler.output.writer import write_products, load_products
from config.settings import get_settings
from tabulate import tabulate
import traceback

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("smartphone-crawler")

settings = get_settings()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, verbose):
    """Smartphone listing crawler."""
    # Store verbose flag in the Click context instead of a global variable
    ctx.ensure_object(dict)
    ctx.obj["VERBOSE"] = verbose

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")


@cli.command()
@click.option(
    "--base-url",
    "-u",
    default=settings.BASE_URL,
    show_default=True,
    help="Listing URL; pages are fetched from <base-url>/1, /2, ...",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=settings.OUTPUT_FILE,
    show_default=True,
    help="JSON file to write the products to",
)
@click.option(
    "--format-type",
    "-f",
    type=click.Choice(["text", "table", "none"]),
    default="table",
    help="How to display the scraped products (default: table)",
)
@click.pass_context
def scrape(ctx, base_url, output, format_type):
    """Crawl every listing page and save the unique products as JSON."""
    scraper = SmartphoneScraper(base_url=base_url)

    try:
        products = scraper.scrape()
    except requests.RequestException as e:
        # Nothing is written when any page fails
        click.echo(f"Network error: {str(e)}", err=True)
        click.echo("No output was written.", err=True)
        if ctx.obj["VERBOSE"]:
            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Product data error: {str(e)}", err=True)
        click.echo("No output was written.", err=True)
        if ctx.obj["VERBOSE"]:
            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)

    try:
        count = write_products(products, output)
    except OSError as e:
        click.echo(f"Could not write {output}: {str(e)}", err=True)
        sys.exit(1)

    click.echo(f"Saved {count} unique products to {output}")

    if format_type != "none":
        click.echo("\n" + format_products(products, format_type))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format-type",
    "-f",
    type=click.Choice(["text", "table"]),
    default="table",
    help="Output format (default: table)",
)
@click.pass_context
def show(ctx, path, format_type):
    """Display products from a previously written JSON file."""
    try:
        products = load_products(path)
    except ValueError as e:
        click.echo(f"Could not read products from {path}: {str(e)}", err=True)
        if ctx.obj["VERBOSE"]:
            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)

    click.echo(format_products(products, format_type))


@cli.command("resolve-date")
@click.argument("text")
def resolve_date_command(text):
    """Show the canonical date found in a shipping phrase."""
    resolved = resolve_date(text)
    if resolved:
        click.echo(resolved)
    else:
        click.echo("No date found.")


def format_price(price):
    return f"£{price:.2f}" if price is not None else "n/a"


def format_products(products, format_type):
    """Format product records based on specified format type."""
    if not products:
        return "No products found."

    if format_type == "text":
        lines = [f"Found {len(products)} products:"]
        for i, product in enumerate(products, 1):
            lines.append(f"\n{i}. {product.title} ({product.colour})")
            lines.append(f"   Price: {format_price(product.price)}")
            lines.append(f"   Capacity: {product.capacity_mb} MB")
            lines.append(f"   {product.availability_text}")
            if product.shipping_date:
                lines.append(f"   Ships: {product.shipping_date}")

        return "\n".join(lines)

    else:  # table format
        table_data = []
        for product in products:
            # Truncate title if too long
            title = product.title
            if len(title) > 40:
                title = title[:37] + "..."

            table_data.append([
                title,
                product.colour,
                format_price(product.price),
                product.capacity_mb,
                "yes" if product.is_available else "no",
                product.shipping_date or "-",
            ])

        headers = ["Product", "Colour", "Price", "Capacity (MB)", "In Stock", "Ships"]

        return tabulate(table_data, headers=headers, tablefmt="grid")


if __name__ == "__main__":
    # This runs the Click application
    cli.main(obj={})
