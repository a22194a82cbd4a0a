# nuggetbook/cli/commands/lookup.py
import click
from nuggetbook.errors import MetadataLookupError
from nuggetbook.models.book import BookMetadata
from nuggetbook.utils.google_books import GoogleBooksClient

def print_metadata(book: BookMetadata, verbose: bool = False) -> None:
    """Print one metadata result in a readable format."""
    click.echo(click.style(book.title, fg='cyan') + click.style(f" by {book.author}", fg='blue'))
    details = []
    if book.published_date:
        details.append(book.published_date)
    if book.page_count:
        details.append(f"{book.page_count} pages")
    if book.isbn:
        details.append(f"ISBN {book.isbn}")
    if details:
        click.echo("  " + " | ".join(details))
    if verbose:
        if book.publisher:
            click.echo(f"  Publisher: {book.publisher}")
        if book.cover_url:
            click.echo(f"  Cover: {book.cover_url}")
        if book.google_books_id:
            click.echo(f"  Google Books ID: {book.google_books_id}")

@click.command()
@click.argument('query')
@click.option('--limit', default=10, type=click.IntRange(1, 40), help='Maximum number of results')
@click.option('--verbose/--no-verbose', default=False, help='Show publisher, cover and volume id')
def search(query: str, limit: int, verbose: bool):
    """Search the book metadata API by free text

    Example:
        nuggetbook search "deep work" --limit 5
    """
    try:
        results = GoogleBooksClient().search(query, max_results=limit)
    except MetadataLookupError as e:
        raise click.ClickException(str(e))

    if not results:
        click.echo(click.style("No books found", fg='yellow'))
        return
    for book in results:
        print_metadata(book, verbose)

@click.command()
@click.argument('isbn_value', metavar='ISBN')
def isbn(isbn_value: str):
    """Look up a single book by ISBN-10 or ISBN-13"""
    try:
        book = GoogleBooksClient().search_by_isbn(isbn_value)
    except MetadataLookupError as e:
        raise click.ClickException(str(e))

    if book is None:
        click.echo(click.style(f"No book found for ISBN {isbn_value}", fg='yellow'))
        return
    print_metadata(book, verbose=True)
