# nuggetbook/cli/commands/share.py
import click
from nuggetbook.errors import NotFoundError
from nuggetbook.identity import Identity
from nuggetbook.sa.database import get_database
from nuggetbook.sa.repositories import UserRepository
from nuggetbook.services.auth_service import normalize_email
from nuggetbook.services.share_service import ShareService

@click.command('show-share')
@click.argument('share_id')
def show_share(share_id: str):
    """Show a shared nugget as a public visitor sees it (counts as a view)"""
    with get_database().get_db() as session:
        try:
            shared = ShareService(session).get_shared_nugget(share_id)
        except NotFoundError as e:
            raise click.ClickException(str(e))

    click.echo(click.style(f'"{shared.nugget.content}"', fg='cyan'))
    source = shared.book.title
    if shared.book.author:
        source += f" by {shared.book.author}"
    if shared.nugget.page_number:
        source += f", p. {shared.nugget.page_number}"
    click.echo(click.style(f"  {source}", fg='blue'))
    if shared.nugget.tags:
        click.echo("  Tags: " + ", ".join(shared.nugget.tags))
    click.echo(f"  Views: {shared.view_count}")

@click.command()
@click.argument('email')
def stats(email: str):
    """Library statistics for a user"""
    with get_database().get_db() as session:
        users = UserRepository(session)
        user = users.get_by_email(normalize_email(email))
        if user is None:
            raise click.ClickException(f"No user with email {email}")
        data = users.get_library_stats(Identity(user_id=user.id, email=user.email))

    click.echo("\n" + click.style("Library:", fg='blue'))
    for label, key in (("Books", 'total_books'), ("To read", 'toread'), ("Reading", 'reading'),
                       ("Finished", 'finished'), ("Nuggets", 'total_nuggets'),
                       ("Favorites", 'favorite_nuggets'), ("Shares", 'total_shares'),
                       ("Share views", 'total_share_views')):
        click.echo(click.style(f"{label}: ", fg='blue') + click.style(str(data[key]), fg='cyan'))
