# nuggetbook/cli/commands/db.py
import click
from nuggetbook.sa.database import get_database

@click.command('init-db')
def init_db():
    """Create all tables on DATABASE_URL"""
    db = get_database()
    db.init_db()
    click.echo(click.style("Database ready: ", fg='green') +
               click.style(db.engine.url.render_as_string(hide_password=True), fg='cyan'))
