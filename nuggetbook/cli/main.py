# nuggetbook/cli/main.py
import logging
import click
from nuggetbook import config
from nuggetbook.sa.database import Database, set_database
from .commands.db import init_db
from .commands.lookup import search, isbn
from .commands.share import show_share, stats

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None, help='SQLAlchemy database URL')
def cli(database_url):
    """Nuggetbook CLI"""
    logging.basicConfig(level=getattr(logging, config.log_level_name(), logging.INFO))
    if database_url:
        set_database(Database(database_url))

cli.add_command(init_db)
cli.add_command(search)
cli.add_command(isbn)
cli.add_command(show_share)
cli.add_command(stats)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
