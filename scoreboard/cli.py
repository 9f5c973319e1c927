"""
Scoreboard CLI

USE: `mlb-scores` command printing today's MLB box scores
HOW IT WORKS:
  - Loads settings from the environment
  - Builds a ScheduleClient and runs one render pass
  - Fetch or payload errors are logged and reported on stderr, exit status 1
"""

import sys
import logging

import click
import requests

from .app import run_scoreboard
from .config import load_config
from .data.schedule_client import ScheduleClient, ScheduleError

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    '--favorite', '-f',
    type=str,
    default=None,
    metavar='TEAM',
    help='Team abbreviation to list first (e.g., NYY)'
)
def main(favorite):
    """
    Show today's MLB games as a grid of box scores.

    Examples:
        mlb-scores

        mlb-scores --favorite BOS
    """
    try:
        config = load_config()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    client = ScheduleClient(base_url=config.schedule_url)
    try:
        run_scoreboard(client, click.echo, favorite=favorite, config=config)
    except (requests.RequestException, ScheduleError) as e:
        logger.error(f"Failed to load schedule: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        client.close()


if __name__ == '__main__':
    main()
