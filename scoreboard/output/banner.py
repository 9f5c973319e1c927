"""Title banner printed above the grid."""

from typing import List

import click

TITLE = "MLB Box Scores"


def render_banner(width: int, title: str = TITLE) -> List[str]:
    """Bold green title centered between '=' rules of `width` characters."""
    width = max(width, len(title) + 4)
    rule = "=" * width
    return [
        click.style(rule, fg='green', bold=True),
        click.style(title.center(width), fg='green', bold=True),
        click.style(rule, fg='green', bold=True),
        "",
    ]
