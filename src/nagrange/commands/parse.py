"""Command: parse a range spec and show its resolved bounds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nagrange.commands._base import RangeCommand

if TYPE_CHECKING:
    from nagrange.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  nagrange parse 10
  nagrange parse 10:
  nagrange parse '~:10'
  nagrange parse @10:20
  nagrange --json parse -- -5:5""",
)
@click.argument("spec")
@click.pass_obj
def parse(app: AppContext, spec: str) -> None:
    """Parse SPEC and print its start, end and invert flag."""
    from nagrange.services.range import RangeService

    app.emit(RangeService().parse(spec))
