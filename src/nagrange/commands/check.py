"""Command: evaluate values against a range spec."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nagrange.commands._base import RangeCommand

if TYPE_CHECKING:
    from nagrange.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  nagrange check 10 12.5
  nagrange check 10:20 5 15 25
  nagrange check @10:20 15
  nagrange -q check '~:10' 9 11
  nagrange --json check -- -5:5 -7""",
)
@click.argument("spec")
@click.argument("values", nargs=-1, required=True, type=float)
@click.pass_obj
def check(app: AppContext, spec: str, values: tuple[float, ...]) -> None:
    """Check each VALUE against SPEC and report which ones alert."""
    from nagrange.services.range import RangeService

    app.emit(RangeService().check(spec, values))
