# topmark:header:start
#
#   project      : OrgCommentary
#   file         : version.py
#   file_relpath : src/orgcommentary/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OrgCommentary `version` command."""

from __future__ import annotations

import click

from orgcommentary.cli.cmd_common import get_console
from orgcommentary.constants import ORGCOMMENTARY_VERSION


@click.command(
    name="version",
    help="Show the installed version of OrgCommentary.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    console = get_console(ctx)
    if console.verbosity > 0:
        console.print(console.styled("OrgCommentary version:", bold=True, underline=True))
        console.print(f"    {console.styled(ORGCOMMENTARY_VERSION, bold=True)}")
    else:
        console.print(console.styled(ORGCOMMENTARY_VERSION, bold=True))
