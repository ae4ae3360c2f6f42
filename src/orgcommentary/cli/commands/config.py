# topmark:header:start
#
#   project      : OrgCommentary
#   file         : config.py
#   file_relpath : src/orgcommentary/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OrgCommentary `config` command.

Prints the effective configuration for a target (or the current directory)
as TOML: runtime defaults merged with discovered and explicit config files.
Useful to check which backend and width a conversion would use.
"""

from __future__ import annotations

from pathlib import Path

import click

from orgcommentary.cli.cmd_common import build_config, get_console
from orgcommentary.cli.options import common_config_options
from orgcommentary.config.io import to_toml


@click.command(
    name="config",
    help="Show the effective configuration for TARGET (default: the current directory).",
)
@click.argument(
    "target",
    type=click.Path(path_type=Path),
    required=False,
)
@common_config_options
@click.pass_context
def config_command(
    ctx: click.Context,
    *,
    target: Path | None,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    console = get_console(ctx)
    config = build_config(
        start=target or Path.cwd(),
        config_paths=config_paths,
        no_config=no_config,
    )

    if console.verbosity > 0:
        sources: str = ", ".join(str(p) for p in config.config_files) or "defaults only"
        console.print(console.styled(f"# Sources: {sources}", fg="cyan", dim=True))
    console.print(console.styled(to_toml(config.to_toml_dict()), fg="cyan"), nl=False)
