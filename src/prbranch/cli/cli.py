import logging
import os

import click

from prbranch.cli.commands.checkout import checkout_cmd
from prbranch.cli.commands.create import create_cmd
from prbranch.cli.commands.switch import branches_cmd, switch_cmd
from prbranch.cli.commands.template import branch_name_cmd, template_cmd
from prbranch.cli.output import error_output
from prbranch.core.context import create_context

# Enable debug logging if PRBRANCH_DEBUG environment variable is set
if os.getenv("PRBRANCH_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="prbranch")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Check out, track and open GitHub pull requests as local branches."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            error_output(f"Invalid configuration: {e}")
            raise SystemExit(1) from e


cli.add_command(checkout_cmd)
cli.add_command(switch_cmd)
cli.add_command(branches_cmd)
cli.add_command(create_cmd)
cli.add_command(template_cmd)
cli.add_command(branch_name_cmd)


def main() -> None:
    """CLI entry point used by the `prbranch` console script."""
    cli()
