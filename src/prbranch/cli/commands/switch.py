import click

from prbranch.cli.ensure import exit_on_error
from prbranch.cli.output import machine_output, user_output
from prbranch.cli.parse_pr_reference import parse_pr_reference
from prbranch.core.context import PrBranchContext


@click.command("switch")
@click.argument("pr_reference")
@click.pass_obj
def switch_cmd(ctx: PrBranchContext, pr_reference: str) -> None:
    """Switch to a local branch previously checked out for a pull request.

    If several local branches belong to the pull request, the first one
    recorded in git config is used.
    """
    pr_number = parse_pr_reference(pr_reference)

    with exit_on_error():
        branch = ctx.pull_requests.switch_to_branch(ctx.cwd, pr_number)

    user_output(f"Switched to {click.style(branch, fg='cyan')} for PR #{pr_number}")


@click.command("branches")
@click.argument("pr_reference")
@click.pass_obj
def branches_cmd(ctx: PrBranchContext, pr_reference: str) -> None:
    """List local branches checked out for a pull request, one per line."""
    pr_number = parse_pr_reference(pr_reference)

    with exit_on_error():
        branches = ctx.pull_requests.get_local_branches(ctx.cwd, pr_number)

    if not branches:
        user_output(f"No local branches for PR #{pr_number}")
        return

    for branch in branches:
        machine_output(branch)
