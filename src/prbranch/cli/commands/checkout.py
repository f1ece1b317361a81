"""Checkout a pull request into a local branch."""

import click

from prbranch.cli.ensure import Ensure, exit_on_error
from prbranch.cli.output import user_output
from prbranch.cli.parse_pr_reference import parse_pr_reference
from prbranch.core.context import PrBranchContext


@click.command("checkout")
@click.argument("pr_reference")
@click.option(
    "--branch",
    "branch_name",
    default=None,
    help="Local branch name. Defaults to pr/<number>-<title>.",
)
@click.pass_obj
def checkout_cmd(ctx: PrBranchContext, pr_reference: str, branch_name: str | None) -> None:
    """Fetch a pull request and check it out as a local branch.

    PR_REFERENCE can be a plain number (123) or GitHub URL
    (https://github.com/owner/repo/pull/123).

    The branch is remembered so that `prbranch switch` can return to it later.

    Examples:

    \b
      # Checkout as pr/123-<title>
      prbranch checkout 123

    \b
      # Checkout under a custom name
      prbranch checkout 123 --branch review/parser-fix
    """
    pr_number = parse_pr_reference(pr_reference)
    service = ctx.pull_requests

    if branch_name is None:
        title = Ensure.not_none(
            ctx.github.get_pr_title(ctx.cwd, pr_number),
            f"Could not find PR #{pr_number}\n\n"
            + "Check the PR number and ensure you're authenticated with gh CLI, "
            + "or pass --branch.",
        )
        branch_name = service.default_local_branch_name(pr_number, title)

    with exit_on_error():
        service.fetch_and_checkout(ctx.cwd, pr_number, branch_name)

    user_output(f"Checked out PR #{pr_number} as {click.style(branch_name, fg='cyan')}")
