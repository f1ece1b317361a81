import click

from prbranch.cli.ensure import Ensure, exit_on_error
from prbranch.cli.output import machine_output
from prbranch.cli.parse_pr_reference import parse_pr_reference
from prbranch.core.context import PrBranchContext


@click.command("template")
@click.pass_obj
def template_cmd(ctx: PrBranchContext) -> None:
    """Print the repository's pull request template."""
    repo_root = Ensure.not_none(ctx.git.get_repository_root(ctx.cwd), "Not in a git repository")
    template = Ensure.not_none(
        ctx.pull_requests.get_pull_request_template(repo_root),
        "No pull request template found",
    )
    machine_output(template, nl=not template.endswith("\n"))


@click.command("branch-name")
@click.argument("pr_reference")
@click.argument("title")
@click.pass_obj
def branch_name_cmd(ctx: PrBranchContext, pr_reference: str, title: str) -> None:
    """Print the default local branch name for a pull request title."""
    pr_number = parse_pr_reference(pr_reference)
    with exit_on_error():
        machine_output(ctx.pull_requests.default_local_branch_name(pr_number, title))
