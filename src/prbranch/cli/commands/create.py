"""Push the current branch and open a pull request for it."""

import click

from prbranch.cli.ensure import Ensure, exit_on_error
from prbranch.cli.output import machine_output, user_output
from prbranch.core.context import PrBranchContext
from prbranch.core.github_ops import RepositoryRef, parse_github_remote_url


def parse_repository_slug(slug: str) -> RepositoryRef | None:
    """Parse `owner/name` into a RepositoryRef.

    Examples:
        >>> parse_repository_slug("octo/hello")
        RepositoryRef(owner='octo', name='hello')
        >>> parse_repository_slug("octo") is None
        True
    """
    owner, sep, name = slug.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        return None
    return RepositoryRef(owner=owner, name=name)


@click.command("create")
@click.option("--title", "-t", required=True, help="Pull request title.")
@click.option(
    "--body",
    "-b",
    default=None,
    help="Pull request body. Defaults to the repository's PULL_REQUEST_TEMPLATE.",
)
@click.option("--base", "target_branch", default="main", show_default=True, help="Base branch.")
@click.option(
    "--head",
    "source_branch",
    default=None,
    help="Branch to push and open the pull request from. Defaults to the current branch.",
)
@click.option(
    "--target-repo",
    default=None,
    help="Repository to open the pull request against (owner/name). Defaults to origin's.",
)
@click.pass_obj
def create_cmd(
    ctx: PrBranchContext,
    title: str,
    body: str | None,
    target_branch: str,
    source_branch: str | None,
    target_repo: str | None,
) -> None:
    """Push a branch and open a pull request for it.

    The branch is pushed to the configured remote (origin by default), set to
    track the pushed branch if it has no upstream yet, and a pull request is
    opened after a short delay so GitHub can see the new branch.

    Examples:

    \b
      # Open a PR for the current branch against main
      prbranch create --title "Fix parser crash"

    \b
      # Open a PR from a fork against upstream's develop branch
      prbranch create -t "Add docs" --base develop --target-repo upstream-org/project
    """
    Ensure.invariant(bool(title.strip()), "Pull request title must not be empty")
    service = ctx.pull_requests

    repo_root = Ensure.not_none(ctx.git.get_repository_root(ctx.cwd), "Not in a git repository")
    with exit_on_error():
        remote = service.get_publish_remote(repo_root)
    source_repo = Ensure.not_none(
        parse_github_remote_url(remote.url),
        f"Remote '{remote.name}' does not point at a GitHub repository: {remote.url}",
    )

    if target_repo is None:
        target = source_repo
    else:
        target = Ensure.not_none(
            parse_repository_slug(target_repo),
            f"Invalid --target-repo '{target_repo}', expected owner/name",
        )

    if source_branch is None:
        source_branch = Ensure.not_none(
            ctx.git.get_current_branch(repo_root),
            "HEAD is detached; pass --head to choose a branch",
        )

    if body is None:
        body = service.get_pull_request_template(repo_root) or ""

    user_output(f"Pushing {click.style(source_branch, fg='cyan')} to {remote.name}...")
    with exit_on_error():
        pr = service.create_pull_request(
            repo_root,
            source_repo,
            target,
            source_branch,
            target_branch,
            title,
            body,
        )

    user_output(click.style(f"✅ Created PR #{pr.number}", fg="green"))
    machine_output(pr.url)
