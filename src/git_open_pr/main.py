from argparse import ArgumentParser
from functools import partial
from typing import NoReturn, Optional

from dotenv import load_dotenv
from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from .config import load_settings, parse_service_entries
from .errors import GitOpenPrError
from .git_config import get_global_git_config, get_local_git_config
from .open_link import open_link
from .pull_request import PullRequest


version = "0.0.1"
program = "git-open-pr"


def main(argv: Optional[list[str]] = None):
    parser = ArgumentParser(
        prog=program,
        description="Open the page that creates a pull request for the current branch.",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {version}"
    )
    parser.add_argument("-b", "--branch", action="store")
    parser.add_argument(
        "-s",
        "--service",
        action="append",
        default=[],
        metavar="HOST=PROVIDER:DOMAIN",
    )
    parser.add_argument("--open-command", action="store", metavar="TEMPLATE")
    parser.add_argument("-p", "--print", action="store_true", dest="print_only")
    parser.add_argument("-C", dest="path", action="store", default=".")

    args = parser.parse_args(argv)

    load_dotenv()

    try:
        open_pull_request(
            args.path, args.branch, args.service, args.open_command, args.print_only
        )
    except GitOpenPrError as error:
        fail(str(error))


def open_pull_request(
    path: str,
    branch: Optional[str],
    service_entries: list[str],
    open_command: Optional[str],
    print_only: bool,
):
    settings = load_settings()
    settings.services.update(parse_service_entries(service_entries))
    if open_command:
        settings.open_link_command = open_command

    if not branch:
        branch = get_active_branch(path)

    pull_request = PullRequest(
        partial(get_local_git_config, path=path),
        get_global_git_config,
        partial(open_link, command_template=settings.open_link_command),
        settings.services,
    )

    if print_only:
        print(pull_request.url(branch))
        return

    pull_request_url = pull_request.create(branch)
    info(f"Opened pull request page for {branch}\n  🔗 {pull_request_url}")


def get_active_branch(path: str) -> str:
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        fail(f"{path} is not a Git repository.")

    try:
        return repo.active_branch.name
    except TypeError:
        fail("HEAD is detached. Use --branch to name the branch to open.")


def fail(message: str) -> NoReturn:
    raise SystemExit(f"{program} error: {message}")


def info(message: str):
    print(f"{program} info: {message}")