from ntpath import basename
from re import sub
from shlex import split
from subprocess import CalledProcessError, DEVNULL, run
from sys import platform

from .errors import OpenLinkError

LINK_PLACEHOLDER = "{{link}}"


def default_open_link_command() -> str:
    if platform == "darwin":
        return "open {{link}}"
    if platform == "win32":
        return 'cmd /c start "" {{link}}'
    return "xdg-open {{link}}"


def build_open_link_args(command_template: str, url: str) -> list[str]:
    args = split(command_template)
    if args and runs_through_cmd(args[0]):
        # cmd.exe re-parses the command line, so '&' would end the command
        url = sub(r"([&|<>^])", r"^\1", url)

    args = [part.replace(LINK_PLACEHOLDER, url) for part in args]
    if LINK_PLACEHOLDER not in command_template:
        args.append(url)
    return args


def runs_through_cmd(program: str) -> bool:
    return platform == "win32" and basename(program).lower() in ("cmd", "cmd.exe")


def open_link(url: str, command_template: str = "") -> None:
    args = build_open_link_args(command_template or default_open_link_command(), url)
    try:
        # No pipes: a browser started by the opener would keep them open.
        run(
            args,
            stdin=DEVNULL,
            stdout=DEVNULL,
            stderr=DEVNULL,
            check=True,
            start_new_session=True,
        )
    except CalledProcessError as error:
        raise OpenLinkError(url, f"{args[0]}: exit status {error.returncode}") from error
    except OSError as error:
        raise OpenLinkError(url, str(error)) from error
