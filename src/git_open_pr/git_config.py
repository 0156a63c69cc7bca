from configparser import Error as ConfigParserError

from git import GitConfigParser, InvalidGitRepositoryError, NoSuchPathError, Repo
from git.config import get_config_path

from .errors import ConfigLookupError


def get_local_git_config(key: str, path: str = ".") -> str:
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as error:
        raise ConfigLookupError(key, f"{path} is not a Git repository") from error

    with repo.config_reader("repository") as reader:
        return read_value(reader, key)


def get_global_git_config(key: str) -> str:
    # Like git, read $XDG_CONFIG_HOME/git/config first and let ~/.gitconfig override it.
    config_paths = [get_config_path("user"), get_config_path("global")]
    with GitConfigParser(config_paths, read_only=True) as reader:
        return read_value(reader, key)


def read_value(reader: GitConfigParser, key: str) -> str:
    section, option = split_key(key)
    try:
        value = reader.get_value(section, option, default="")
    except ConfigParserError as error:
        raise ConfigLookupError(key, str(error)) from error
    return str(value)


def split_key(key: str) -> tuple[str, str]:
    """Turn ``remote.origin.url`` into the ``('remote "origin"', 'url')`` pair GitPython expects."""
    name, _, option = key.rpartition(".")
    section, _, subsection = name.partition(".")
    if subsection:
        section = f'{section} "{subsection}"'
    return section, option
