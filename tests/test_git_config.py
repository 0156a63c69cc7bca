from pathlib import Path

import pytest
from git import Repo

from git_open_pr.errors import ConfigLookupError
from git_open_pr.git_config import get_global_git_config, get_local_git_config, split_key


def test_split_key_with_subsection():
    assert split_key("remote.origin.url") == ('remote "origin"', "url")


def test_split_key_without_subsection():
    assert split_key("user.name") == ("user", "name")


def test_get_local_git_config_reads_remote_url(tmp_path: Path):
    repo = Repo.init(tmp_path)
    repo.create_remote("origin", "git@github.com:peter/calculator.git")

    assert get_local_git_config("remote.origin.url", str(tmp_path)) == "git@github.com:peter/calculator.git"


def test_get_local_git_config_searches_parent_directories(tmp_path: Path):
    repo = Repo.init(tmp_path)
    repo.create_remote("origin", "git@gitlab.com:peter/calculator.git")
    nested = tmp_path / "src" / "module"
    nested.mkdir(parents=True)

    assert get_local_git_config("remote.origin.url", str(nested)) == "git@gitlab.com:peter/calculator.git"


def test_get_local_git_config_returns_empty_when_unset(tmp_path: Path):
    Repo.init(tmp_path)

    assert get_local_git_config("remote.origin.url", str(tmp_path)) == ""


def test_get_local_git_config_outside_repository(tmp_path: Path):
    with pytest.raises(ConfigLookupError) as error:
        get_local_git_config("remote.origin.url", str(tmp_path / "missing"))
    assert error.value.key == "remote.origin.url"


def test_get_global_git_config_reads_home_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    (tmp_path / ".gitconfig").write_text('[remote "origin"]\n\turl = git@bitbucket.org:johndoe/social_network.git\n')
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_global_git_config("remote.origin.url") == "git@bitbucket.org:johndoe/social_network.git"


def test_get_global_git_config_returns_empty_without_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_global_git_config("remote.origin.url") == ""


def write_xdg_config(config_home: Path, remote_url: str) -> None:
    (config_home / "git").mkdir(parents=True)
    (config_home / "git" / "config").write_text(f'[remote "origin"]\n\turl = {remote_url}\n')


def test_get_global_git_config_reads_xdg_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    write_xdg_config(tmp_path / ".config", "git@gitlab.com:peter/calculator.git")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    assert get_global_git_config("remote.origin.url") == "git@gitlab.com:peter/calculator.git"


def test_get_global_git_config_honours_xdg_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    write_xdg_config(tmp_path / "xdg", "git@github.com:peter/calculator.git")
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert get_global_git_config("remote.origin.url") == "git@github.com:peter/calculator.git"


def test_get_global_git_config_home_config_overrides_xdg_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    write_xdg_config(tmp_path / ".config", "git@gitlab.com:peter/calculator.git")
    (tmp_path / ".gitconfig").write_text('[remote "origin"]\n\turl = git@github.com:peter/calculator.git\n')
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    assert get_global_git_config("remote.origin.url") == "git@github.com:peter/calculator.git"
