from typing import Callable, Mapping, Optional

from .errors import MissingRemoteError
from .remote_url import extract_host, parse_repo_information
from .services import ServiceRegistry, build_pull_request_url, resolve_service

REMOTE_URL_KEY = "remote.origin.url"

GitConfigLookup = Callable[[str], str]
LinkOpener = Callable[[str], None]


class PullRequest:
    """Opens the "new pull request" page for a branch of the origin remote.

    Git config lookups and the link opener are passed in, so the class never
    touches the repository or spawns processes on its own.
    """

    def __init__(
        self,
        get_local_git_config: GitConfigLookup,
        get_global_git_config: GitConfigLookup,
        open_link: LinkOpener,
        services: Optional[Mapping[str, str]] = None,
    ):
        self.get_local_git_config = get_local_git_config
        self.get_global_git_config = get_global_git_config
        self.open_link = open_link
        self.services = dict(services or {})

    def create(self, branch: str) -> str:
        pull_request_url = self.url(branch)
        self.open_link(pull_request_url)
        return pull_request_url

    def url(self, branch: str) -> str:
        remote_url = self.__get_remote_url()
        repo_info = parse_repo_information(remote_url)

        registry = ServiceRegistry(overrides=self.services)
        service = resolve_service(extract_host(remote_url), registry)

        return build_pull_request_url(service.kind, service.domain, repo_info, branch)

    def __get_remote_url(self) -> str:
        remote_url = self.get_local_git_config(REMOTE_URL_KEY).strip()
        if not remote_url:
            remote_url = self.get_global_git_config(REMOTE_URL_KEY).strip()
        if not remote_url:
            raise MissingRemoteError(REMOTE_URL_KEY)
        return remote_url
