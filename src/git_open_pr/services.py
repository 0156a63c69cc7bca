from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from .errors import InvalidServiceConfigError, UnsupportedServiceError
from .remote_url import RepoInformation


class ProviderKind(Enum):
    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"

    @classmethod
    def from_name(cls, name: str) -> "ProviderKind":
        return cls(name.strip().lower())

    def pull_request_url(
        self, domain: str, info: RepoInformation, branch: str
    ) -> str:
        base = f"https://{domain}/{info.owner}/{info.repository}"

        if self is ProviderKind.GITHUB:
            return f"{base}/compare/{branch}?expand=1"

        if self is ProviderKind.GITLAB:
            return f"{base}/merge_requests/new?merge_request[source_branch]={branch}"

        return f"{base}/pull-requests/new?source={branch}&t=1"


@dataclass(frozen=True)
class ServiceRegistration:
    kind: ProviderKind
    domain: str


DEFAULT_SERVICES: dict[str, ServiceRegistration] = {
    "github.com": ServiceRegistration(ProviderKind.GITHUB, "github.com"),
    "gitlab.com": ServiceRegistration(ProviderKind.GITLAB, "gitlab.com"),
    "bitbucket.org": ServiceRegistration(ProviderKind.BITBUCKET, "bitbucket.org"),
}


@dataclass(frozen=True)
class ServiceRegistry:
    """Built-in services plus user overrides of the form ``host -> "provider:domain"``.

    Overrides are kept as written and only validated when a lookup hits them,
    so a broken entry for one host never affects another.
    """

    overrides: Mapping[str, str] = field(default_factory=dict)
    defaults: Mapping[str, ServiceRegistration] = field(
        default_factory=lambda: dict(DEFAULT_SERVICES)
    )

    def lookup(self, host: str) -> ServiceRegistration:
        if host in self.overrides:
            return parse_service_override(host, self.overrides[host])

        if host in self.defaults:
            return self.defaults[host]

        raise UnsupportedServiceError(host)


def parse_service_override(host: str, value: str) -> ServiceRegistration:
    provider_name, separator, domain = value.partition(":")
    if not separator:
        raise InvalidServiceConfigError(host, value, "expected provider:domain")

    try:
        kind = ProviderKind.from_name(provider_name)
    except ValueError:
        raise InvalidServiceConfigError(
            host, value, f"unknown provider {provider_name.strip()!r}"
        ) from None

    domain = domain.strip()
    if not domain:
        raise InvalidServiceConfigError(host, value, "empty domain")

    return ServiceRegistration(kind, domain)


def resolve_service(host: str, registry: ServiceRegistry) -> ServiceRegistration:
    return registry.lookup(host)


def build_pull_request_url(
    kind: ProviderKind, domain: str, info: RepoInformation, branch: str
) -> str:
    return kind.pull_request_url(domain, info, branch)
