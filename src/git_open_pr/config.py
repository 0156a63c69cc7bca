from dataclasses import dataclass, field
from os import environ as os_environ
from typing import Iterable, Mapping, Optional

from .errors import InvalidServiceConfigError
from .open_link import default_open_link_command

SERVICES_VARIABLE = "GITOPENPR_SERVICES"
OPEN_LINK_COMMAND_VARIABLE = "GITOPENPR_OPEN_LINK_COMMAND"


@dataclass
class Settings:
    services: dict[str, str] = field(default_factory=dict)
    open_link_command: str = field(default_factory=default_open_link_command)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    if environ is None:
        environ = os_environ

    settings = Settings()
    settings.services = parse_service_entries(
        (environ.get(SERVICES_VARIABLE) or "").split(",")
    )

    open_link_command = (environ.get(OPEN_LINK_COMMAND_VARIABLE) or "").strip()
    if open_link_command:
        settings.open_link_command = open_link_command

    return settings


def parse_service_entries(entries: Iterable[str]) -> dict[str, str]:
    """Parse ``host=provider:domain`` entries; blank entries are skipped.

    Only the ``host=`` part is checked here. The value is validated when a
    remote on that host is resolved.
    """
    services: dict[str, str] = {}
    for entry in entries:
        entry = entry.strip()
        if not entry:
            continue
        host, separator, value = entry.partition("=")
        host = host.strip()
        if not separator or not host:
            raise InvalidServiceConfigError("", entry, "expected host=provider:domain")
        services[host] = value.strip()
    return services
