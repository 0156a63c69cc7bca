class GitOpenPrError(Exception):
    pass


class ConfigLookupError(GitOpenPrError):
    def __init__(self, key: str, detail: str):
        super().__init__(f"Could not read git config {key}: {detail}")
        self.key = key
        self.detail = detail


class MissingRemoteError(GitOpenPrError):
    def __init__(self, key: str):
        super().__init__(f"No remote URL configured in {key}.")
        self.key = key


class UnsupportedServiceError(GitOpenPrError):
    def __init__(self, host: str):
        super().__init__(f"Unsupported git service {host!r}.")
        self.host = host


class InvalidServiceConfigError(GitOpenPrError):
    def __init__(self, host: str, value: str, reason: str):
        if host:
            message = f"Invalid service configuration for {host!r}: {value!r} ({reason})."
        else:
            message = f"Invalid service entry {value!r} ({reason})."
        super().__init__(message)
        self.host = host
        self.value = value
        self.reason = reason


class OpenLinkError(GitOpenPrError):
    def __init__(self, url: str, detail: str):
        super().__init__(f"Could not open {url}: {detail}")
        self.url = url
        self.detail = detail
