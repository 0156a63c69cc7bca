from dataclasses import dataclass
from re import split


@dataclass(frozen=True)
class RepoInformation:
    owner: str
    repository: str


def parse_repo_information(raw_url: str) -> RepoInformation:
    """Extract owner and repository from a git remote URL.

    Handles the scp-like form (``git@host:owner/repo.git``) and the
    scheme-qualified form (``https://user@host/owner/repo.git``). Never raises:
    parts that cannot be found come back as empty strings.
    """
    _, path = split_remote_url(raw_url)
    path = path.rstrip("/").removesuffix(".git")
    segments = [segment for segment in path.split("/") if segment]

    repository = segments[-1] if segments else ""
    owner = segments[-2] if len(segments) > 1 else ""
    return RepoInformation(owner=owner, repository=repository)


def extract_host(raw_url: str) -> str:
    host, _ = split_remote_url(raw_url)
    return host


def split_remote_url(raw_url: str) -> tuple[str, str]:
    url = raw_url.strip()

    if "://" in url:
        url = url.split("://", 1)[1]
        authority, _, path = url.partition("/")
    else:
        authority, *rest = split(r"[:/]", url, maxsplit=1)
        path = rest[0] if rest else ""

    # drop user[:password]@ and :port
    host = split(r"[:/]", authority.rpartition("@")[2], maxsplit=1)[0]
    return host, path
