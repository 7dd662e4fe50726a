"""Remote URL parsing — turn a git remote into host and repository path.

Pure functions, no infrastructure dependencies. Accepts both URI-style
remotes (``https://host/owner/repo.git``, ``ssh://git@host:22/owner/repo``)
and SCP-style ones (``git@host:owner/repo.git``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

SYNTHETIC_SCHEME = "ssh"

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


@dataclass(frozen=True)
class RemoteURL:
    """Structured view of a repository remote address."""

    scheme: str
    host: str
    path: str
    port: int | None = None

    @property
    def netloc(self) -> str:
        """Host with the port folded in, when there is one."""
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"

    @property
    def is_web(self) -> bool:
        return self.scheme in ("http", "https")


def parse_remote(raw: str | None) -> RemoteURL | None:
    """Parse a raw remote address into a :class:`RemoteURL`.

    Strings without a ``scheme://`` prefix get a synthetic ``ssh://`` so
    the generic URL parser can handle them. When the parsed authority
    still carries a ``host:rest`` pair, *rest* is either a port (all
    digits, explicit scheme) or the leading part of an SCP-style path.
    An empty *rest* is accepted when an absolute path follows it, as in
    ``git@host:/srv/git/team/project.git``.

    Returns None for empty or unparsable input.
    """
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None

    explicit_scheme = _SCHEME_PATTERN.match(raw) is not None
    candidate = raw if explicit_scheme else f"{SYNTHETIC_SCHEME}://{raw}"

    try:
        parts = urlsplit(candidate)
    except ValueError:
        return None

    # userinfo never matters for the web URL
    authority = parts.netloc.rpartition("@")[2]
    path = parts.path
    port: int | None = None

    if authority.startswith("["):
        return None

    host, sep, rest = authority.partition(":")
    if sep:
        if explicit_scheme and rest.isdigit():
            port = int(rest)
        elif rest:
            path = f"/{rest}{path}" if path else f"/{rest}"
        elif not explicit_scheme and not path:
            return None

    if not host:
        return None

    return RemoteURL(
        scheme=parts.scheme.lower(),
        host=host.lower(),
        path=path,
        port=port,
    )


def owner_and_repo(path: str) -> tuple[str, str] | None:
    """Return the last two path segments as ``(owner, repo)``.

    A trailing ``.git`` and surrounding slashes are ignored. Nested group
    paths keep only the final two segments (``group/sub/repo`` gives
    ``("sub", "repo")``). Returns None with fewer than two segments.
    """
    trimmed = path.strip("/")
    if trimmed.endswith(".git"):
        trimmed = trimmed[: -len(".git")]
    segments = [segment for segment in trimmed.split("/") if segment]
    if len(segments) < 2:
        return None
    return segments[-2], segments[-1]
