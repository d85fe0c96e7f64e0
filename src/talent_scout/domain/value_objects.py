"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

from talent_scout.domain.exceptions import InvalidUsernameError

_GITHUB_LOGIN_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})$")


@dataclass(frozen=True, slots=True)
class GitHubLogin:
    """Validated GitHub username.

    Only alphanumerics and hyphens, not starting with a hyphen, at most 39
    characters.  Anything else (``..``, slashes, query characters) is
    rejected before it can reach a request path.
    """

    value: str

    @classmethod
    def from_string(cls, raw: str) -> GitHubLogin:
        """Parse and validate a raw username."""
        login = raw.strip()
        if not _GITHUB_LOGIN_RE.match(login):
            raise InvalidUsernameError(
                f"Invalid GitHub username: '{login}'. "
                "Usernames contain only letters, digits and hyphens."
            )
        return cls(value=login)

    @property
    def path_segment(self) -> str:
        return quote(self.value, safe="")
