"""Parsing of `pip freeze` output and lock file lines."""

import re
from dataclasses import dataclass

from dmenv.core.errors import InvalidDependency

_NAME_SEPARATORS = re.compile(r"[-_.]+")


def normalize_name(name: str) -> str:
    """Normalize a distribution name so that Foo_Bar and foo-bar compare equal."""
    return _NAME_SEPARATORS.sub("-", name).lower()


@dataclass(frozen=True)
class SimpleLock:
    """A `name==version` line, optionally restricted by a marker."""

    name: str
    version: str
    marker: str | None = None

    def render(self) -> str:
        return _with_marker(f"{self.name}=={self.version}", self.marker)


@dataclass(frozen=True)
class GitLock:
    """A `name @ git+url@ref` line, optionally restricted by a marker."""

    name: str
    url: str
    ref: str
    marker: str | None = None

    def render(self) -> str:
        return _with_marker(f"{self.name} @ {self.url}@{self.ref}", self.marker)


@dataclass(frozen=True)
class RawLine:
    """Any line dmenv does not manage (comments, pip options)."""

    text: str

    def render(self) -> str:
        return self.text


type LockLine = SimpleLock | GitLock | RawLine


@dataclass(frozen=True)
class FrozenDependency:
    """One dependency as reported by `pip freeze`.

    Exactly one of version or (git_url, git_ref) is set.
    """

    name: str
    version: str | None = None
    git_url: str | None = None
    git_ref: str | None = None

    @staticmethod
    def from_string(line: str) -> "FrozenDependency":
        spec = line.strip()
        if " @ " in spec:
            name, url = (part.strip() for part in spec.split(" @ ", 1))
            git_url, git_ref = _split_git_url(spec, url)
            return FrozenDependency(name=_check_name(spec, name), git_url=git_url, git_ref=git_ref)

        if "==" in spec:
            name, version = (part.strip() for part in spec.split("==", 1))
            if not version:
                raise InvalidDependency(spec, "missing version")
            return FrozenDependency(name=_check_name(spec, name), version=version)

        raise InvalidDependency(spec, "expected 'name==version' or 'name @ git+url@ref'")

    def to_lock(self, marker: str | None) -> SimpleLock | GitLock:
        if self.version is not None:
            return SimpleLock(name=self.name, version=self.version, marker=marker)
        assert self.git_url is not None and self.git_ref is not None
        return GitLock(name=self.name, url=self.git_url, ref=self.git_ref, marker=marker)


def parse_lock_line(line: str) -> LockLine:
    """Parse one line of a lock file."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or stripped.startswith("-"):
        return RawLine(text=stripped)

    spec, _, marker_part = stripped.partition(";")
    marker = marker_part.strip() or None
    frozen = FrozenDependency.from_string(spec)
    return frozen.to_lock(marker)


def _with_marker(spec: str, marker: str | None) -> str:
    if marker is None:
        return spec
    return f"{spec}; {marker}"


def _check_name(line: str, name: str) -> str:
    if not name or " " in name:
        raise InvalidDependency(line, "invalid name")
    return name


def _split_git_url(line: str, url: str) -> tuple[str, str]:
    if not url.startswith("git+"):
        raise InvalidDependency(line, "only git URLs are supported")
    # The ref starts at the first '@' of the path, so user@host is skipped
    # and branch names such as release/1.0 are kept whole
    scheme_end = url.find("://")
    path_start = url.find("/", scheme_end + 3) if scheme_end != -1 else -1
    at = url.find("@", path_start) if path_start != -1 else -1
    if at == -1 or at == len(url) - 1:
        raise InvalidDependency(line, "missing git ref")
    return url[:at], url[at + 1 :]
