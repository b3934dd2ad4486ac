"""Lock file model.

A lock file is a pip requirements file generated by `dmenv lock`:

    # Generated with dmenv 0.20.0, python 3.11.4, on linux
    --index-url https://pypi.example.com/simple
    attrs==23.1.0
    colorama==0.4.6; sys_platform == "win32"
    mylib @ git+https://github.com/example/mylib@4f3c2a1

Lines with a marker describe dependencies for another platform or
interpreter: they survive a re-lock even when `pip freeze` does not report
them. Lines dmenv does not understand (comments, pip options) are kept
as-is at the top of the file. The header is regenerated on every write.
"""

import re
from dataclasses import dataclass, replace

from dmenv.core.dependencies import (
    FrozenDependency,
    GitLock,
    LockLine,
    RawLine,
    SimpleLock,
    normalize_name,
    parse_lock_line,
)
from dmenv.core.errors import DependencyNotFound, InvalidLockOption

HEADER_PREFIX = "# Generated with dmenv"

_PYTHON_VERSION_OPTION = re.compile(r"^(<=|>=|==|!=|~=|<|>)?\s*([0-9][0-9.*]*)$")
_SYS_PLATFORM_OPTION = re.compile(r"^(==|!=)?\s*([A-Za-z0-9_]+)$")


@dataclass(frozen=True)
class Metadata:
    dmenv_version: str
    python_version: str
    python_platform: str

    def header(self) -> str:
        return (
            f"{HEADER_PREFIX} {self.dmenv_version}, "
            f"python {self.python_version}, on {self.python_platform}"
        )


@dataclass(frozen=True)
class LockOptions:
    """Marker applied to dependencies added by `dmenv lock`."""

    python_version: str | None = None
    sys_platform: str | None = None

    def marker(self) -> str | None:
        parts: list[str] = []
        if self.python_version is not None:
            match = _PYTHON_VERSION_OPTION.match(self.python_version.strip())
            if match is None:
                raise InvalidLockOption(
                    f"Invalid python version: '{self.python_version}' (expected e.g. '< 3.8')"
                )
            operator = match.group(1) or "=="
            parts.append(f'python_version {operator} "{match.group(2)}"')
        if self.sys_platform is not None:
            match = _SYS_PLATFORM_OPTION.match(self.sys_platform.strip())
            if match is None:
                raise InvalidLockOption(
                    f"Invalid sys platform: '{self.sys_platform}' (expected e.g. 'win32')"
                )
            operator = match.group(1) or "=="
            parts.append(f'sys_platform {operator} "{match.group(2)}"')
        if not parts:
            return None
        return " and ".join(parts)


@dataclass(frozen=True)
class Lock:
    """Immutable lock contents. Every operation returns a new Lock."""

    lines: tuple[LockLine, ...]

    @staticmethod
    def from_string(contents: str) -> "Lock":
        lines: list[LockLine] = []
        for text in contents.splitlines():
            if text.startswith(HEADER_PREFIX):
                continue
            line = parse_lock_line(text)
            if isinstance(line, RawLine) and not line.text:
                continue
            lines.append(line)
        return Lock(lines=tuple(lines))

    @property
    def dependencies(self) -> list[SimpleLock | GitLock]:
        return [line for line in self.lines if not isinstance(line, RawLine)]

    def update(self, frozen: list[FrozenDependency], options: LockOptions) -> "Lock":
        """Merge the output of `pip freeze` into the lock.

        Args:
            frozen: Dependencies currently installed in the virtualenv
            options: Marker to apply to dependencies not yet in the lock

        Returns:
            New Lock with raw lines first, then dependencies sorted by name
        """
        new_marker = options.marker()
        frozen_by_name = {normalize_name(dep.name): dep for dep in frozen}
        raw: list[LockLine] = []
        deps: list[SimpleLock | GitLock] = []
        seen: set[str] = set()

        for line in self.lines:
            if isinstance(line, RawLine):
                raw.append(line)
                continue
            key = normalize_name(line.name)
            dep = frozen_by_name.get(key)
            if dep is None:
                # Not installed here: only keep it if it targets another environment
                if line.marker is not None:
                    deps.append(line)
                continue
            seen.add(key)
            deps.append(dep.to_lock(line.marker))

        for key, dep in frozen_by_name.items():
            if key not in seen:
                deps.append(dep.to_lock(new_marker))

        deps.sort(key=lambda dep: normalize_name(dep.name))
        return Lock(lines=(*raw, *deps))

    def bump(self, name: str, version: str) -> "Lock":
        """Pin every `name==...` line to version.

        Raises:
            DependencyNotFound: If the lock has no simple line for name
        """
        key = normalize_name(name)
        found = False
        lines: list[LockLine] = []
        for line in self.lines:
            if isinstance(line, SimpleLock) and normalize_name(line.name) == key:
                found = True
                line = replace(line, version=version)
            lines.append(line)
        if not found:
            raise DependencyNotFound(name)
        return Lock(lines=tuple(lines))

    def git_bump(self, name: str, ref: str) -> "Lock":
        """Point every `name @ git+...` line to ref.

        Raises:
            DependencyNotFound: If the lock has no git line for name
        """
        key = normalize_name(name)
        found = False
        lines: list[LockLine] = []
        for line in self.lines:
            if isinstance(line, GitLock) and normalize_name(line.name) == key:
                found = True
                line = replace(line, ref=ref)
            lines.append(line)
        if not found:
            raise DependencyNotFound(name)
        return Lock(lines=tuple(lines))

    def render(self, metadata: Metadata) -> str:
        rendered = [metadata.header()]
        rendered.extend(line.render() for line in self.lines)
        return "\n".join(rendered) + "\n"
