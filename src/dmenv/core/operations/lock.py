"""Read, merge and write lock files."""

from pathlib import Path

from dmenv.cli.output import print_info_2
from dmenv.core.dependencies import FrozenDependency
from dmenv.core.errors import MissingLock
from dmenv.core.lock import Lock, LockOptions, Metadata


def read_lock(lock_path: Path) -> Lock:
    return Lock.from_string(lock_path.read_text(encoding="utf-8"))


def write_lock(lock_path: Path, lock: Lock, metadata: Metadata) -> None:
    lock_path.write_text(lock.render(metadata), encoding="utf-8")


def lock_dependencies(
    lock_path: Path,
    frozen_deps: list[FrozenDependency],
    options: LockOptions,
    metadata: Metadata,
) -> None:
    """Merge frozen dependencies into the lock file, creating it if needed."""
    lock = read_lock(lock_path) if lock_path.exists() else Lock(lines=())
    updated = lock.update(frozen_deps, options)
    write_lock(lock_path, updated, metadata)
    print_info_2(f"Requirements written to {lock_path}")


def bump_in_lock(
    lock_path: Path, name: str, version: str, git: bool, metadata: Metadata
) -> bool:
    """Change the version (or git ref) of one dependency in the lock.

    Returns:
        True if the lock file was rewritten, False if it already matched

    Raises:
        MissingLock: If the lock file does not exist
        DependencyNotFound: If name is not in the lock
    """
    if not lock_path.exists():
        raise MissingLock(lock_path)
    lock = read_lock(lock_path)
    bumped = lock.git_bump(name, version) if git else lock.bump(name, version)
    if bumped == lock:
        print_info_2("Nothing to do")
        return False
    write_lock(lock_path, bumped, metadata)
    print_info_2(f"Bumped {name} to {version} in {lock_path.name}")
    return True
