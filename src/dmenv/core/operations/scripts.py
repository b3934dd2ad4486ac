"""Expose the project's console scripts outside of the virtualenv.

Used in production: after `dmenv --production install`, the scripts declared
in setup.py are made available in the user binaries directory so they can
be run without activating the virtualenv.
"""

import configparser
import sys
from pathlib import Path

from dmenv.cli.output import print_info_1, print_info_2, print_warning
from dmenv.core.errors import DmenvError


def user_bin_dir() -> Path:
    return Path.home() / ".local" / "bin"


def find_entry_points(project_path: Path) -> Path:
    """Locate entry_points.txt written by `setup.py develop`."""
    candidates = sorted(project_path.glob("*.egg-info/entry_points.txt"))
    candidates += sorted(project_path.glob("src/*.egg-info/entry_points.txt"))
    if not candidates:
        raise DmenvError(
            f"No entry_points.txt found in {project_path}. Please run `dmenv install` first"
        )
    return candidates[0]


def read_console_scripts(entry_points: Path) -> list[str]:
    parser = configparser.ConfigParser()
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    parser.read(entry_points, encoding="utf-8")
    if not parser.has_section("console_scripts"):
        return []
    return list(parser["console_scripts"])


def create(project_path: Path, bin_path: Path, dest_dir: Path, *, force: bool) -> list[Path]:
    """Link every console script from bin_path into dest_dir.

    Args:
        project_path: Project containing the *.egg-info directory
        bin_path: Binaries directory of the virtualenv
        dest_dir: Where to expose the scripts (created if needed)
        force: Overwrite existing files in dest_dir

    Returns:
        Paths of the scripts created
    """
    names = read_console_scripts(find_entry_points(project_path))
    print_info_1(f"Processing {len(names)} script(s)")
    dest_dir.mkdir(parents=True, exist_ok=True)

    created: list[Path] = []
    for name in names:
        if sys.platform == "win32":
            src = bin_path / f"{name}.exe"
            dest = dest_dir / f"{name}.bat"
        else:
            src = bin_path / name
            dest = dest_dir / name

        if not src.exists():
            print_warning(f"{src} does not exist, skipping")
            continue
        if dest.exists() or dest.is_symlink():
            if not force:
                print_warning(f"{dest} already exists, skipping (use --force to overwrite)")
                continue
            dest.unlink()

        if sys.platform == "win32":
            dest.write_text(f'@echo off\r\n"{src}" %*\r\n', encoding="utf-8")
        else:
            dest.symlink_to(src)
        print_info_2(f"Created {dest}")
        created.append(dest)
    return created
