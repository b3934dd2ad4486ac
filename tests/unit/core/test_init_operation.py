"""Tests for setup.py generation."""

from pathlib import Path

import pytest

from dmenv.core.errors import SetupPyAlreadyExists
from dmenv.core.operations.init import InitOptions, init, render_setup_py


def test_render_setup_py_with_author() -> None:
    rendered = render_setup_py(
        InitOptions(name="demo", version="0.2.0", author="Jane Doe", setup_cfg=True)
    )

    assert 'name="demo"' in rendered
    assert 'version="0.2.0"' in rendered
    assert 'author="Jane Doe"' in rendered
    assert '"dev": [' in rendered
    assert '"prod": []' in rendered


def test_render_setup_py_without_author() -> None:
    rendered = render_setup_py(InitOptions(name="demo", version="0.1.0", author=None, setup_cfg=True))

    assert "author" not in rendered
    assert "<" not in rendered


def test_init_writes_setup_py_and_setup_cfg(tmp_path: Path) -> None:
    init(tmp_path, InitOptions(name="demo", version="0.1.0", author=None, setup_cfg=True))

    assert (tmp_path / "setup.py").exists()
    assert "[flake8]" in (tmp_path / "setup.cfg").read_text(encoding="utf-8")


def test_init_keeps_existing_setup_cfg(tmp_path: Path) -> None:
    (tmp_path / "setup.cfg").write_text("[metadata]\n", encoding="utf-8")

    init(tmp_path, InitOptions(name="demo", version="0.1.0", author=None, setup_cfg=True))

    assert (tmp_path / "setup.cfg").read_text(encoding="utf-8") == "[metadata]\n"


def test_init_refuses_to_overwrite_setup_py(tmp_path: Path) -> None:
    (tmp_path / "setup.py").write_text("# mine\n", encoding="utf-8")

    with pytest.raises(SetupPyAlreadyExists):
        init(tmp_path, InitOptions(name="demo", version="0.1.0", author=None, setup_cfg=True))

    assert (tmp_path / "setup.py").read_text(encoding="utf-8") == "# mine\n"
