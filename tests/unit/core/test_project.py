"""Tests for Project operations against a fake process runner."""

import sys
from pathlib import Path

import pytest

from dmenv import __version__
from dmenv.core.errors import (
    DependencyNotFound,
    InvalidLockOption,
    MissingLock,
    MissingSetupPy,
    PipUpgradeFailed,
    VenvCreationFailed,
    VenvNotFound,
)
from dmenv.core.lock import LockOptions
from dmenv.core.operations.init import InitOptions
from tests.fakes.process_runner import FakeProcessRunner
from tests.test_utils.project_helpers import (
    FREEZE_ARGS,
    UPGRADE_PIP_ARGS,
    build_project,
    make_project,
    make_venv,
)

HEADER = f"# Generated with dmenv {__version__}, python 3.11.4, on linux"


def venv_path(project_path: Path, kind: str = "dev") -> Path:
    return project_path / ".venv" / kind / "3.11.4"


class TestInstall:
    def test_requires_lock(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        runner = FakeProcessRunner()

        with pytest.raises(MissingLock) as exc_info:
            build_project(project_path, runner).install()

        assert exc_info.value.expected_path == project_path / "requirements.lock"
        assert runner.run_calls == []

    def test_creates_venv_and_installs(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo", lock="attrs==23.1.0\n")
        runner = FakeProcessRunner()

        build_project(project_path, runner).install()

        assert runner.run_args == [
            ["-m", "venv", str(venv_path(project_path))],
            UPGRADE_PIP_ARGS,
            ["-m", "pip", "install", "--requirement", "requirements.lock"],
            ["setup.py", "develop", "--no-deps"],
        ]
        # Everything but the venv creation runs from the project
        assert [cwd for _, cwd in runner.run_calls[1:]] == [project_path] * 3

    def test_without_develop_nor_pip_upgrade(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo", lock="attrs==23.1.0\n")
        runner = FakeProcessRunner()

        build_project(project_path, runner).install(develop=False, upgrade_pip=False)

        assert runner.run_args == [
            ["-m", "venv", str(venv_path(project_path))],
            ["-m", "pip", "install", "--requirement", "requirements.lock"],
        ]

    def test_reuses_existing_venv(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo", lock="attrs==23.1.0\n")
        make_venv(venv_path(project_path))
        runner = FakeProcessRunner()

        build_project(project_path, runner).install(develop=False)

        assert ["-m", "venv", str(venv_path(project_path))] not in runner.run_args

    def test_production_uses_production_lock(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        (project_path / "production.lock").write_text("attrs==23.1.0\n", encoding="utf-8")
        runner = FakeProcessRunner()

        build_project(project_path, runner, production=True).install(develop=False)

        assert runner.run_args[0] == ["-m", "venv", str(venv_path(project_path, "prod"))]
        assert ["-m", "pip", "install", "--requirement", "production.lock"] in runner.run_args

    def test_system_site_packages(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo", lock="attrs==23.1.0\n")
        runner = FakeProcessRunner()

        build_project(project_path, runner, system_site_packages=True).install()

        assert runner.run_args[0] == [
            "-m",
            "venv",
            "--system-site-packages",
            str(venv_path(project_path)),
        ]

    def test_venv_creation_failure(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo", lock="attrs==23.1.0\n")
        runner = FakeProcessRunner(exit_codes={("-m", "venv", str(venv_path(project_path))): 1})

        with pytest.raises(VenvCreationFailed):
            build_project(project_path, runner).install()


class TestLock:
    def test_requires_setup_py(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo", setup_py=False)

        with pytest.raises(MissingSetupPy):
            build_project(project_path, FakeProcessRunner()).lock(LockOptions())

    def test_writes_lock_file(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        freeze = "attrs==23.1.0\npkg-resources==0.0.0\n## FIXME: could not find svn URL\nZipp==3.16.2\n"
        runner = FakeProcessRunner(outputs={FREEZE_ARGS: freeze})

        build_project(project_path, runner).lock(LockOptions())

        assert runner.run_args == [
            ["-m", "venv", str(venv_path(project_path))],
            UPGRADE_PIP_ARGS,
            ["-m", "pip", "install", "--editable", ".[dev]"],
        ]
        contents = (project_path / "requirements.lock").read_text(encoding="utf-8")
        assert contents == f"{HEADER}\nattrs==23.1.0\nZipp==3.16.2\n"

    def test_merges_with_existing_lock(self, tmp_path: Path) -> None:
        existing = (
            "# Generated with dmenv 0.19.0, python 3.7.3, on linux\n"
            "attrs==19.1.0\n"
            'colorama==0.4.1; sys_platform == "win32"\n'
            "removed==1.0\n"
        )
        project_path = make_project(tmp_path / "demo", lock=existing)
        runner = FakeProcessRunner(outputs={FREEZE_ARGS: "attrs==23.1.0\npytest==7.4.0\n"})

        build_project(project_path, runner).lock(LockOptions(python_version=">= 3.8"))

        contents = (project_path / "requirements.lock").read_text(encoding="utf-8")
        assert contents == (
            f"{HEADER}\n"
            "attrs==23.1.0\n"
            'colorama==0.4.1; sys_platform == "win32"\n'
            'pytest==7.4.0; python_version >= "3.8"\n'
        )

    def test_production(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        runner = FakeProcessRunner(outputs={FREEZE_ARGS: "attrs==23.1.0\n"})

        build_project(project_path, runner, production=True).lock(LockOptions())

        assert ["-m", "pip", "install", "--editable", ".[prod]"] in runner.run_args
        assert (project_path / "production.lock").exists()
        assert not (project_path / "requirements.lock").exists()

    def test_pip_upgrade_failure(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        runner = FakeProcessRunner(exit_codes={tuple(UPGRADE_PIP_ARGS): 1})

        with pytest.raises(PipUpgradeFailed):
            build_project(project_path, runner).lock(LockOptions())

        assert not (project_path / "requirements.lock").exists()

    def test_invalid_options_fail_early(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        runner = FakeProcessRunner()

        with pytest.raises(InvalidLockOption):
            build_project(project_path, runner).lock(LockOptions(python_version="newest"))

        assert runner.run_calls == []


def test_tidy_starts_from_fresh_venv(tmp_path: Path) -> None:
    project_path = make_project(tmp_path / "demo")
    make_venv(venv_path(project_path))
    stale = venv_path(project_path) / "stale-package"
    stale.touch()
    runner = FakeProcessRunner(outputs={FREEZE_ARGS: "attrs==23.1.0\n"})

    build_project(project_path, runner).tidy(LockOptions())

    assert not stale.exists()
    assert runner.run_args[0] == ["-m", "venv", str(venv_path(project_path))]
    assert (project_path / "requirements.lock").exists()


class TestBumpInLock:
    def test_bumps_version(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo", lock="attrs==19.1.0\nzipp==3.0.0\n")

        changed = build_project(project_path, FakeProcessRunner()).bump_in_lock("attrs", "23.1.0")

        assert changed is True
        contents = (project_path / "requirements.lock").read_text(encoding="utf-8")
        assert contents == f"{HEADER}\nattrs==23.1.0\nzipp==3.0.0\n"

    def test_bumps_git_ref(self, tmp_path: Path) -> None:
        lock = "mylib @ git+https://github.com/example/mylib@aaaa\n"
        project_path = make_project(tmp_path / "demo", lock=lock)

        build_project(project_path, FakeProcessRunner()).bump_in_lock("mylib", "v2.0", git=True)

        contents = (project_path / "requirements.lock").read_text(encoding="utf-8")
        assert "mylib @ git+https://github.com/example/mylib@v2.0" in contents

    def test_nothing_to_do(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        project_path = make_project(tmp_path / "demo", lock="attrs==19.1.0\n")

        changed = build_project(project_path, FakeProcessRunner()).bump_in_lock("attrs", "19.1.0")

        assert changed is False
        assert "Nothing to do" in capsys.readouterr().err
        # File left untouched, old header included
        assert (project_path / "requirements.lock").read_text(encoding="utf-8") == "attrs==19.1.0\n"

    def test_missing_dependency(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo", lock="attrs==19.1.0\n")

        with pytest.raises(DependencyNotFound):
            build_project(project_path, FakeProcessRunner()).bump_in_lock("requests", "2.0")

    def test_missing_lock(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")

        with pytest.raises(MissingLock):
            build_project(project_path, FakeProcessRunner()).bump_in_lock("attrs", "1.0")


class TestRun:
    def test_requires_venv(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")

        with pytest.raises(VenvNotFound):
            build_project(project_path, FakeProcessRunner()).run(["pytest"])

    @pytest.mark.skipif(sys.platform == "win32", reason="exec is not used on Windows")
    def test_replaces_process(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        bin_path = make_venv(venv_path(project_path), ("python", "pytest"))
        runner = FakeProcessRunner()

        build_project(project_path, runner).run(["pytest", "-k", "foo"])

        assert runner.exec_calls == [[str(bin_path / "pytest"), "-k", "foo"]]
        assert runner.run_calls == []

    def test_no_exec_returns_exit_code(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        make_venv(venv_path(project_path), ("python", "pytest"))
        runner = FakeProcessRunner(exit_codes={("-k", "foo"): 3})

        returncode = build_project(project_path, runner).run(["pytest", "-k", "foo"], no_exec=True)

        assert returncode == 3
        assert runner.exec_calls == []


class TestShow:
    def test_venv_path(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        project_path = make_project(tmp_path / "demo")

        build_project(project_path, FakeProcessRunner()).show_venv_path()

        assert capsys.readouterr().out.strip() == str(venv_path(project_path))

    def test_bin_path(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        project_path = make_project(tmp_path / "demo")
        bin_path = make_venv(venv_path(project_path))

        build_project(project_path, FakeProcessRunner()).show_venv_bin_path()

        assert capsys.readouterr().out.strip() == str(bin_path)

    def test_bin_path_requires_venv(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")

        with pytest.raises(VenvNotFound):
            build_project(project_path, FakeProcessRunner()).show_venv_bin_path()

    def test_deps_and_outdated(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        make_venv(venv_path(project_path))
        runner = FakeProcessRunner()
        project = build_project(project_path, runner)

        project.show_deps()
        project.show_outdated()

        assert runner.run_args == [
            ["-m", "pip", "list"],
            ["-m", "pip", "list", "--outdated", "--format", "columns"],
        ]


def test_develop_requires_setup_py(tmp_path: Path) -> None:
    project_path = make_project(tmp_path / "demo", setup_py=False)
    make_venv(venv_path(project_path))

    with pytest.raises(MissingSetupPy):
        build_project(project_path, FakeProcessRunner()).develop()


def test_upgrade_pip(tmp_path: Path) -> None:
    project_path = make_project(tmp_path / "demo")
    make_venv(venv_path(project_path))
    runner = FakeProcessRunner()

    build_project(project_path, runner).upgrade_pip()

    assert runner.run_args == [UPGRADE_PIP_ARGS]


class TestClean:
    def test_removes_venv(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        make_venv(venv_path(project_path))

        build_project(project_path, FakeProcessRunner()).clean()

        assert not venv_path(project_path).exists()

    def test_missing_venv_is_a_no_op(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")

        build_project(project_path, FakeProcessRunner()).clean()

        assert not venv_path(project_path).exists()


def test_init_through_project(tmp_path: Path) -> None:
    project_path = make_project(tmp_path / "demo", setup_py=False)
    project = build_project(project_path, FakeProcessRunner())

    project.init(InitOptions(name="demo", version="1.0.0", author=None, setup_cfg=False))

    assert 'version="1.0.0"' in (project_path / "setup.py").read_text(encoding="utf-8")
    assert not (project_path / "setup.cfg").exists()


@pytest.mark.skipif(sys.platform == "win32", reason="uses symlinks")
class TestProcessScripts:
    def test_requires_venv(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")

        with pytest.raises(VenvNotFound):
            build_project(project_path, FakeProcessRunner()).process_scripts(
                dest_dir=tmp_path / "local-bin"
            )

    def test_links_scripts_from_venv(self, tmp_path: Path) -> None:
        project_path = make_project(tmp_path / "demo")
        egg_info = project_path / "demo.egg-info"
        egg_info.mkdir()
        (egg_info / "entry_points.txt").write_text(
            "[console_scripts]\ndemo = demo.cli:main\n", encoding="utf-8"
        )
        bin_path = make_venv(venv_path(project_path), ("python", "demo"))
        dest_dir = tmp_path / "local-bin"

        created = build_project(project_path, FakeProcessRunner()).process_scripts(
            dest_dir=dest_dir
        )

        assert created == [dest_dir / "demo"]
        assert (dest_dir / "demo").resolve() == (bin_path / "demo").resolve()
