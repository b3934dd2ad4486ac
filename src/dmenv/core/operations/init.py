"""Generate setup.py and setup.cfg for a new project."""

from dataclasses import dataclass
from pathlib import Path

from dmenv.cli.output import print_info_1, print_info_2
from dmenv.core.errors import SetupPyAlreadyExists

SETUP_PY_TEMPLATE = '''from setuptools import find_packages, setup

setup(
    name="<NAME>",
    version="<VERSION>",
    author="<AUTHOR>",
    packages=find_packages(),
    install_requires=[],
    extras_require={
        # Dependencies for `dmenv install --production`
        "prod": [],
        # Dependencies for development
        "dev": [
            "pytest",
        ],
    },
)
'''

SETUP_CFG_TEMPLATE = """[flake8]
max-line-length = 100

[tool:pytest]
testpaths = tests
"""


@dataclass(frozen=True)
class InitOptions:
    name: str
    version: str
    author: str | None
    setup_cfg: bool


def render_setup_py(options: InitOptions) -> str:
    template = SETUP_PY_TEMPLATE.replace("<NAME>", options.name)
    template = template.replace("<VERSION>", options.version)
    if options.author is None:
        return template.replace('    author="<AUTHOR>",\n', "")
    return template.replace("<AUTHOR>", options.author)


def init(project_path: Path, options: InitOptions) -> None:
    """Write setup.py (and setup.cfg) in project_path.

    Raises:
        SetupPyAlreadyExists: If setup.py is already there
    """
    setup_py = project_path / "setup.py"
    if setup_py.exists():
        raise SetupPyAlreadyExists(setup_py)

    print_info_1(f"Initializing {options.name} {options.version}")
    setup_py.write_text(render_setup_py(options), encoding="utf-8")
    print_info_2("Generated a new setup.py")

    if not options.setup_cfg:
        return
    setup_cfg = project_path / "setup.cfg"
    if setup_cfg.exists():
        print_info_2("setup.cfg already exists, leaving it alone")
        return
    setup_cfg.write_text(SETUP_CFG_TEMPLATE, encoding="utf-8")
    print_info_2("Generated a new setup.cfg")
