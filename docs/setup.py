from setuptools import setup

setup(
    name="dmenv-docs",
    version="0.1.0",
    install_requires=[],
    extras_require={
        "dev": ["mkdocs"],
        "prod": [],
    },
)
