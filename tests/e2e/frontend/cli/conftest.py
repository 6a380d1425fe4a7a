"""Fixtures for end-to-end CLI logging tests.

Provides a test-only `log-demo` command that logs at every level on a project
logger and on a third-party logger, plus fixtures to register it on the
top-level `jsonesc` group and to run inside an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from jsonesc.entrypoints.cli.main import jsonesc

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log one message per level on 'jsonesc.demo' and a few on 'some.thirdparty'."""
    logger = logging.getLogger("jsonesc.demo")
    logger.debug("demo debug message")
    logger.info("demo info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    third_party = logging.getLogger("some.thirdparty")
    third_party.debug("third-party debug message")
    third_party.info("third-party info message")
    third_party.warning("third-party warning message")
    logger.debug("demo trailing debug message")


def _unregister(group: click.Group, name: str) -> None:
    """Remove a command from a group, including Click-Extra's section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register `log-demo` on the `jsonesc` group for the duration of a test."""
    jsonesc.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(jsonesc, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
