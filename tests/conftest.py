"""Pytest configuration and shared fixtures."""

import os
import stat
import textwrap

import pytest
from click.testing import CliRunner

from wla.cli import cli


@pytest.fixture(autouse=True)
def clean_wla_env(monkeypatch):
    """Keep the developer's WLA_* settings out of the tests."""
    monkeypatch.delenv("WLA_TARGET", raising=False)
    monkeypatch.delenv("WLA_DEBUG", raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["src", "-R"])  # exit_code, output, etc.
    """

    def _invoke(args):
        return cli_runner.invoke(cli, args)

    return _invoke


class FakePopen:
    """Stand-in for subprocess.Popen that records the creation call."""

    calls = []
    returncode_to_report = 0
    error = None

    def __init__(self, args, **kwargs):
        if FakePopen.error is not None:
            raise FakePopen.error
        self.args = args
        self.kwargs = kwargs
        self.returncode = None
        self.released = False
        FakePopen.calls.append(self)

    def wait(self, timeout=None):
        self.returncode = FakePopen.returncode_to_report
        return self.returncode

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.released = True


@pytest.fixture
def fake_popen(monkeypatch):
    """Replace subprocess.Popen inside wla with FakePopen."""
    FakePopen.calls = []
    FakePopen.returncode_to_report = 0
    FakePopen.error = None
    monkeypatch.setattr("wla.process_utils.subprocess.Popen", FakePopen)
    return FakePopen


@pytest.fixture
def stub_target(tmp_path):
    """Create an executable shell script standing in for wls.

    Usage:
        path = stub_target('printf "%s\\n" "$@"', exit_code=42)
    """
    if os.name == "nt":
        pytest.skip("stub targets are POSIX shell scripts")

    def _make(body="", exit_code=0, name="wls-stub"):
        script = tmp_path / name
        script.write_text(
            "#!/bin/sh\n" + textwrap.dedent(body) + f"\nexit {exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    return _make
