"""Shared test fixtures for ipv4calc."""

import pytest


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run the test from an empty directory so no ipv4calc.toml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
