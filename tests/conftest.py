"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def ethernet_intf_id():
    """Ethernet3/1/2: slot 3, module 1, port 2."""
    return 0x000C0202


@pytest.fixture
def runner():
    """Provide a click CliRunner for invoking the CLI."""
    return CliRunner()
