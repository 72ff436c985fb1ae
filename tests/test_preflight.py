"""Tests for preflight.py module."""

from unittest.mock import MagicMock

import pytest

from secret_sync.preflight import check_readiness, find_wrangler_config
from secret_sync.wrangler import Wrangler


@pytest.fixture
def logged_in():
    wrangler = MagicMock(spec=Wrangler)
    wrangler.is_authenticated.return_value = True
    return wrangler


class TestFindWranglerConfig:
    """Tests for wrangler configuration lookup."""

    @pytest.mark.parametrize("filename", ["wrangler.json", "wrangler.jsonc", "wrangler.toml"])
    def test_supported_files(self, tmp_path, filename):
        """Test every wrangler configuration format is recognised."""
        (tmp_path / filename).write_text("")

        assert find_wrangler_config(tmp_path) == tmp_path / filename

    def test_missing(self, tmp_path):
        """Test a project without wrangler configuration."""
        assert find_wrangler_config(tmp_path) is None


class TestCheckReadiness:
    """Tests for the startup checks."""

    def test_ready(self, project, logged_in):
        """Test a configured project with a logged-in wrangler."""
        readiness = check_readiness(project, logged_in)

        assert readiness.ready is True
        assert readiness.problem is None

    def test_missing_config(self, tmp_path, logged_in):
        """Test a missing wrangler configuration fails before the login check."""
        readiness = check_readiness(tmp_path, logged_in)

        assert readiness.ready is False
        assert "wrangler.json" in readiness.problem
        logged_in.is_authenticated.assert_not_called()

    def test_not_logged_in(self, project, logged_in):
        """Test a logged-out wrangler is reported."""
        logged_in.is_authenticated.return_value = False

        readiness = check_readiness(project, logged_in)

        assert readiness.ready is False
        assert "wrangler login" in readiness.problem
