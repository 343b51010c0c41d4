"""Tests for the tenantgate CLI."""

import pytest
from fastapi import FastAPI
from typer.testing import CliRunner

from tenantgate import __version__
from tenantgate.cli import app as cli
from tenantgate.commands.seed import seed_demo
from tenantgate.config import get_settings


runner = CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    """Run commands without admin credentials in the environment."""
    monkeypatch.delenv("ADMIN_EMAIL", raising=False)
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestVersion:
    def test_version_flag(self) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestResolveHostCommand:
    """Tests for tenantgate resolve-host."""

    def test_localhost_subdomain(self) -> None:
        result = runner.invoke(cli, ["resolve-host", "acme.localhost:3001"])

        assert result.exit_code == 0
        assert "acme" in result.stdout

    def test_root_domain_has_no_tenant(self) -> None:
        result = runner.invoke(
            cli, ["resolve-host", "shop.test", "--root-domain", "shop.test"]
        )

        assert result.exit_code == 0
        assert "no tenant" in result.stdout

    def test_custom_root_domain(self) -> None:
        result = runner.invoke(
            cli, ["resolve-host", "globex.shop.test", "--root-domain", "shop.test"]
        )

        assert result.exit_code == 0
        assert "globex" in result.stdout

    def test_falls_back_to_url(self) -> None:
        result = runner.invoke(
            cli, ["resolve-host", "", "--url", "http://initech.localhost:3001/"]
        )

        assert result.exit_code == 0
        assert "initech" in result.stdout


class TestInitAdminCommand:
    """Tests for tenantgate init-admin."""

    def test_requires_credentials(self, clean_env) -> None:
        result = runner.invoke(cli, ["init-admin"])

        assert result.exit_code == 1
        assert "required" in result.stdout


class TestSeedCommand:
    """Tests for tenantgate seed."""

    def test_unknown_scenario(self) -> None:
        result = runner.invoke(cli, ["seed", "--scenario", "nope"])

        assert result.exit_code == 1
        assert "Unknown scenario" in result.stdout

    async def test_seed_demo_is_idempotent(self, app: FastAPI) -> None:
        database = app.state.database

        first = await seed_demo(database)
        second = await seed_demo(database)

        assert [(name, slug) for name, slug, _ in first] == [
            ("Demo Company", "demo-company"),
            ("Test Corp", "test-corp"),
        ]
        assert all(created for _, _, created in first)
        assert not any(created for _, _, created in second)
