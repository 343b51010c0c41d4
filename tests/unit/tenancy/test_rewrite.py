"""Tests for tenant path rewriting."""

import pytest

from tenantgate.core.tenancy import rewrite_path


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/", "/tenant/acme"),
        ("", "/tenant/acme"),
        ("/dashboard", "/tenant/acme/dashboard"),
        ("/settings/billing", "/tenant/acme/settings/billing"),
    ],
)
def test_rewrite_path(path: str, expected: str):
    assert rewrite_path(path, "acme") == expected
