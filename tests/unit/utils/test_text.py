"""Tests for slug generation and unique slug resolution."""

import pytest

from tenantgate.core.errors import ConflictError
from tenantgate.core.utils import generate_slug, resolve_unique_slug


class TestGenerateSlug:
    """Tests for generate_slug."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Acme Inc.", "acme-inc"),
            ("Hello! World@2024", "hello-world-2024"),
            ("  Spaced   Out  ", "spaced-out"),
            ("O'Brien & \"Sons\"", "o-brien-sons"),
            ("back`tick", "back-tick"),
            ("Café Münster", "caf-m-nster"),
            ("---dashes---", "dashes"),
            ("UPPER_case", "upper-case"),
        ],
    )
    def test_generates_expected_slug(self, name: str, expected: str):
        assert generate_slug(name) == expected

    def test_returns_empty_for_symbols_only(self):
        """Names with nothing alphanumeric produce an empty slug."""
        assert generate_slug("!!! ***") == ""

    @pytest.mark.parametrize(
        "name",
        ["Acme Inc.", "  weird -- name  ", "x" * 80, "a" * 62 + " b"],
    )
    def test_is_idempotent(self, name: str):
        once = generate_slug(name)
        assert generate_slug(once) == once

    def test_truncates_to_63_characters(self):
        slug = generate_slug("a" * 100)
        assert slug == "a" * 63

    def test_truncation_strips_trailing_hyphen(self):
        """A hyphen left at the cut point is removed."""
        slug = generate_slug("a" * 62 + " b")
        assert slug == "a" * 62
        assert not slug.endswith("-")


class TestResolveUniqueSlug:
    """Tests for resolve_unique_slug."""

    @staticmethod
    def taken(*slugs: str):
        existing = set(slugs)

        async def exists(slug: str) -> bool:
            return slug in existing

        return exists

    async def test_returns_base_when_free(self):
        assert await resolve_unique_slug("foo", self.taken()) == "foo"

    async def test_appends_first_free_counter(self):
        exists = self.taken("foo", "foo-2", "foo-3")
        assert await resolve_unique_slug("foo", exists) == "foo-4"

    async def test_suffixed_candidate_fits_length_limit(self):
        base = "a" * 63
        slug = await resolve_unique_slug(base, self.taken(base))
        assert slug == "a" * 61 + "-2"
        assert len(slug) == 63

    async def test_raises_conflict_when_exhausted(self):
        async def always_taken(slug: str) -> bool:
            return True

        with pytest.raises(ConflictError) as exc_info:
            await resolve_unique_slug("foo", always_taken, max_attempts=3)

        assert exc_info.value.status_code == 409
        assert exc_info.value.details["attempts"] == 3

    async def test_checks_at_most_max_attempts_candidates(self):
        checked: list[str] = []

        async def always_taken(slug: str) -> bool:
            checked.append(slug)
            return True

        with pytest.raises(ConflictError):
            await resolve_unique_slug("foo", always_taken, max_attempts=4)

        assert checked == ["foo", "foo-2", "foo-3", "foo-4"]
