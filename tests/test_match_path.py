"""Tests for pagepath.routing.match_path — router patterns from page paths."""

import pytest

from pagepath.routing.match_path import MatchPath, derive_pattern


class TestDerivePattern:
    def test_named_segment(self) -> None:
        assert derive_pattern("baz/123/[bar]").pattern == "baz/123/:bar"

    def test_named_splat(self) -> None:
        assert derive_pattern("baz/123/[...bar]").pattern == "baz/123/*bar"

    def test_anonymous_splat(self) -> None:
        assert derive_pattern("baz/123/[...]").pattern == "baz/123/*"

    def test_multiple_placeholders_keep_order(self) -> None:
        assert derive_pattern("/products/[id]/[...page]").pattern == "/products/:id/*page"

    def test_placeholder_inside_segment(self) -> None:
        assert derive_pattern("/users/[id].js").pattern == "/users/:id.js"

    def test_has_match(self) -> None:
        assert derive_pattern("/[id]").has_match is True


class TestLiteralPaths:
    @pytest.mark.parametrize("path", ["", "/", "about", "/blog/post-1/", "{Product.foo}/bar"])
    def test_identity_without_brackets(self, path: str) -> None:
        result = derive_pattern(path)
        assert result.has_match is False
        assert result.pattern == path

    def test_match_path_absent_without_brackets(self) -> None:
        assert derive_pattern("{Product.foo}/bar").match_path is None

    def test_match_path_present_with_brackets(self) -> None:
        assert derive_pattern("baz/[bar]").match_path == "baz/:bar"

    def test_unterminated_bracket_passes_through(self) -> None:
        result = derive_pattern("/files/[id")
        assert result.has_match is False
        assert result.pattern == "/files/[id"

    def test_unterminated_after_valid_placeholder(self) -> None:
        result = derive_pattern("/[id]/[rest")
        assert result.has_match is True
        assert result.pattern == "/:id/[rest"


class TestNoValidation:
    def test_any_characters_accepted_as_name(self) -> None:
        assert derive_pattern("/[user-id!]").pattern == "/:user-id!"

    def test_empty_brackets(self) -> None:
        assert derive_pattern("/a/[]").pattern == "/a/:"


class TestPurity:
    def test_rederiving_is_noop(self) -> None:
        first = derive_pattern("/products/[id]/[...page]")
        second = derive_pattern(first.pattern)
        assert second.has_match is False
        assert second.pattern == first.pattern

    def test_same_input_same_result(self) -> None:
        assert derive_pattern("/a/[b]") == derive_pattern("/a/[b]")

    def test_frozen(self) -> None:
        result = derive_pattern("/a/[b]")
        with pytest.raises(AttributeError):
            result.pattern = "/x"  # type: ignore[misc]

    def test_result_type(self) -> None:
        assert derive_pattern("/a") == MatchPath(pattern="/a", has_match=False)
