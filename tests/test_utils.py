"""
Tests for orghub.utils.params, orghub.orgs.models and orghub.exceptions.
"""

from enum import Enum

import pytest

from orghub.exceptions import (
    NotFoundError,
    OrgHubAPIError,
    OrgHubError,
    ServerError,
    ValidationError,
    error_for_status,
)
from orghub.orgs.models import MembershipQuery
from orghub.utils.http import APIResponse
from orghub.utils.params import (
    assert_presence_of,
    normalize_params,
    render_query_value,
)


class Key(Enum):
    PUBLIC = "public"
    PAGE = "page"


class TestAssertPresenceOf:
    """Tests for assert_presence_of."""

    def test_all_present(self):
        """Test non-empty strings pass."""
        assert_presence_of("acme-corp", "alice")

    @pytest.mark.parametrize("value", ["", "  ", None, 42])
    def test_missing_value(self, value):
        """Test empty, blank and non-string values fail."""
        with pytest.raises(ValidationError):
            assert_presence_of(value)

    def test_names_position(self):
        """Test the message points at the offending argument."""
        with pytest.raises(ValidationError, match="#2"):
            assert_presence_of("acme-corp", "")

    def test_is_value_error(self):
        """Test ValidationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            assert_presence_of(None)


class TestNormalizeParams:
    """Tests for normalize_params."""

    def test_none(self):
        assert normalize_params(None) == {}

    def test_enum_and_string_keys(self):
        """Test enum keys use their value."""
        assert normalize_params({Key.PUBLIC: True, "per_page": 10, 1: "x"}) == {
            "public": True,
            "per_page": 10,
            "1": "x",
        }

    def test_returns_copy(self):
        """Test the input is not modified."""
        params = {"page": 1}
        result = normalize_params(params)
        result["page"] = 2
        assert params == {"page": 1}


class TestRenderQueryValue:
    """Tests for render_query_value."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "true"),
            (False, "false"),
            (10, "10"),
            ("all", "all"),
            (Key.PAGE, "page"),
            (["a", 1], ["a", "1"]),
            ((False, Key.PAGE), ["false", "page"]),
        ],
    )
    def test_render(self, value, expected):
        assert render_query_value(value) == expected


class TestMembershipQuery:
    """Tests for MembershipQuery."""

    def test_defaults(self):
        query = MembershipQuery.from_params()
        assert query.public_only is False
        assert query.extra_query == {}
        assert query.members_path("acme-corp") == "/orgs/acme-corp/members"

    def test_public_consumed(self):
        """Test the public flag is split from forwarded parameters."""
        query = MembershipQuery.from_params({Key.PUBLIC: True, "filter": "all"})
        assert query.public_only is True
        assert query.extra_query == {"filter": "all"}
        assert query.members_path("acme-corp") == "/orgs/acme-corp/public_members"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("true", True),
            ("1", True),
            ("false", False),
            ("FALSE", False),
            ("0", False),
            ("", False),
            (None, False),
            (1, True),
        ],
    )
    def test_public_flag_values(self, value, expected):
        """Test string flags from the command line are interpreted."""
        assert MembershipQuery.from_params({"public": value}).public_only is expected


class TestErrorForStatus:
    """Tests for error_for_status."""

    def test_json_message(self):
        """Test the API message is preferred."""
        error = error_for_status(APIResponse(404, {"message": "Not Found"}))
        assert isinstance(error, NotFoundError)
        assert error.message == "Not Found"
        assert str(error) == "404: Not Found"

    def test_text_body(self):
        """Test a text body is used as the message."""
        error = error_for_status(APIResponse(502, "upstream timeout\n"))
        assert isinstance(error, ServerError)
        assert error.message == "upstream timeout"

    def test_reason_phrase_fallback(self):
        """Test the reason phrase is used when the body has no message."""
        error = error_for_status(APIResponse(409, None, reason_phrase="Conflict"))
        assert type(error) is OrgHubAPIError
        assert error.message == "Conflict"

    def test_hierarchy(self):
        """Test every API error is an OrgHubError."""
        assert issubclass(NotFoundError, OrgHubAPIError)
        assert issubclass(OrgHubAPIError, OrgHubError)
        assert issubclass(ValidationError, OrgHubError)
