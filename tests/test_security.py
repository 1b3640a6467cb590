"""
Tests for security module.

Validates request payload shapes and size limits.
"""
import pytest

from entity_resolver.security import InputValidator, ValidationError


class TestInputValidator:
    """Test input validation."""

    def test_query_valid(self):
        """Test valid query passes validation."""
        assert InputValidator.validate_query("kc royals") == "kc royals"

    def test_query_empty_allowed(self):
        """Test that an empty query is passed through to resolve to nothing."""
        assert InputValidator.validate_query("") == ""

    def test_query_missing(self):
        """Test that a missing query is rejected."""
        with pytest.raises(ValidationError, match="Missing 'query'"):
            InputValidator.validate_query(None)

    def test_query_wrong_type(self):
        """Test that a non-string query is rejected."""
        with pytest.raises(ValidationError, match="must be a string"):
            InputValidator.validate_query(42)

    def test_query_too_long(self):
        """Test query exceeding max length is rejected."""
        with pytest.raises(ValidationError, match="exceeds maximum length"):
            InputValidator.validate_query("a" * 201)

    def test_query_null_bytes_removed(self):
        """Test that null bytes are stripped."""
        assert InputValidator.validate_query("chiefs\x00") == "chiefs"

    def test_user_teams(self):
        """Test user team list validation."""
        assert InputValidator.validate_user_teams(None) == []
        assert InputValidator.validate_user_teams(["Chiefs"]) == ["Chiefs"]

        with pytest.raises(ValidationError):
            InputValidator.validate_user_teams("Chiefs")
        with pytest.raises(ValidationError):
            InputValidator.validate_user_teams(["Chiefs", 3])
        with pytest.raises(ValidationError, match="maximum of 50"):
            InputValidator.validate_user_teams(["x"] * 51)
        with pytest.raises(ValidationError, match="cannot exceed"):
            InputValidator.validate_user_teams(["x" * 101])

    def test_coordinates_pair(self):
        """Test that coordinates must come together."""
        assert InputValidator.validate_coordinates(None, None) == (None, None)
        assert InputValidator.validate_coordinates(34, -118.5) == (34.0, -118.5)

        with pytest.raises(ValidationError, match="together"):
            InputValidator.validate_coordinates(34.0, None)

    def test_coordinates_range_and_type(self):
        """Test coordinate type and range checks."""
        with pytest.raises(ValidationError, match="between -90 and 90"):
            InputValidator.validate_coordinates(91, 0)
        with pytest.raises(ValidationError, match="between -180 and 180"):
            InputValidator.validate_coordinates(0, -181)
        with pytest.raises(ValidationError, match="must be a number"):
            InputValidator.validate_coordinates("34", "-118")
        with pytest.raises(ValidationError, match="must be a number"):
            InputValidator.validate_coordinates(True, 0)

    def test_location(self):
        """Test location validation."""
        assert InputValidator.validate_location(None) is None
        assert InputValidator.validate_location("Seattle") == "Seattle"

        with pytest.raises(ValidationError):
            InputValidator.validate_location(["Seattle"])
        with pytest.raises(ValidationError, match="exceeds maximum length"):
            InputValidator.validate_location("x" * 201)

    def test_resolve_request(self):
        """Test full request validation."""
        params = InputValidator.validate_resolve_request({
            "query": "kings",
            "user_teams": ["la kings"],
            "user_lat": 34.05,
            "user_lon": -118.24,
        })

        assert params == {
            "query": "kings",
            "user_teams": ["la kings"],
            "user_lat": 34.05,
            "user_lon": -118.24,
            "user_location": None,
        }

    def test_resolve_request_not_object(self):
        """Test that a non-object body is rejected."""
        with pytest.raises(ValidationError, match="JSON object"):
            InputValidator.validate_resolve_request(["kings"])
