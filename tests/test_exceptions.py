"""
Tests for AppException and its factory functions.
"""

from shop.core import AppException, exceptions


class TestAppException:
    """Tests for AppException."""

    def test_to_dict_without_details(self):
        """Test error dictionary omits empty details."""
        exc = AppException("Something broke", "INTERNAL_ERROR")
        data = exc.to_dict()

        assert data["success"] is False
        assert data["error"]["code"] == "INTERNAL_ERROR"
        assert data["error"]["message"] == "Something broke"
        assert "details" not in data["error"]
        assert str(exc) == "Something broke"

    def test_self_check_failed(self):
        """Test self-check failure factory."""
        exc = exceptions.self_check_failed("add duplicate id", False, True)

        assert exc.code == "SELF_CHECK_FAILED"
        assert exc.details == {"check": "add duplicate id", "expected": "False", "actual": "True"}
        assert exc.to_dict()["error"]["details"]["check"] == "add duplicate id"

    def test_invalid_search_limit(self):
        """Test invalid search limit factory."""
        exc = exceptions.invalid_search_limit(-1)

        assert exc.code == "INVALID_SEARCH_LIMIT"
        assert "-1" in exc.message
