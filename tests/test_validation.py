"""Unit tests for request validation guards."""

import pytest

from bfhl.exceptions import BadRequestError, UnprocessableEntityError
from bfhl.validation import (
    ALLOWED_KEYS,
    MAX_SAFE_INTEGER,
    validate_integer,
    validate_integer_array,
    validate_single_key_object,
)


class TestValidateInteger:
    """Tests for validate_integer."""

    def test_accepts_int(self):
        assert validate_integer(7, "fibonacci") == 7

    def test_accepts_whole_float(self):
        """JSON 7.0 is the same number as 7."""
        result = validate_integer(7.0, "fibonacci")

        assert result == 7
        assert isinstance(result, int)

    @pytest.mark.parametrize("value", [7.5, "7", None, [7], True, False])
    def test_rejects_non_integers(self, value):
        with pytest.raises(BadRequestError) as exc_info:
            validate_integer(value, "fibonacci")

        assert exc_info.value.message == "fibonacci must be an integer"
        assert exc_info.value.status_code == 400


class TestValidateIntegerArray:
    """Tests for validate_integer_array."""

    def test_accepts_integer_list(self):
        assert validate_integer_array([1, -2, 3.0], "prime", max_length=10) == [1, -2, 3]

    def test_rejects_non_list(self):
        with pytest.raises(BadRequestError) as exc_info:
            validate_integer_array(5, "lcm", max_length=10)

        assert exc_info.value.message == "lcm must be an array of integers"

    def test_rejects_empty_list(self):
        with pytest.raises(BadRequestError) as exc_info:
            validate_integer_array([], "hcf", max_length=10)

        assert exc_info.value.message == "hcf must not be empty"

    def test_rejects_too_long_list(self):
        with pytest.raises(UnprocessableEntityError) as exc_info:
            validate_integer_array([1, 2, 3], "prime", max_length=2)

        assert exc_info.value.message == "prime is too large"
        assert exc_info.value.status_code == 422

    def test_length_checked_before_elements(self):
        """An overlong list of garbage is a 422, not a 400."""
        with pytest.raises(UnprocessableEntityError):
            validate_integer_array(["a", "b", "c"], "prime", max_length=2)

    def test_length_at_limit_passes(self):
        assert validate_integer_array([1, 2], "prime", max_length=2) == [1, 2]

    @pytest.mark.parametrize("bad", [1.5, "2", None, True, [3]])
    def test_rejects_non_integer_elements(self, bad):
        with pytest.raises(BadRequestError) as exc_info:
            validate_integer_array([1, bad], "prime", max_length=10)

        assert exc_info.value.message == "prime must contain only integers"

    def test_safe_integer_bounds_pass(self):
        values = [MAX_SAFE_INTEGER, -MAX_SAFE_INTEGER]
        assert validate_integer_array(values, "lcm", max_length=10) == values

    @pytest.mark.parametrize("big", [MAX_SAFE_INTEGER + 1, -(2**60), 1000000007 * 1000000009, 1e300])
    def test_rejects_elements_beyond_safe_integer(self, big):
        with pytest.raises(UnprocessableEntityError) as exc_info:
            validate_integer_array([2, big], "prime", max_length=10)

        assert exc_info.value.message == "prime values are too large"
        assert exc_info.value.status_code == 422


class TestValidateSingleKeyObject:
    """Tests for validate_single_key_object."""

    @pytest.mark.parametrize("key", ALLOWED_KEYS)
    def test_accepts_each_allowed_key(self, key):
        assert validate_single_key_object({key: 1}) == (key, 1)

    @pytest.mark.parametrize("body", [[], "fibonacci", 3, None])
    def test_rejects_non_object(self, body):
        with pytest.raises(BadRequestError) as exc_info:
            validate_single_key_object(body)

        assert exc_info.value.message == "Request body must be a JSON object"

    @pytest.mark.parametrize("body", [{}, {"fibonacci": 1, "prime": [2]}])
    def test_rejects_wrong_key_count(self, body):
        with pytest.raises(BadRequestError) as exc_info:
            validate_single_key_object(body)

        assert "fibonacci, prime, lcm, hcf, or AI" in exc_info.value.message

    @pytest.mark.parametrize("key", ["x", "ai", "Fibonacci", "gcd"])
    def test_rejects_unknown_key(self, key):
        with pytest.raises(BadRequestError) as exc_info:
            validate_single_key_object({key: 1})

        assert exc_info.value.message == "Invalid key. Allowed keys: fibonacci, prime, lcm, hcf, AI"
