"""
Unit tests for the framework-neutral validation middleware.
"""

import pytest

from rulegate import ValidationFailed, validate


@pytest.mark.unit
class TestValidateMiddleware:
    """Tests for validate(spec)"""

    def test_success_calls_continuation_once(self, make_request, call_next):
        """Test a valid body passes control to the continuation exactly once"""
        middleware = validate({"name": "required|min:3|max:5"})

        returned = middleware(make_request({"name": "abcd"}), call_next)

        assert call_next.calls == 1
        assert returned == "next-called"

    def test_failure_raises_and_skips_continuation(self, make_request, call_next):
        """Test an invalid body raises ValidationFailed without calling next"""
        middleware = validate({"name": "required|min:3|max:5"})

        with pytest.raises(ValidationFailed) as exc_info:
            middleware(make_request({"name": "ab"}), call_next)

        assert call_next.calls == 0
        assert exc_info.value.status == 400
        assert exc_info.value.errors == {"name": "The name field must be at least 3 characters."}

    def test_numeric_zero_passes(self, make_request, call_next):
        """Test age 0 satisfies required|numeric"""
        middleware = validate({"age": "required|numeric"})

        middleware(make_request({"age": 0}), call_next)

        assert call_next.calls == 1

    def test_decimal_failure(self, make_request, call_next):
        """Test price 9.9 fails decimal:2"""
        middleware = validate({"price": "decimal:2"})

        with pytest.raises(ValidationFailed) as exc_info:
            middleware(make_request({"price": "9.9"}), call_next)

        assert exc_info.value.errors == {"price": "The price field must have 2 decimal places."}

    def test_missing_field_reported_alone(self, make_request, call_next):
        """Test only the missing field appears in the aggregated errors"""
        middleware = validate({"a": "required", "b": "required"})

        with pytest.raises(ValidationFailed) as exc_info:
            middleware(make_request({"a": "x"}), call_next)

        assert exc_info.value.errors == {"b": "The b field is required."}

    def test_all_failing_fields_aggregated(self, make_request, call_next, signup_spec):
        """Test every failing field contributes its first message"""
        middleware = validate(signup_spec)

        with pytest.raises(ValidationFailed) as exc_info:
            middleware(make_request({"name": "toolongname", "price": "1.234"}), call_next)

        assert list(exc_info.value.errors) == ["name", "age", "price"]
        assert exc_info.value.errors["name"] == "The name field must be at most 5 characters."
        assert exc_info.value.errors["age"] == "The age field is required."

    def test_same_input_same_outcome(self, make_request, call_next):
        """Test calling the middleware twice gives the same messages"""
        middleware = validate({"name": "required|min:3"})
        request = make_request({"name": "a"})

        with pytest.raises(ValidationFailed) as first:
            middleware(request, call_next)
        with pytest.raises(ValidationFailed) as second:
            middleware(request, call_next)

        assert first.value.errors == second.value.errors

    def test_request_without_body(self, call_next):
        """Test a request with no body attribute is treated as empty"""
        middleware = validate({"name": "required"})

        with pytest.raises(ValidationFailed):
            middleware(object(), call_next)

    def test_empty_spec_always_passes(self, make_request, call_next):
        """Test a spec with no fields lets every request through"""
        middleware = validate({})

        middleware(make_request({"anything": None}), call_next)

        assert call_next.calls == 1

    def test_engine_exposed(self):
        """Test the parsed engine is reachable for introspection"""
        middleware = validate({"name": "required|min:3"})

        assert middleware.engine.get_rule_summary()["total_rules"] == 2
