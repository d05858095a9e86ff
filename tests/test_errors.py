import json

import pytest
from google.genai import errors as genai_errors

from adstudio.errors import (
    GENERIC_MESSAGE,
    POLICY_MESSAGE,
    QUOTA_MESSAGE,
    RATE_LIMITS_URL,
    EmptyResultFailure,
    ErrorCategory,
    GenerationError,
    MalformedFailure,
    PolicyViolationFailure,
    ProviderStatusFailure,
    QuotaExceededFailure,
    TransportFailure,
    classify,
    handle_provider_error,
    to_provider_failure,
)


def _payload_error(status, message):
    body = json.dumps({"error": {"code": 400, "status": status, "message": message}})
    return RuntimeError(f"got status: 400. {body}")


def test_quota_status_maps_to_quota_failure():
    failure = to_provider_failure(_payload_error("RESOURCE_EXHAUSTED", "x"))
    assert isinstance(failure, QuotaExceededFailure)


def test_quota_wins_over_safety_keyword():
    failure = to_provider_failure(_payload_error("RESOURCE_EXHAUSTED", "safety quota"))
    assert isinstance(failure, QuotaExceededFailure)


def test_safety_keyword_in_structured_message_is_case_insensitive():
    failure = to_provider_failure(_payload_error("INVALID_ARGUMENT", "Blocked by SAFETY filters"))
    assert isinstance(failure, PolicyViolationFailure)


def test_safety_keyword_in_plain_text():
    failure = to_provider_failure(RuntimeError("Response blocked: Safety"))
    assert isinstance(failure, PolicyViolationFailure)


def test_other_structured_error_keeps_status_and_message():
    failure = to_provider_failure(_payload_error("INTERNAL", "backend exploded"))
    assert isinstance(failure, ProviderStatusFailure)
    assert failure.status == "INTERNAL"
    assert failure.message == "backend exploded"


def test_plain_text_is_transport_failure():
    failure = to_provider_failure(ConnectionError("connection reset by peer"))
    assert isinstance(failure, TransportFailure)
    assert failure.raw == "connection reset by peer"


def test_unparseable_json_is_malformed():
    failure = to_provider_failure(RuntimeError("bad payload {not json}"))
    assert isinstance(failure, MalformedFailure)


def test_json_without_error_message_is_malformed():
    failure = to_provider_failure(RuntimeError(json.dumps({"error": {"status": "INTERNAL"}})))
    assert isinstance(failure, MalformedFailure)


def test_non_exception_is_malformed():
    assert isinstance(to_provider_failure("just a string"), MalformedFailure)


def test_structured_failures_pass_through():
    failure = EmptyResultFailure()
    assert to_provider_failure(failure) is failure


def test_sdk_api_error_uses_status_and_message():
    error = genai_errors.APIError(
        429,
        {"error": {"code": 429, "status": "RESOURCE_EXHAUSTED", "message": "Quota exceeded"}},
    )
    assert isinstance(to_provider_failure(error), QuotaExceededFailure)

    empty = genai_errors.APIError(500, {"error": {"code": 500, "status": "INTERNAL", "message": ""}})
    failure = to_provider_failure(empty)
    assert isinstance(failure, MalformedFailure)
    assert classify(failure).message == GENERIC_MESSAGE


@pytest.mark.parametrize(
    "failure, category, message",
    [
        (QuotaExceededFailure("x"), ErrorCategory.QUOTA_EXCEEDED, QUOTA_MESSAGE),
        (PolicyViolationFailure("x"), ErrorCategory.POLICY_VIOLATION, POLICY_MESSAGE),
        (MalformedFailure("x"), ErrorCategory.UNKNOWN, GENERIC_MESSAGE),
    ],
)
def test_fixed_messages(failure, category, message):
    error = classify(failure)
    assert error.category is category
    assert error.message == message


def test_quota_message_links_rate_limits():
    assert RATE_LIMITS_URL in classify(QuotaExceededFailure("x")).message


def test_provider_error_message_includes_code_and_text():
    error = classify(ProviderStatusFailure("INTERNAL", "backend exploded"))
    assert error.category is ErrorCategory.PROVIDER_ERROR
    assert "Error Code: INTERNAL" in error.message
    assert "backend exploded" in error.message


def test_provider_error_without_status_uses_na():
    assert "Error Code: N/A" in classify(ProviderStatusFailure(None, "oops")).message


def test_transport_message_includes_raw_text():
    error = classify(TransportFailure("read timed out"))
    assert error.category is ErrorCategory.TRANSPORT
    assert error.message.endswith(": read timed out")


def test_empty_result_message():
    error = classify(EmptyResultFailure())
    assert error.category is ErrorCategory.EMPTY_RESULT
    assert "did not contain a valid image part" in error.message


def test_handle_provider_error_always_raises_with_cause():
    cause = _payload_error("RESOURCE_EXHAUSTED", "x")
    with pytest.raises(GenerationError) as info:
        handle_provider_error(cause, "unit test")
    assert info.value.message == QUOTA_MESSAGE
    assert str(info.value) == QUOTA_MESSAGE
    assert info.value.__cause__ is cause
