"""Provider failure taxonomy and classification into user-facing errors.

The provider adapter raises one of the ``ProviderFailure`` variants below.
Anything else that escapes a provider call (a raw SDK or network exception) is
normalised by ``to_provider_failure`` first, so ``classify`` only ever deals
with the closed set of variants.
"""

import json
import logging
import re
from enum import Enum
from typing import NoReturn

from google.genai import errors as genai_errors

logger = logging.getLogger(__name__)


QUOTA_STATUS = "RESOURCE_EXHAUSTED"
POLICY_KEYWORD = "safety"
RATE_LIMITS_URL = "https://ai.google.dev/gemini-api/docs/rate-limits"

MESSAGE_PREFIX = "We have encountered problems in generating your assets"
GENERIC_MESSAGE = f"{MESSAGE_PREFIX}. An unexpected error occurred. Please try again."
QUOTA_MESSAGE = (
    f"{MESSAGE_PREFIX}. Error: API Quota Exceeded (out of tokens). "
    f"For details, visit {RATE_LIMITS_URL}"
)
POLICY_MESSAGE = (
    f"{MESSAGE_PREFIX}. Error Code: SAFETY_VIOLATION. "
    "Message: Request blocked due to content policy."
)

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


class ErrorCategory(Enum):
    QUOTA_EXCEEDED = "quota_exceeded"
    POLICY_VIOLATION = "policy_violation"
    PROVIDER_ERROR = "provider_error"
    TRANSPORT = "transport"
    EMPTY_RESULT = "empty_result"
    UNKNOWN = "unknown"
    INVALID_REQUEST = "invalid_request"


class GenerationError(Exception):
    """User-facing failure of a public operation. ``message`` is safe to show."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN):
        self.message = message
        self.category = category
        super().__init__(self.message)


class InvalidRequestError(ValueError):
    """Programming/input error (bad index, empty prompt, invalid asset). Never retried."""

    category = ErrorCategory.INVALID_REQUEST


# ===== Structured provider failures =====

class ProviderFailure(Exception):
    """Base class for failures raised by the provider adapter."""

    category = ErrorCategory.UNKNOWN


class QuotaExceededFailure(ProviderFailure):
    """Provider reported exhausted quota."""

    category = ErrorCategory.QUOTA_EXCEEDED


class PolicyViolationFailure(ProviderFailure):
    """Request or response was blocked by the provider's safety filters."""

    category = ErrorCategory.POLICY_VIOLATION


class ProviderStatusFailure(ProviderFailure):
    """Structured provider error that is neither quota nor policy."""

    category = ErrorCategory.PROVIDER_ERROR

    def __init__(self, status: str | None, message: str):
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}")


class TransportFailure(ProviderFailure):
    """Failure without a structured provider payload (network, timeouts, ...)."""

    category = ErrorCategory.TRANSPORT

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(raw)


class EmptyResultFailure(ProviderFailure):
    """Provider call succeeded but returned no usable image."""

    category = ErrorCategory.EMPTY_RESULT

    def __init__(self, raw: str = "Model response did not contain a valid image part."):
        self.raw = raw
        super().__init__(raw)


class MalformedFailure(ProviderFailure):
    """Structured payload present but unusable."""

    category = ErrorCategory.UNKNOWN


def _from_status(status: str | None, message: str) -> ProviderFailure:
    if status == QUOTA_STATUS:
        return QuotaExceededFailure(message)
    if POLICY_KEYWORD in message.lower():
        return PolicyViolationFailure(message)
    return ProviderStatusFailure(status, message)


def to_provider_failure(error: object) -> ProviderFailure:
    """Normalise any failure into exactly one ProviderFailure variant."""
    if isinstance(error, ProviderFailure):
        return error

    if isinstance(error, genai_errors.APIError):
        if not error.message:
            return MalformedFailure(str(error))
        status = error.status or (str(error.code) if error.code else None)
        return _from_status(status, str(error.message))

    if not isinstance(error, Exception):
        return MalformedFailure(repr(error))

    raw = str(error)
    match = _JSON_OBJECT_RE.search(raw)
    if not match:
        if POLICY_KEYWORD in raw.lower():
            return PolicyViolationFailure(raw)
        return TransportFailure(raw)

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning("Could not parse JSON from error message: %s", e)
        return MalformedFailure(raw)

    parsed = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(parsed, dict) or not parsed.get("message"):
        return MalformedFailure(raw)

    return _from_status(parsed.get("status"), str(parsed["message"]))


def classify(failure: ProviderFailure) -> GenerationError:
    """Map a failure variant to its user-facing error."""
    if isinstance(failure, QuotaExceededFailure):
        return GenerationError(QUOTA_MESSAGE, failure.category)
    if isinstance(failure, PolicyViolationFailure):
        return GenerationError(POLICY_MESSAGE, failure.category)
    if isinstance(failure, ProviderStatusFailure):
        code = failure.status or "N/A"
        return GenerationError(
            f"{MESSAGE_PREFIX}. Error Code: {code}. Message: {failure.message}",
            failure.category,
        )
    if isinstance(failure, (TransportFailure, EmptyResultFailure)):
        return GenerationError(f"{MESSAGE_PREFIX}: {failure.raw}", failure.category)
    return GenerationError(GENERIC_MESSAGE, ErrorCategory.UNKNOWN)


def handle_provider_error(error: object, context: str) -> NoReturn:
    """Classify a terminal failure and raise it as a GenerationError.

    Args:
        error: The last failure raised by the provider call.
        context: Operation description, used for logging only.

    Raises:
        GenerationError: Always.
    """
    failure = to_provider_failure(error)
    result = classify(failure)
    logger.error("%s failed (%s): %s", context, result.category.value, failure)
    if isinstance(error, BaseException):
        raise result from error
    raise result
