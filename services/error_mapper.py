# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.exceptions import (
    ApiException, ValidationException, NetworkException, WizardStateException
)
from utils.logger import get_logger

logger = get_logger(__name__)

CONNECTION_MESSAGE = "Could not reach the server. Check your connection and try again."
TIMEOUT_MESSAGE = "The server took too long to respond. Please try again."
GENERIC_MESSAGE = "Something went wrong while saving your property. Please try again."


def map_api_error(error: ApiException) -> str:
    """Map API exception to a user-friendly message.

    Server-side rejections (4xx) show the server's detail; everything else
    gets a generic message. Technical details are logged.
    """
    status = error.status_code

    if status == 400 or status == 422:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error ({status}): {details}")
            return f"The server rejected the listing:\n{details}"
    if status in (401, 403):
        logger.warning(f"API auth error ({status}): {error}")
        return "Your session has expired. Please sign in again."
    if status and 400 <= status < 500 and error.message:
        logger.warning(f"API error ({status}): {error}")
        return error.message

    logger.warning(f"API error ({status}): {error}")
    return GENERIC_MESSAGE


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly message."""
    msg = str(error.original_error) if error.original_error else error.message
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return TIMEOUT_MESSAGE
    return CONNECTION_MESSAGE


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message."""
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
            return "\n".join(f"• {e}" for e in error.errors)
        return error.message

    if isinstance(error, WizardStateException):
        return error.message

    # Log unexpected errors
    logger.warning(f"Unexpected error: {error}")
    return GENERIC_MESSAGE


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    detail = response_data.get("detail")
    if isinstance(detail, str):
        return detail
    if isinstance(detail, list):
        # FastAPI-style [{"loc": [...], "msg": "..."}]
        lines = []
        for item in detail:
            if isinstance(item, dict):
                loc = ".".join(str(part) for part in item.get("loc", []) if part != "body")
                lines.append(f"• {loc}: {item.get('msg', '')}" if loc else f"• {item.get('msg', '')}")
            else:
                lines.append(f"• {item}")
        return "\n".join(lines)

    errors = response_data.get("errors", {})
    if isinstance(errors, dict) and errors:
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(errors, list) and errors:
        return "\n".join(f"• {e}" for e in errors)

    return response_data.get("message", "")
