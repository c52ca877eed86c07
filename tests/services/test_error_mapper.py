# -*- coding: utf-8 -*-
"""
Tests for the error message mapper.
"""
import requests

from services.error_mapper import (
    CONNECTION_MESSAGE, GENERIC_MESSAGE, TIMEOUT_MESSAGE, map_exception
)
from services.exceptions import (
    ApiException, NetworkException, ValidationException, WizardStateException
)


def test_fastapi_style_validation_details():
    error = ApiException("Unprocessable", status_code=422, response_data={
        "detail": [{"loc": ["body", "city"], "msg": "field required"}]
    })
    assert map_exception(error) == "The server rejected the listing:\n• city: field required"


def test_errors_dict_details():
    error = ApiException("Bad", status_code=400, response_data={
        "errors": {"units": ["must not be empty"]}
    })
    assert "• units: must not be empty" in map_exception(error)


def test_empty_errors_fall_back_to_message():
    error = ApiException("Bad", status_code=400, response_data={
        "errors": {}, "message": "Invalid listing"
    })
    assert map_exception(error) == "The server rejected the listing:\nInvalid listing"


def test_auth_errors():
    assert "sign in" in map_exception(ApiException("Unauthorized", status_code=401))


def test_other_client_error_uses_message():
    assert map_exception(ApiException("Too many photos", status_code=413)) == "Too many photos"


def test_server_error_is_generic():
    assert map_exception(ApiException("Internal", status_code=500)) == GENERIC_MESSAGE


def test_context_is_attached():
    error = ApiException("Internal", status_code=500)
    map_exception(error, context="property")
    assert error.context == "property"


def test_network_errors():
    timeout = NetworkException("x", original_error=requests.exceptions.Timeout("read timed out"))
    refused = NetworkException("connection refused")
    assert map_exception(timeout) == TIMEOUT_MESSAGE
    assert map_exception(refused) == CONNECTION_MESSAGE


def test_validation_errors_become_bullets():
    error = ValidationException("incomplete", errors=["City is required", "Unit 1: name is required"])
    assert map_exception(error) == "• City is required\n• Unit 1: name is required"
    assert map_exception(ValidationException("A unit must keep at least one pricing plan")) == \
        "A unit must keep at least one pricing plan"


def test_unknown_exception_is_generic():
    assert map_exception(KeyError("units")) == GENERIC_MESSAGE


def test_wizard_state_error_keeps_its_message():
    error = WizardStateException("This property has already been submitted", state="success")
    assert map_exception(error) == "This property has already been submitted"
