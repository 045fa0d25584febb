"""Error Hierarchy — codes, statuses and REST envelope shape."""

from paystack_proxy.core.errors import (
    DatabaseError, ErrorCategory, ErrorContext, FieldValidationError,
    PaystackAPIError, ResourceNotFoundError,
)


def test_field_validation_error_is_client_error():
    err = FieldValidationError("bank_code")
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"
    assert err.message == "bank_code is required"


def test_not_found_names_resource():
    err = ResourceNotFoundError("Recipient", "RCP_x")
    assert err.http_status == 404
    assert err.message == "Recipient 'RCP_x' not found"


def test_paystack_error_is_upstream_failure():
    err = PaystackAPIError("Invalid key", "client_error", upstream_status=401)
    assert err.http_status == 502
    assert err.category is ErrorCategory.EXTERNAL_API
    assert err.context.upstream_status == 401


def test_database_error_is_service_unavailable():
    assert DatabaseError("IntegrityError", "insert").http_status == 503


def test_to_response_envelope():
    err = ResourceNotFoundError(
        "Recipient", "RCP_x", context=ErrorContext(recipient_code="RCP_x"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"]["recipient_code"] == "RCP_x"
    assert "timestamp" in body
