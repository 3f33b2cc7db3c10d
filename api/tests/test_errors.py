from firebase_admin import exceptions as firebase_exceptions
from google.api_core import exceptions as google_exceptions

from utils.callable_helpers import error_from_exception
from utils.errors import ErrorCode, ServiceError


def test_error_codes_carry_wire_status_and_http_status():
    assert ErrorCode.UNAUTHENTICATED.wire_status == "UNAUTHENTICATED"
    assert ErrorCode.UNAUTHENTICATED.kind == "unauthenticated"
    assert ErrorCode.UNAUTHENTICATED.http_status == 401
    assert ErrorCode.INVALID_ARGUMENT.http_status == 400
    assert ErrorCode.INTERNAL.http_status == 500


def test_from_grpc_name():
    assert ErrorCode.from_grpc_name("NOT_FOUND") is ErrorCode.NOT_FOUND
    assert ErrorCode.from_grpc_name("resource_exhausted") is ErrorCode.RESOURCE_EXHAUSTED
    assert ErrorCode.from_grpc_name("SOMETHING_NEW") is ErrorCode.UNKNOWN


def test_service_error_passes_through():
    err = ServiceError("You must be signed in.", ErrorCode.UNAUTHENTICATED)
    assert error_from_exception(err) is err


def test_google_errors_keep_kind_and_message():
    err = error_from_exception(google_exceptions.ResourceExhausted("Quota exceeded."))
    assert err.code is ErrorCode.RESOURCE_EXHAUSTED
    assert err.message == "Quota exceeded."

    err = error_from_exception(google_exceptions.ServiceUnavailable("try later"))
    assert err.code is ErrorCode.UNAVAILABLE


def test_other_errors_become_internal():
    err = error_from_exception(KeyError("x"))
    assert err.code is ErrorCode.INTERNAL
    assert err.message == "INTERNAL", "unexpected errors must not leak details"


def test_firebase_errors_keep_kind_and_message():
    err = error_from_exception(firebase_exceptions.UnavailableError("Auth backend unavailable"))
    assert err.code is ErrorCode.UNAVAILABLE
    assert err.message == "Auth backend unavailable"

    err = error_from_exception(firebase_exceptions.PermissionDeniedError("no access"))
    assert err.code is ErrorCode.PERMISSION_DENIED
