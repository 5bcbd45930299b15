"""Error Hierarchy — codes, statuses and the REST envelope."""

from herdbook.core.errors import (
    ApprovalAlreadyDecidedError, DatabaseError, DuplicateRecordError,
    ErrorCategory, ExportFormatError, HerdbookError, RecordInUseError,
    RecordValidationError, ResourceNotFoundError,
)


def test_all_errors_share_the_base():
    for exc in (
        RecordValidationError("bad", "field"),
        ResourceNotFoundError("Animal", "COW-001"),
        DuplicateRecordError("Animal", "COW-001"),
        RecordInUseError("Animal", "COW-001", "2 yield record(s)"),
        ApprovalAlreadyDecidedError(4, "A"),
        ExportFormatError("pdf"),
        DatabaseError("down", "execute"),
    ):
        assert isinstance(exc, HerdbookError)


def test_not_found_envelope():
    body = ResourceNotFoundError("Employee", "NDF-2026001").to_response()
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert body["error"]["category"] == "resource_not_found"
    assert body["error"]["context"]["resource"] == "Employee"
    assert body["error"]["context"]["record_id"] == "NDF-2026001"
    assert "timestamp" in body["error"]


def test_http_statuses():
    assert RecordValidationError("bad", "f").http_status == 400
    assert ResourceNotFoundError("A", "1").http_status == 404
    assert DuplicateRecordError("A", "1").http_status == 409
    assert RecordInUseError("A", "1", "x").http_status == 409
    assert ApprovalAlreadyDecidedError(1, "R").http_status == 400
    assert ExportFormatError("pdf").http_status == 400
    assert DatabaseError("x", "query").http_status == 503


def test_validation_error_carries_field():
    exc = RecordValidationError("start_date cannot be after end_date", "start_date")
    assert exc.to_response()["error"]["context"]["field"] == "start_date"


def test_decided_approval_is_a_business_rule():
    exc = ApprovalAlreadyDecidedError(9, "A")
    assert exc.code == "APPROVAL_ALREADY_DECIDED"
    assert exc.category == ErrorCategory.BUSINESS_RULE
    assert exc.context.record_id == "9"
