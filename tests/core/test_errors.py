"""Errors: codes, statuses and the response envelope."""

from epl_backend.app.core.errors import (
    EmptyFieldsError,
    NotFoundError,
    RecordError,
    StorageError,
)


def test_not_found_names_kind_and_id():
    err = NotFoundError("Team", 7)
    assert err.message == "Team with ID 7 not found"
    assert err.kind == "Team"
    assert err.record_id == 7
    assert err.http_status == 404


def test_empty_fields_is_a_400():
    err = EmptyFieldsError("Please fill in all the required fields")
    assert err.http_status == 400
    assert str(err) == "Please fill in all the required fields"


def test_storage_error_is_a_500():
    assert StorageError("disk gone").http_status == 500


def test_all_errors_share_the_base_class():
    for err in (EmptyFieldsError("x"), NotFoundError("Coach", 1), StorageError("x")):
        assert isinstance(err, RecordError)


def test_to_response_envelope():
    assert NotFoundError("Stadium", 3).to_response() == {
        "error": {"code": "NOT_FOUND", "message": "Stadium with ID 3 not found"}
    }
