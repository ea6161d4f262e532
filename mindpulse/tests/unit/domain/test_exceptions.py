"""
Tests for the assessment engine error taxonomy.
"""

from mindpulse.domain.exceptions import DomainException, PersistenceError, SyncError


class TestDomainException:
    """Tests for the shared base behaviour."""

    def test_default_message(self):
        assert str(DomainException()) == "Assessment engine error"

    def test_context_drops_missing_values(self):
        error = DomainException("boom", operation="save", endpoint=None)
        assert error.context == {"operation": "save"}

    def test_log_dict_names_cause(self):
        cause = ConnectionResetError("reset by peer")
        error = DomainException("boom", original_exception=cause, operation="save")

        assert error.to_log_dict() == {
            "error": "DomainException",
            "message": "boom",
            "operation": "save",
            "cause": "ConnectionResetError",
        }


class TestPersistenceError:
    """Tests for PersistenceError."""

    def test_operation_folded_into_message(self):
        error = PersistenceError("Failed to save assessment", operation="save")

        assert isinstance(error, DomainException)
        assert str(error) == "Failed to save assessment during save"
        assert error.operation == "save"
        assert error.context == {"operation": "save"}

    def test_default_message(self):
        assert str(PersistenceError()) == "Persistence operation failed"


class TestSyncError:
    """Tests for SyncError."""

    def test_status_code_folded_into_message(self):
        cause = ValueError("bad body")
        error = SyncError(
            "Remote service rejected upload",
            endpoint="/api/assessments",
            status_code=502,
            original_exception=cause,
        )

        assert str(error) == "Remote service rejected upload (HTTP 502)"
        assert error.status_code == 502
        assert error.original_exception is cause
        assert error.to_log_dict()["endpoint"] == "/api/assessments"
        assert error.to_log_dict()["status_code"] == 502

    def test_without_status(self):
        error = SyncError(endpoint="/api/assessments/anonymous")
        assert str(error) == "Remote synchronization failed"
        assert "status_code" not in error.context
