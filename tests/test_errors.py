from salary_api.core.errors import (
    AppError,
    ConflictError,
    InternalServerError,
    NotFoundError,
    ValidationError,
)


class TestAppErrors:
    def test_not_found(self):
        error = NotFoundError("Employee", 42)
        assert error.status_code == 404
        assert error.message == "Employee with id 42 not found"
        assert str(error) == error.message
        assert error.is_operational

    def test_validation(self):
        error = ValidationError("Invalid country")
        assert error.status_code == 400
        assert error.message == "Invalid country"

    def test_conflict(self):
        assert ConflictError("Email taken").status_code == 409

    def test_internal_is_not_operational(self):
        error = InternalServerError()
        assert error.status_code == 500
        assert error.message == "Internal server error"
        assert not error.is_operational

    def test_all_are_app_errors(self):
        for error in (NotFoundError("Employee", 1), ValidationError("x"), ConflictError("x"), InternalServerError()):
            assert isinstance(error, AppError)
