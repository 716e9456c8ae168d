"""
Application errors.
Each error carries the HTTP status it maps to; the handlers in main.py turn
them into {"status": "error", "message": ...} responses.
"""


class AppError(Exception):
    def __init__(self, status_code: int, message: str, is_operational: bool = True):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.is_operational = is_operational


class NotFoundError(AppError):
    def __init__(self, resource: str, resource_id: int | str):
        super().__init__(404, f"{resource} with id {resource_id} not found")


class ValidationError(AppError):
    def __init__(self, message: str):
        super().__init__(400, message)


class ConflictError(AppError):
    def __init__(self, message: str):
        super().__init__(409, message)


class InternalServerError(AppError):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(500, message, is_operational=False)
