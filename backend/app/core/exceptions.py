"""
Application error taxonomy.

Services raise these; the handler registered in main.py renders them as JSON.
Validation failures use the {"error": ...} body, everything else {"message": ...}.
"""
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    body_key: str = "message"
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {self.body_key: self.message}


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    body_key = "error"
    default_message = "Invalid request"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InternalError(AppError):
    pass


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


def _describe_request_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationError.default_message
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    # loc is ("body", <field>, ...); the wire (camelCase) name is what clients sent
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body") or "Request body"
    msg = first.get("msg")
    return f"{field} is invalid: {msg}" if msg else f"{field} is invalid"


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields are client errors: 400 {"error": ...}."""
    error = ValidationError(_describe_request_error(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_body())
