from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse

from src.domain.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def error_response(
    status_code: int, error: Error, headers: Optional[dict] = None
) -> JSONResponse:
    """JSON error body shared by exception handlers and middleware"""
    return JSONResponse(
        status_code=status_code,
        content={"error": error.message, "code": error.code},
        headers=headers,
    )
