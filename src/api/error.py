from fastapi import status
from libs.result import Error


class ApiError(Exception):
    """Business error bound to the HTTP status it is reported with"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    @property
    def public_message(self) -> str:
        return self.base_error.message

    def body(self) -> dict:
        """JSON body shared by every error response"""
        return error_body(self.base_error.code, self.public_message)


class ClientError(ApiError):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error)
        self.status_code = status_code


class ServerError(ApiError):
    """Reported as a 500 without the internal message"""

    @property
    def public_message(self) -> str:
        return "Internal server error"


def error_body(code: str, message: str) -> dict:
    return {"message": message, "error": {"code": code, "message": message}}
