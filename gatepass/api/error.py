from fastapi import status

from gatepass.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Error code -> HTTP status for every business error a use case can return
CLIENT_ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "DEPARTMENT_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "UNKNOWN_DEPARTMENT": status.HTTP_400_BAD_REQUEST,
    "INVALID_APPLICATION_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "APPLICATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ACCOUNT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_STATE": status.HTTP_409_CONFLICT,
    "UPDATE_FAILED": status.HTTP_409_CONFLICT,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "CREDENTIAL_NOT_ISSUED": status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error):
    """Raise ClientError for known codes, ServerError otherwise"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
