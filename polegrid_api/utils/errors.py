class AppError(Exception):
    """Base class for application-specific errors."""
    def __init__(self, code: str, message: str, http_status: int = 400):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status


class ValidationError(AppError):
    pass

class StorageError(AppError):
    """Disk failure on the record store or upload directory.

    The client only ever sees the generic message; `detail` is for logs.
    """
    def __init__(self, code: str, detail: str):
        super().__init__(code, "A storage error occurred.", 500)
        self.detail = detail
