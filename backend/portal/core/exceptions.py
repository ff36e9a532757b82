class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class NotFoundError(AppError):
    """Raised when a named lookup (branch, section, semester, syllabus) has no match."""
    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity.capitalize()} not found", status_code=404, details={"entity": entity})

class StoreError(AppError):
    """Raised when an underlying store operation fails."""
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__("Store operation failed", status_code=500, details={"cause": type(cause).__name__})
