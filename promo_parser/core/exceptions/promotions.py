from fastapi.exceptions import HTTPException

"""
Promotion domain exceptions aligned with HTTP semantics.
"""


class PromotionError(HTTPException):
    """
    Base class for promotion exceptions exposed over HTTP.
    """


class PromotionNotFoundError(PromotionError):
    """
    Raised when a referenced promotion does not exist.

    :return: HTTP 404 exception
    """

    def __init__(self, detail: str = "Promotion not found.") -> None:
        super().__init__(status_code=404, detail=detail)


class PromotionValidationError(PromotionError):
    """
    Raised when a promotion payload fails validation rules.

    :return: HTTP 400 exception for validation errors
    """

    def __init__(self, detail: str = "Invalid promotion data.") -> None:
        super().__init__(status_code=400, detail=detail)


class PromotionConflictError(PromotionError):
    """
    Raised when an explicitly supplied slug already belongs to another promotion.

    :return: HTTP 409 exception
    """

    def __init__(self, detail: str = "Slug is already in use.") -> None:
        super().__init__(status_code=409, detail=detail)
