"""
Application error taxonomy

Services raise these exceptions; main.py turns them into JSON responses of the
form {"error": message, "category": category} with the matching status code.
"""


class AppError(Exception):
    """Base class for errors that are reported to API clients"""

    status_code = 500
    category = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message, "category": self.category}


class InvalidRequestError(AppError):
    """Missing or malformed client input"""

    status_code = 400
    category = "validation"


class InvalidIdentifierError(InvalidRequestError):
    """Identifier string that cannot be converted to an ObjectId"""

    category = "invalid_id"

    def __init__(self, value, field: str = "id"):
        super().__init__(f"Invalid {field}: {value!r} is not a valid ObjectId")
        self.value = value
        self.field = field


class NotFoundError(AppError):
    """Well-formed identifier with no matching document"""

    status_code = 404
    category = "not_found"


class StoreError(AppError):
    """Connection or query failure in the document store"""

    status_code = 500
    category = "store"
