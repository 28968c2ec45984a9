"""
CRMHub error taxonomy

Every error a client can trigger derives from CRMError and carries the HTTP
status and machine-readable code used by the API error handler.
"""

from typing import Any, Dict, Optional

from fastapi import status
from pydantic import BaseModel, Field


class CRMError(Exception):
    """Base class for client-visible errors"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error_code: str = "CRM_ERROR"
    default_message: str = "Request failed"

    def __init__(self, message: Optional[str] = None, **details: Any):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> "ErrorResponse":
        return ErrorResponse(
            message=self.message,
            error_code=self.error_code,
            error_details=self.details or None,
        )


class InvalidModule(CRMError):
    """Requested module is not in the allow-list"""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "INVALID_MODULE"
    default_message = "Invalid module"


class UnknownField(CRMError):
    """Payload references a column the module does not have (or may not write)"""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "UNKNOWN_FIELD"
    default_message = "Unknown field"


class InvalidFieldValue(CRMError):
    """Payload value cannot be stored in the target column"""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "INVALID_FIELD_VALUE"
    default_message = "Invalid field value"


class NotFound(CRMError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"
    default_message = "Record not found"


class ConstraintViolation(CRMError):
    status_code = status.HTTP_409_CONFLICT
    error_code = "CONSTRAINT_VIOLATION"
    default_message = "Constraint violation"


class StorageUnavailable(CRMError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = "STORAGE_UNAVAILABLE"
    default_message = "Storage unavailable"


class ErrorResponse(BaseModel):
    """Error response body"""
    status: str = Field("error", description="Response status")
    message: str = Field(..., description="Response message")
    error_code: Optional[str] = Field(None, description="Specific error code")
    error_details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "error",
                "message": "Unknown field",
                "error_code": "UNKNOWN_FIELD",
                "error_details": {
                    "module": "leads",
                    "fields": ["nonexistent_col"]
                }
            }
        }
