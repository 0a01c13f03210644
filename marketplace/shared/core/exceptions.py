# 📄 File: marketplace/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the special error types the marketplace uses to say clearly what went wrong,
# like "not enough money in the wallet" or "that email is already registered".
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization so an embedding API can return them unchanged.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Domain entities, repository implementations, session management, domain services

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class MarketplaceException(Exception):
    """
    Base exception class for the marketplace data layer.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }

    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        return HTTPException(
            status_code=self.status_code,
            detail=self.to_dict()["error"]
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(MarketplaceException):
    """
    Exception raised for data validation failures outside pydantic models.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(MarketplaceException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class DuplicateResourceError(MarketplaceException):
    """
    Exception raised when attempting to create duplicate resources.
    Used for unique constraint violations.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field
        if value:
            details["value"] = value

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_RESOURCE"
        )


# =============================================================================
# BUSINESS LOGIC EXCEPTIONS
# =============================================================================

class BusinessRuleViolationError(MarketplaceException):
    """
    Exception raised when business rules are violated.
    """

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "BUSINESS_RULE_VIOLATION"
    ):
        if not details:
            details = {}

        if rule:
            details["rule"] = rule
        if context:
            details["context"] = context

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            details=details,
            error_code=error_code
        )


class InsufficientBalanceError(BusinessRuleViolationError):
    """Raised when a wallet debit exceeds the available balance."""

    def __init__(
        self,
        message: str = "Insufficient wallet balance",
        balance: Optional[float] = None,
        requested: Optional[float] = None,
        wallet_id: Optional[str] = None
    ):
        context: Dict[str, Any] = {}
        if balance is not None:
            context["balance"] = balance
        if requested is not None:
            context["requested"] = requested
        if wallet_id:
            context["wallet_id"] = wallet_id

        super().__init__(
            message=message,
            rule="wallet_balance_non_negative",
            context=context,
            error_code="INSUFFICIENT_BALANCE"
        )


class InsufficientStockError(BusinessRuleViolationError):
    """
    Raised when a stock-like counter (variant stock, inventory, rooms)
    cannot cover the requested quantity.
    """

    def __init__(
        self,
        message: str = "Insufficient stock",
        resource_type: Optional[str] = None,
        available: Optional[int] = None,
        requested: Optional[int] = None
    ):
        context: Dict[str, Any] = {}
        if resource_type:
            context["resource_type"] = resource_type
        if available is not None:
            context["available"] = available
        if requested is not None:
            context["requested"] = requested

        super().__init__(
            message=message,
            rule="stock_non_negative",
            context=context,
            error_code="INSUFFICIENT_STOCK"
        )


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(MarketplaceException):
    """
    Exception raised for database operation failures.
    Used for connection issues, query failures, etc.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(MarketplaceException):
    """
    Exception raised for repository/database operation failures.
    Used when database operations fail at the repository layer.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


class TransactionError(MarketplaceException):
    """
    Exception raised when a database transaction fails.
    Used to wrap commit/rollback errors in DB sessions.
    """

    def __init__(
        self,
        message: str = "Database transaction failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="TRANSACTION_ERROR"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dict: Exception data as dictionary
    """
    if isinstance(exception, MarketplaceException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
            "status_code": 500
        }
    }


def is_client_error(exception: Exception) -> bool:
    """Check if exception represents a client error (4xx)."""
    if isinstance(exception, MarketplaceException):
        return 400 <= exception.status_code < 500

    if isinstance(exception, HTTPException):
        return 400 <= exception.status_code < 500

    return False
