"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class InsufficientUnitsError(AppError):
    """Raised when attempting to sell more units than held."""

    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code="INSUFFICIENT_UNITS")


class InsufficientFundsError(AppError):
    """Raised when a purchase costs more than the wallet holds."""

    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code="INSUFFICIENT_FUNDS")


class UnauthenticatedError(AppError):
    """Raised when an operation needs a signed-in user."""

    status_code = 401

    def __init__(self, message: str = "Please sign in to continue"):
        super().__init__(message, code="UNAUTHENTICATED")


class StoreError(AppError):
    """Raised when a record store write or read fails."""

    status_code = 502

    def __init__(self, message: str):
        super().__init__(message, code="STORE_FAILURE")


class ProviderError(AppError):
    """Raised by a fund data provider when a single request fails."""

    status_code = 502

    def __init__(self, message: str):
        super().__init__(message, code="PROVIDER_ERROR")


class CatalogUnavailableError(AppError):
    """Raised when no fund in the catalog could be loaded. Retryable."""

    status_code = 503

    def __init__(self, message: str = "Failed to load fund catalog"):
        super().__init__(message, code="CATALOG_UNAVAILABLE")


class HistoryUnavailableError(AppError):
    """Raised when a fund's NAV history could not be loaded. Retryable."""

    status_code = 503

    def __init__(self, fund_id: str):
        super().__init__(f"Failed to load history for fund {fund_id}", code="HISTORY_UNAVAILABLE")
