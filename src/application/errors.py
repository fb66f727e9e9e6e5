from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidIdentifier(AppError):
    code = "invalid_identifier"
    status_code = 400


class ValidationError(AppError):
    code = "validation_error"
    status_code = 400


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class StoreError(AppError):
    code = "store_error"
    status_code = 500


DUPLICATE_CUSTOMER_NAME = "Duplicate name: a customer with this name already exists"
