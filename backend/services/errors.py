# backend/services/errors.py
"""Domain errors raised by the stock services.

Each error carries the HTTP status the API answers with; the mapping is
applied by a single exception handler registered in main.py.
"""


class InventoryError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# --- bad input ---
class InvalidRequest(InventoryError):
    status_code = 400


class InvalidMovementKind(InvalidRequest):
    def __init__(self, kind):
        super().__init__(f"Invalid movement kind: {kind!r} (expected Inbound or Outbound)")
        self.kind = kind


class InvalidQuantity(InvalidRequest):
    def __init__(self, quantity):
        super().__init__(f"Quantity must be a positive integer, got {quantity!r}")
        self.quantity = quantity


class NoFileProvided(InvalidRequest):
    def __init__(self):
        super().__init__("No file uploaded")


# --- missing records ---
class NotFound(InventoryError):
    status_code = 404


class PartNotFound(NotFound):
    def __init__(self, reference: str):
        super().__init__(f"Part not found: {reference}")
        self.reference = reference


# --- duplicates ---
class Conflict(InventoryError):
    status_code = 409


class PartAlreadyExists(Conflict):
    def __init__(self, reference: str):
        super().__init__(f"Part reference already exists: {reference}")
        self.reference = reference


# --- business rules ---
class InsufficientStock(InventoryError):
    status_code = 400

    def __init__(self, reference: str, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for {reference}: {available} available, {requested} requested"
        )
        self.reference = reference
        self.available = available
        self.requested = requested


class StockOverflow(InventoryError):
    status_code = 400

    def __init__(self, reference: str, available: int, requested: int, limit: int):
        super().__init__(
            f"Stock of {reference} would exceed {limit}: {available} in stock, {requested} incoming"
        )
        self.reference = reference
        self.available = available
        self.requested = requested


class StockChanged(Conflict):
    def __init__(self, reference: str):
        super().__init__(f"Stock of {reference} changed during the update, reload and retry")
        self.reference = reference


# --- storage ---
class StoreError(InventoryError):
    status_code = 500
