from __future__ import annotations


class StoreError(Exception):
    """A document store operation failed (connectivity, query or constraint error)."""

    def __init__(self, collection: str, operation: str, cause: Exception) -> None:
        self.collection = collection
        self.operation = operation
        super().__init__(f"Error during {operation} on '{collection}': {cause}")
