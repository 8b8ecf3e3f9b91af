"""Errors raised by the data access layer."""

from sqlalchemy.exc import IntegrityError


class ConstraintViolation(Exception):
    """Raised when a write would break a NOT NULL, foreign key or unique constraint."""

    def __init__(self, table: str, detail: str):
        self.table = table
        self.detail = detail
        super().__init__(f"Constraint violation on '{table}': {detail}")

    @classmethod
    def from_integrity_error(cls, table: str, exc: IntegrityError) -> "ConstraintViolation":
        return cls(table, str(exc.orig) if exc.orig is not None else str(exc))
