"""
Standard type definitions for database models.

On-chain amounts are uint256 values in base units. They routinely exceed
64 bits and Python's default decimal context (28 significant digits), so
they are stored exactly and never pass through float.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import Numeric, String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine


class BaseUnitAmount(TypeDecorator):
    """
    Arbitrary-precision integer amount.

    PostgreSQL: unbounded NUMERIC.
    SQLite: decimal string (SQLite NUMERIC affinity would coerce to float).
    """

    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(96))
        return dialect.type_descriptor(Numeric(asdecimal=True))

    def process_bind_param(
        self, value: Decimal | int | None, dialect: Dialect
    ) -> Decimal | str | None:
        if value is None:
            return None
        exact = Decimal(int(value))
        if dialect.name == "sqlite":
            return str(exact)
        return exact

    def process_result_value(
        self, value: Decimal | str | None, dialect: Dialect
    ) -> Decimal | None:
        if value is None:
            return None
        return Decimal(value)
