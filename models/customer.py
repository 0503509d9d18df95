"""
models/customer.py
------------------
Domain model for the `customer` table.
"""

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Optional

TABLE_NAME = "customer"
PRIMARY_KEY = "CUST_CODE"

# Canonical column order, used by INSERT and upsert statements.
COLUMNS: tuple[str, ...] = (
    "CUST_CODE",
    "CUST_NAME",
    "CUST_CITY",
    "WORKING_AREA",
    "CUST_COUNTRY",
    "GRADE",
    "OPENING_AMT",
    "RECEIVE_AMT",
    "PAYMENT_AMT",
    "OUTSTANDING_AMT",
    "PHONE_NO",
    "AGENT_CODE",
)

REQUIRED_FIELDS: tuple[str, ...] = ("CUST_CODE", "CUST_NAME", "CUST_CITY")


@dataclass
class Customer:
    """
    A single customer row.

    Attributes mirror the table columns one to one (upper-case, as stored).
    Every column except the three required ones may be None.
    """
    CUST_CODE: str
    CUST_NAME: str
    CUST_CITY: str
    WORKING_AREA: Optional[str] = None
    CUST_COUNTRY: Optional[str] = None
    GRADE: Optional[int] = None
    OPENING_AMT: Optional[Decimal] = None
    RECEIVE_AMT: Optional[Decimal] = None
    PAYMENT_AMT: Optional[Decimal] = None
    OUTSTANDING_AMT: Optional[Decimal] = None
    PHONE_NO: Optional[str] = None
    AGENT_CODE: Optional[str] = None

    def to_params(self) -> tuple:
        """Column values in `COLUMNS` order, ready for positional binding."""
        values = asdict(self)
        return tuple(values[col] for col in COLUMNS)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
