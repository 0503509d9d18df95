from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerBase(BaseModel):
    WORKING_AREA: Optional[str] = None
    CUST_COUNTRY: Optional[str] = None
    GRADE: Optional[int] = None

    OPENING_AMT: Optional[Decimal] = None
    RECEIVE_AMT: Optional[Decimal] = None
    PAYMENT_AMT: Optional[Decimal] = None
    OUTSTANDING_AMT: Optional[Decimal] = None

    PHONE_NO: Optional[str] = None
    AGENT_CODE: Optional[str] = None


class CustomerCreate(CustomerBase):
    # Keys that are not columns are ignored.
    CUST_CODE: str = Field(min_length=1)
    CUST_NAME: str = Field(min_length=1)
    CUST_CITY: str = Field(min_length=1)


class CustomerReplace(CustomerBase):
    # The path supplies the code; a body may only repeat it.
    CUST_CODE: Optional[str] = None
    CUST_NAME: str = Field(min_length=1)
    CUST_CITY: str = Field(min_length=1)


class CustomerUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    CUST_CODE: Optional[str] = None
    CUST_NAME: Optional[str] = None
    CUST_CITY: Optional[str] = None
    WORKING_AREA: Optional[str] = None
    CUST_COUNTRY: Optional[str] = None
    GRADE: Optional[int] = None

    OPENING_AMT: Optional[Decimal] = None
    RECEIVE_AMT: Optional[Decimal] = None
    PAYMENT_AMT: Optional[Decimal] = None
    OUTSTANDING_AMT: Optional[Decimal] = None

    PHONE_NO: Optional[str] = None
    AGENT_CODE: Optional[str] = None
