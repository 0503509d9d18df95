"""
services/customer_service.py
-----------------------------
Business logic for the customer resource.
Request bodies arrive already shaped by the schemas; this layer enforces the
identity rules, calls the repository and turns its results into outcomes.
Errors are raised, never returned.
"""

from models.customer import PRIMARY_KEY, Customer
from repositories.customer_repo import CustomerRepository
from schemas.customer import CustomerCreate, CustomerReplace, CustomerUpdate
from utils.errors import NotFoundError, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Customer not found"
REQUIRED_MISSING_MESSAGE = "Required fields missing"


class CustomerService:
    """Implements List, Get, Create, PartialUpdate, Replace and Delete."""

    def __init__(self, repo: CustomerRepository | None = None):
        self.repo = repo or CustomerRepository()

    def list_customers(self) -> list[dict]:
        return self.repo.list_all()

    def get_customer(self, cust_code: str) -> list[dict]:
        """Return the matching rows, or raise NotFoundError when there are none."""
        rows = self.repo.get_by_code(cust_code)
        if not rows:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return rows

    def create_customer(self, data: CustomerCreate) -> dict:
        customer = Customer(**data.model_dump())
        self.repo.add(customer)
        return {"message": "Customer added successfully", "customerId": customer.CUST_CODE}

    def update_customer(self, cust_code: str, data: CustomerUpdate) -> dict:
        """
        Change only the submitted columns of an existing customer.

        Raises:
            ValidationError: On an empty body or a changed CUST_CODE.
            NotFoundError: If no customer has this code.
        """
        patch = data.model_dump(exclude_unset=True)
        if not patch:
            raise ValidationError("No fields to update")
        _check_identity(cust_code, patch)

        if self.repo.update_fields(cust_code, patch) == 0:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return {"message": "Customer updated successfully"}

    def replace_customer(self, cust_code: str, data: CustomerReplace) -> dict:
        """
        Rewrite every column of a customer, creating it if it does not exist.
        Columns missing from the body are stored as null.
        """
        values = data.model_dump()
        _check_identity(cust_code, data.model_dump(exclude_unset=True))
        values[PRIMARY_KEY] = cust_code

        self.repo.replace(Customer(**values))
        return {"message": "Customer replaced successfully"}

    def delete_customer(self, cust_code: str) -> dict:
        if self.repo.delete(cust_code) == 0:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return {"message": "Customer deleted successfully"}


def _check_identity(cust_code: str, submitted: dict) -> None:
    """The path code is the row identity; a body may repeat it but not change it."""
    if PRIMARY_KEY in submitted and submitted[PRIMARY_KEY] != cust_code:
        logger.warning(f"Rejected attempt to change {PRIMARY_KEY} of {cust_code}")
        raise ValidationError(f"{PRIMARY_KEY} cannot be changed")
