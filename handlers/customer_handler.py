"""
handlers/customer_handler.py
-----------------------------
HTTP routes for the customer resource.

Routes are plain (sync) functions, so FastAPI runs them in its worker
threadpool and a slow store never blocks the event loop. Errors raised by
the service are turned into responses by the handler registered in main.py.
"""

from fastapi import APIRouter, Depends, status

from schemas.customer import CustomerCreate, CustomerReplace, CustomerUpdate
from services.customer_service import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])

_ERROR_RESPONSES = {500: {"description": "Server error"}}
_NOT_FOUND = {404: {"description": "Customer not found"}}


def get_customer_service() -> CustomerService:
    return CustomerService()


@router.get("", summary="Get all customers", responses=_ERROR_RESPONSES)
def list_customers_api(service: CustomerService = Depends(get_customer_service)):
    return service.list_customers()


@router.get(
    "/{cust_code}",
    summary="Get a specific customer by CUST_CODE",
    responses={**_NOT_FOUND, **_ERROR_RESPONSES},
)
def get_customer_api(cust_code: str, service: CustomerService = Depends(get_customer_service)):
    return service.get_customer(cust_code)


@router.post(
    "",
    summary="Add a new customer",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Required fields missing"}, **_ERROR_RESPONSES},
)
def create_customer_api(
    payload: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
):
    return service.create_customer(payload)


@router.patch(
    "/{cust_code}",
    summary="Update a specific customer",
    responses={400: {"description": "Invalid update"}, **_NOT_FOUND, **_ERROR_RESPONSES},
)
def update_customer_api(
    cust_code: str,
    payload: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    return service.update_customer(cust_code, payload)


@router.put(
    "/{cust_code}",
    summary="Replace a specific customer",
    responses={400: {"description": "Required fields missing"}, **_ERROR_RESPONSES},
)
def replace_customer_api(
    cust_code: str,
    payload: CustomerReplace,
    service: CustomerService = Depends(get_customer_service),
):
    return service.replace_customer(cust_code, payload)


@router.delete(
    "/{cust_code}",
    summary="Delete a specific customer",
    responses={**_NOT_FOUND, **_ERROR_RESPONSES},
)
def delete_customer_api(cust_code: str, service: CustomerService = Depends(get_customer_service)):
    return service.delete_customer(cust_code)
