"""FastAPI application for the payroll service."""

from contextlib import asynccontextmanager
from typing import Any, Dict

import uvicorn
from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import __version__
from .assemblers import (
    employee_to_model,
    employees_to_collection,
    order_to_model,
    orders_to_collection,
)
from .config import get_base_url, settings
from .database import SessionLocal, engine, get_db, init_db
from .exceptions import InvalidTransition, NotFoundError
from .schemas import EmployeeRequest, HealthResponse, OrderRequest, Problem
from .seed import load_database
from .services import EmployeeService, OrderService
from .utils import setup_logging

PROBLEM_JSON = "application/problem+json"

# Setup logging
logger = setup_logging("payroll")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and preload sample data on startup"""
    logger.info("Starting payroll service...")
    init_db(engine)

    if settings.seed_database:
        with SessionLocal() as session:
            load_database(session)

    yield

    logger.info("Shutting down payroll service...")
    engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db)


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db)


def base_url(request: Request) -> str:
    return get_base_url(str(request.base_url))


def created(model: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=model,
        headers={"Location": model["_links"]["self"]["href"]},
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(InvalidTransition)
async def invalid_transition_handler(
    request: Request, exc: InvalidTransition
) -> JSONResponse:
    problem = Problem(title=exc.title, detail=exc.detail)
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content=problem.model_dump(),
        media_type=PROBLEM_JSON,
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(
        f"Database error on {request.method} {request.url.path}", exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Orders


@app.get("/orders")
def all_orders(request: Request, service: OrderService = Depends(get_order_service)):
    return orders_to_collection(service.list_orders(), base_url(request))


@app.get("/orders/{order_id}")
def one_order(
    order_id: int, request: Request, service: OrderService = Depends(get_order_service)
):
    return order_to_model(service.get_order(order_id), base_url(request))


@app.post("/orders", status_code=status.HTTP_201_CREATED)
def new_order(
    payload: OrderRequest,
    request: Request,
    service: OrderService = Depends(get_order_service),
):
    order = service.create_order(payload.description, payload.status)
    return created(order_to_model(order, base_url(request)))


@app.delete("/orders/{order_id}/cancel")
def cancel_order(
    order_id: int, request: Request, service: OrderService = Depends(get_order_service)
):
    return order_to_model(service.cancel_order(order_id), base_url(request))


@app.put("/orders/{order_id}/complete")
def complete_order(
    order_id: int, request: Request, service: OrderService = Depends(get_order_service)
):
    return order_to_model(service.complete_order(order_id), base_url(request))


# Employees


@app.get("/employees")
def all_employees(
    request: Request, service: EmployeeService = Depends(get_employee_service)
):
    return employees_to_collection(service.list_employees(), base_url(request))


@app.get("/employees/{employee_id}")
def one_employee(
    employee_id: int,
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
):
    return employee_to_model(service.get_employee(employee_id), base_url(request))


@app.post("/employees", status_code=status.HTTP_201_CREATED)
def new_employee(
    payload: EmployeeRequest,
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = service.create_employee(
        payload.first_name, payload.last_name, payload.role
    )
    return created(employee_to_model(employee, base_url(request)))


@app.put("/employees/{employee_id}", status_code=status.HTTP_201_CREATED)
def replace_employee(
    employee_id: int,
    payload: EmployeeRequest,
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
):
    employee, _ = service.replace_employee(
        employee_id, payload.first_name, payload.last_name, payload.role
    )
    return created(employee_to_model(employee, base_url(request)))


@app.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int, service: EmployeeService = Depends(get_employee_service)
):
    service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(status="healthy", service="payroll", version=__version__)


def run() -> None:
    uvicorn.run("payroll.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
