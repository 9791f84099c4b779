from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_facade.api.error_handlers import register_error_handlers
from employee_facade.api.v1.router import api_router
from employee_facade.core.config import settings
from employee_facade.services.employee_client import EmployeeApiClient
from employee_facade.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    if settings.DEBUG:
        logging.getLogger().setLevel(logging.DEBUG)

    client = EmployeeApiClient.from_settings(settings)
    application.state.employee_client = client
    application.state.employee_service = EmployeeService(client)
    try:
        yield
    finally:
        await client.close()
        application.state.employee_service = None
        application.state.employee_client = None


app = FastAPI(
    title="Employee Facade API",
    description="Employee listing, search and salary aggregates over the employee-record API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Facade API"}
