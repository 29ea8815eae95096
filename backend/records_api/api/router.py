from fastapi import APIRouter

from records_api.api.endpoints import departments, documents, employees, health

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(documents.router)
api_router.include_router(departments.router)
