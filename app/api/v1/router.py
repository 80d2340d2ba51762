"""API V1 Router"""

from fastapi import APIRouter

# Import endpoint routers
from app.api.v1.endpoints import clients, dashboard, fees, invoices, payments

# Create API v1 router
api_router = APIRouter()

# Include endpoint routers with prefixes and tags
api_router.include_router(clients.router, prefix="/clients", tags=["Clients"])
api_router.include_router(fees.router, prefix="/fees", tags=["Fees"])
api_router.include_router(payments.router, prefix="/payments", tags=["Payments"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["Invoices"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
