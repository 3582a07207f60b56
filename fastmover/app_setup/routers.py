"""
Registre central des routers.
- API: parcels, payments
- Health: health_router
"""
from fastapi import FastAPI

from fastmover.health.router import router as health_router
from fastmover.parcels import views as parcels_views
from fastmover.payments import views as payments_views

def register_routers(app: FastAPI) -> None:
    app.include_router(parcels_views.router)
    app.include_router(payments_views.router)
    app.include_router(health_router)
