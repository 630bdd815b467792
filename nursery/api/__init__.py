# nursery/api/__init__.py
from fastapi import APIRouter

from nursery.api.routers import admin, consultations, health, orders, products, users

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(users.router)
api_router.include_router(products.router)
api_router.include_router(orders.router)
api_router.include_router(consultations.router)
api_router.include_router(admin.router)
