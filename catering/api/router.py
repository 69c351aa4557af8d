"""
API router - combines all resource endpoints under /api
"""
from fastapi import APIRouter
from catering.api.endpoints import (
    catering_services, customers, items, locations, meal_set_orders,
    meal_sets, my_orders, orders, payments
)

api_router = APIRouter()

# Storefront
api_router.include_router(orders.router, prefix="/orders", tags=["Orders"])
api_router.include_router(meal_set_orders.router, prefix="/meal-set-orders", tags=["Orders"])
api_router.include_router(my_orders.router, prefix="/my-orders", tags=["Orders"])

# Back office
api_router.include_router(customers.router, prefix="/customers", tags=["Customers"])
api_router.include_router(items.router, prefix="/items", tags=["Catalog"])
api_router.include_router(meal_sets.router, prefix="/meal-sets", tags=["Catalog"])
api_router.include_router(locations.router, prefix="/locations", tags=["Locations"])
api_router.include_router(catering_services.router, prefix="/catering-services", tags=["Catering Services"])
api_router.include_router(payments.router, prefix="/payments", tags=["Payments"])
