"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from app.api.routes import users, boats, bookings, captain, investors, erp, fares, reviews

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router)
api_router.include_router(boats.router)
api_router.include_router(bookings.router)
api_router.include_router(captain.router)
api_router.include_router(investors.router)
api_router.include_router(erp.router)
api_router.include_router(fares.router)
api_router.include_router(reviews.router)
