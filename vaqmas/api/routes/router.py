from fastapi import APIRouter

from vaqmas.api.routes import appointments, articles, auth, claims, dashboard, locations, pediatricians, products, users

api_router = APIRouter()

# Public routes
api_router.include_router(auth.router)
api_router.include_router(products.router)
api_router.include_router(locations.router)
api_router.include_router(articles.router)

# Callable functions
api_router.include_router(claims.router)

# Admin routes
api_router.include_router(dashboard.router)
api_router.include_router(products.admin_router)
api_router.include_router(locations.admin_router)
api_router.include_router(articles.admin_router)
api_router.include_router(users.router)
api_router.include_router(pediatricians.router)
api_router.include_router(appointments.router)
