"""
API Routes package.
"""
from fastapi import APIRouter

from career_ladder.api.routes.auth import router as auth_router
from career_ladder.api.routes.health import router as health_router
from career_ladder.api.routes.users import router as users_router
from career_ladder.api.routes.teams import router as teams_router
from career_ladder.api.routes.domains import router as domains_router
from career_ladder.api.routes.skills import router as skills_router
from career_ladder.api.routes.ladders import router as ladders_router
from career_ladder.api.routes.waivers import router as waivers_router
from career_ladder.api.routes.dashboard import router as dashboard_router

# Main API router
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(teams_router)
api_router.include_router(domains_router)
api_router.include_router(skills_router)
api_router.include_router(ladders_router)
api_router.include_router(waivers_router)
api_router.include_router(dashboard_router)

__all__ = [
    "api_router",
    "auth_router",
    "health_router",
    "users_router",
    "teams_router",
    "domains_router",
    "skills_router",
    "ladders_router",
    "waivers_router",
    "dashboard_router",
]
