from fastapi import APIRouter

from classpoints.api import data, points, ranking, settings, students, system

api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(students.router)
api_router.include_router(points.router)
api_router.include_router(ranking.router)
api_router.include_router(settings.router)
api_router.include_router(data.router)
