from fastapi import APIRouter

from examples_api.api.routers import examples

api_router = APIRouter()

api_router.include_router(examples.router)
