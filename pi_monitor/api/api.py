from fastapi import APIRouter

from pi_monitor.api.endpoints import metrics_api, streaming_api

api_router = APIRouter()

api_router.include_router(metrics_api.router, tags=["metrics"])

api_router.include_router(streaming_api.router, tags=["streaming"])

# routers whose routes make up the api listing
endpoint_routers = [metrics_api.router, streaming_api.router]
