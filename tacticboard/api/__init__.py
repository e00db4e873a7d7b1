from fastapi import APIRouter
from .routes import analysis, chat, relay

api_router = APIRouter()

api_router.include_router(analysis.router, prefix="/ai", tags=["analysis"])
api_router.include_router(chat.router, prefix="/api", tags=["chat"])
api_router.include_router(relay.router, tags=["relay"])
