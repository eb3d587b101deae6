from fastapi import APIRouter

from oraclequery.api.routes import query, utils

api_router = APIRouter()
api_router.include_router(query.router)
api_router.include_router(utils.router)
