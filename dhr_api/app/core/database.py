import databases
from fastapi import Request

from dhr_api.app.core.config import settings


def create_database(url: str = None) -> databases.Database:
    return databases.Database(url or settings.SUPABASE_DB_URI,
                              min_size=settings.SUPABASE_DB_POOL_MIN,
                              max_size=settings.SUPABASE_DB_POOL_MAX)


def get_database(request: Request) -> databases.Database:
    return request.app.state.database
