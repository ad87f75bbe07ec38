#
# DHR API is the backend of a digital health-record service for doctors,
# patients and registered workers.
#
# Copyright (c) 2025 The DHR API Authors.
#
# This file is part of DHR API.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.
#
from dhr_api.app.core.config import settings
from dhr_api.app.api.api_v1.api import api_router
from dhr_api.app.core.database import create_database
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

# set up logging
log_level = {"debug": logging.DEBUG, "info": logging.INFO, "warning": logging.WARNING, "error": logging.ERROR,
             "critical": logging.CRITICAL}
logging.basicConfig(level=log_level[settings.LOGLEVEL.lower()])
_LOGGER = logging.getLogger(__name__)

app = FastAPI(title=settings.API_TITLE, root_path=settings.API_ROOT_PATH)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    app.state.database = create_database()
    await app.state.database.connect()
    _LOGGER.info("Connected to %s:%s/%s", settings.SUPABASE_DB_SERVER, settings.SUPABASE_DB_PORT,
                 settings.SUPABASE_DB_NAME)


@app.on_event("shutdown")
async def shutdown():
    await app.state.database.disconnect()


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    _LOGGER.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

FastAPIInstrumentor.instrument_app(app)
app.include_router(api_router, prefix="/v1")
