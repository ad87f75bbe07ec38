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
from typing import Any, List, Optional
from urllib.parse import quote_plus

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")

    API_TITLE: str = "DHR API"
    API_ROOT_PATH: str = ""
    LOGLEVEL: str = "info"
    CORS_ORIGINS: List[str] = ["*"]

    # supabase exposes a plain postgres endpoint next to its REST gateway
    SUPABASE_DB_SERVER: str = "localhost"
    SUPABASE_DB_PORT: int = 5432
    SUPABASE_DB_USER: str = "postgres"
    SUPABASE_DB_PASSWORD: str
    SUPABASE_DB_NAME: str = "postgres"
    SUPABASE_DB_POOL_MIN: int = 1
    SUPABASE_DB_POOL_MAX: int = 10
    SUPABASE_DB_URI: Optional[str] = None

    @field_validator("SUPABASE_DB_URI", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> Any:
        if isinstance(v, str):
            return v
        values = info.data
        return "postgresql://{user}:{password}@{host}:{port}/{db}".format(
            user=values.get("SUPABASE_DB_USER"),
            password=quote_plus(values.get("SUPABASE_DB_PASSWORD") or ""),
            host=values.get("SUPABASE_DB_SERVER"),
            port=values.get("SUPABASE_DB_PORT"),
            db=values.get("SUPABASE_DB_NAME") or "",
        )

    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "dhr-api"
    JWT_EXPIRE_MINUTES: int = 12 * 60

    PASSWORD_HASH_ITERATIONS: int = 390_000

    # default page sizes for list endpoints
    VITALS_HISTORY_LIMIT: int = 50
    VITALS_TRENDS_LIMIT: int = 10
    UPCOMING_APPOINTMENTS_LIMIT: int = 20
    DOCTOR_RECORDS_LIMIT: int = 50


settings = Settings()
