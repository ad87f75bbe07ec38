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
import re
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from dhr_api.app.core.health_card import age_on

PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-()]{10,}$")
AADHAAR_PATTERN = re.compile(r"^\d{4}-\d{4}-\d{4}$")
MINIMUM_AGE = 18


class HealthIdRequest(BaseModel):
    health_id: str = Field(..., min_length=1)


class WorkerRegistration(BaseModel):
    full_name: str = Field(..., min_length=1)
    phone_number: str
    aadhaar_number: str
    date_of_birth: date
    gender: Literal["male", "female", "other", "prefer-not"]
    current_address: str = Field(..., min_length=1)
    original_address: str = Field(..., min_length=1)
    workplace: str = Field(..., min_length=1)
    emergency_contact: str

    @field_validator("full_name", "current_address", "original_address", "workplace")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("phone_number", "emergency_contact")
    @classmethod
    def valid_phone(cls, v: str) -> str:
        if not PHONE_PATTERN.match(v.strip()):
            raise ValueError("Invalid phone number format")
        return v.strip()

    @field_validator("aadhaar_number")
    @classmethod
    def valid_aadhaar(cls, v: str) -> str:
        if not AADHAAR_PATTERN.match(v.strip()):
            raise ValueError("Invalid format. Use XXXX-XXXX-XXXX")
        return v.strip()

    @field_validator("date_of_birth")
    @classmethod
    def adult(cls, v: date) -> date:
        if age_on(v, date.today()) < MINIMUM_AGE:
            raise ValueError(f"You must be {MINIMUM_AGE} years or older to register")
        return v


class Worker(BaseModel):
    id: str
    health_id: str
    full_name: str
    phone_number: Optional[str] = None
    aadhaar_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    current_address: Optional[str] = None
    original_address: Optional[str] = None
    workplace: Optional[str] = None
    emergency_contact: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class WorkerCard(BaseModel):
    worker: Worker
    qr_code: str


class HealthCardResponse(BaseModel):
    success: bool = True
    health_card: Worker


class WorkerEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    worker: Worker
