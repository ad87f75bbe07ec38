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
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class DoctorProfile(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    specialization: Optional[str] = None
    qualification: Optional[str] = None
    registration_number: Optional[str] = None
    registration_council: Optional[str] = None
    hospital_name: Optional[str] = None
    hospital_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    avatar_url: Optional[str] = None
    experience_years: Optional[int] = Field(None, ge=0)


class DoctorCreate(DoctorProfile):
    doctor_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=8)


class DoctorUpdate(DoctorProfile):
    """doctor_id, password and verification state are managed elsewhere."""


class Doctor(DoctorProfile):
    id: str
    doctor_id: str
    is_verified: Optional[bool] = None
    verification_status: Optional[str] = None
    verified_by: Optional[str] = None
    verification_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_login: Optional[datetime] = None


class DoctorLogin(BaseModel):
    doctor_id: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class DoctorEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    doctor: Doctor


class DoctorLoginResponse(DoctorEnvelope):
    access_token: str
    token_type: str = "bearer"


class DoctorStats(BaseModel):
    total_patients: int
    total_appointments: int
    total_prescriptions: int
    upcoming_appointments: int


class DoctorStatsResponse(BaseModel):
    success: bool = True
    stats: DoctorStats
