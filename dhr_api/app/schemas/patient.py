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
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .medical_record import MedicalRecord
from .prescription import Prescription
from .vitals import Vitals


class PatientUpdate(BaseModel):
    name: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    gender: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    blood_group: Optional[str] = None
    emergency_contact: Optional[str] = None
    preferred_language: Optional[str] = None


class Patient(PatientUpdate):
    id: str
    health_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class HealthIdLookup(BaseModel):
    health_id: str = Field(..., min_length=1)


class PatientEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    patient: Patient


class PatientHistory(BaseModel):
    medical_records: List[MedicalRecord]
    prescriptions: List[Prescription]
    vitals: List[Vitals]


class PatientHistoryResponse(BaseModel):
    success: bool = True
    history: PatientHistory


class PatientStats(BaseModel):
    total_visits: int
    active_prescriptions: int
    total_appointments: int
    upcoming_appointments: int
    latest_vitals: Optional[Vitals] = None


class PatientStatsResponse(BaseModel):
    success: bool = True
    stats: PatientStats
