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
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from .related import DoctorRef, PatientRef

PrescriptionStatus = Literal["active", "completed", "discontinued"]


class PrescriptionDetails(BaseModel):
    dosage: Optional[str] = None
    frequency: Optional[str] = None
    duration: Optional[str] = None
    instructions: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class PrescriptionItem(PrescriptionDetails):
    medicine_name: str = Field(..., min_length=1)
    status: Optional[PrescriptionStatus] = None


class PrescriptionCreate(PrescriptionItem):
    patient_id: UUID
    doctor_id: UUID
    medical_record_id: Optional[UUID] = None


class BulkPrescriptionCreate(BaseModel):
    patient_id: UUID
    doctor_id: UUID
    medical_record_id: Optional[UUID] = None
    prescriptions: List[PrescriptionItem] = Field(..., min_length=1)


class PrescriptionUpdate(PrescriptionDetails):
    medicine_name: Optional[str] = None
    status: Optional[PrescriptionStatus] = None


class Prescription(PrescriptionDetails):
    id: str
    patient_id: str
    doctor_id: str
    medical_record_id: Optional[str] = None
    medicine_name: str
    status: Optional[str] = None
    prescribed_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    doctor: Optional[DoctorRef] = None
    patient: Optional[PatientRef] = None


class PrescriptionEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    prescription: Prescription


class PrescriptionList(BaseModel):
    success: bool = True
    message: Optional[str] = None
    count: int
    prescriptions: List[Prescription]
