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
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from .prescription import Prescription
from .related import DoctorRef, PatientRef
from .vitals import Vitals


class UploadedFile(BaseModel):
    name: str
    url: str
    type: str = "unknown"
    uploaded_at: Optional[datetime] = None


class MedicalRecordDetails(BaseModel):
    visit_type: Optional[str] = None  # consultation, follow-up, emergency
    symptoms: Optional[str] = None
    diagnosis: Optional[str] = None
    diagnosis_code: Optional[str] = None
    disease_status: Optional[str] = None
    clinical_notes: Optional[str] = None
    treatment_plan: Optional[str] = None
    patient_progress: Optional[str] = None
    test_results: Optional[Any] = None
    health_education_sent: Optional[bool] = None
    preferred_language: Optional[str] = None
    communication_method: Optional[List[str]] = None


class MedicalRecordCreate(MedicalRecordDetails):
    patient_id: UUID
    doctor_id: UUID
    visit_date: Optional[datetime] = None


class MedicalRecordUpdate(MedicalRecordDetails):
    visit_date: Optional[datetime] = None


class MedicalRecord(MedicalRecordDetails):
    id: str
    patient_id: str
    doctor_id: str
    visit_date: Optional[datetime] = None
    uploaded_files: Optional[List[UploadedFile]] = None
    is_active: Optional[bool] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    doctor: Optional[DoctorRef] = None
    patient: Optional[PatientRef] = None


class ComprehensiveMedicalRecord(MedicalRecord):
    prescriptions: List[Prescription] = []
    vitals: List[Vitals] = []


class FileUpload(BaseModel):
    file_name: str = Field(..., min_length=1)
    file_url: str = Field(..., min_length=1)
    file_type: Optional[str] = None


class MedicalRecordEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    medical_record: MedicalRecord


class ComprehensiveMedicalRecordResponse(BaseModel):
    success: bool = True
    medical_record: ComprehensiveMedicalRecord


class MedicalRecordList(BaseModel):
    success: bool = True
    count: int
    medical_records: List[MedicalRecord]
