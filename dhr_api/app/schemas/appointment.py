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
from datetime import datetime, timezone
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from .related import DoctorRef, PatientRef

AppointmentStatus = Literal["scheduled", "completed", "cancelled", "no-show"]


class AppointmentDetails(BaseModel):
    appointment_type: Optional[str] = None  # follow-up, consultation, emergency
    duration_minutes: Optional[int] = Field(None, gt=0)
    reason: Optional[str] = None
    notes: Optional[str] = None


class AppointmentCreate(AppointmentDetails):
    patient_id: UUID
    doctor_id: UUID
    medical_record_id: Optional[UUID] = None
    appointment_date: datetime
    status: Optional[AppointmentStatus] = None


class AppointmentUpdate(AppointmentDetails):
    """Participants and reminder state are fixed once booked."""
    appointment_date: Optional[datetime] = None
    status: Optional[AppointmentStatus] = None
    medical_record_id: Optional[UUID] = None


class Appointment(AppointmentDetails):
    id: str
    patient_id: str
    doctor_id: str
    medical_record_id: Optional[str] = None
    appointment_date: datetime
    status: str
    reminder_sent: Optional[bool] = None
    reminder_sent_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    cancelled_at: Optional[datetime] = None
    cancelled_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    doctor: Optional[DoctorRef] = None
    patient: Optional[PatientRef] = None


class AppointmentCancel(BaseModel):
    reason: str = Field(..., min_length=1)
    cancelled_by: Literal["doctor", "patient", "system"] = "doctor"


class DateRange(BaseModel):
    start_date: datetime
    end_date: datetime

    @field_validator("start_date", "end_date")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        # appointment_date is stored with a time zone, naive bounds are read as UTC
        return v if v.tzinfo is not None else v.replace(tzinfo=timezone.utc)

    @model_validator(mode="after")
    def check_order(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class AppointmentEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    appointment: Appointment


class AppointmentList(BaseModel):
    success: bool = True
    count: int
    appointments: List[Appointment]
