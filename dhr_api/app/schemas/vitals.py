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
from typing import List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field

from .related import DoctorRef, PatientRef


class VitalsColumns(BaseModel):
    blood_pressure_systolic: Optional[int] = None
    blood_pressure_diastolic: Optional[int] = None
    temperature: Optional[float] = None
    blood_sugar: Optional[int] = None
    weight: Optional[float] = None
    height: Optional[float] = None
    bmi: Optional[float] = None
    heart_rate: Optional[int] = None
    oxygen_saturation: Optional[int] = None
    respiratory_rate: Optional[int] = None
    pulse: Optional[int] = None
    notes: Optional[str] = None


class VitalsMeasurements(VitalsColumns):
    blood_pressure_systolic: Optional[int] = Field(None, ge=0, le=300)
    blood_pressure_diastolic: Optional[int] = Field(None, ge=0, le=300)
    temperature: Optional[float] = Field(None, ge=0, le=115)  # fahrenheit
    blood_sugar: Optional[int] = Field(None, ge=0)  # mg/dL
    weight: Optional[float] = Field(None, ge=0, le=500)  # kg
    height: Optional[float] = Field(None, ge=30, le=300)  # cm
    bmi: Optional[float] = Field(None, ge=0, le=999.9)
    heart_rate: Optional[int] = Field(None, ge=0, le=300)
    oxygen_saturation: Optional[int] = Field(None, ge=0, le=100)
    respiratory_rate: Optional[int] = Field(None, ge=0)
    pulse: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None


class VitalsCreate(VitalsMeasurements):
    patient_id: UUID
    doctor_id: UUID
    medical_record_id: Optional[UUID] = None
    recorded_at: Optional[datetime] = None


class VitalsUpdate(VitalsMeasurements):
    """Identifying fields (patient, doctor, recorded_at) cannot be changed."""
    medical_record_id: Optional[UUID] = None


class Vitals(VitalsColumns):
    id: str
    patient_id: str
    doctor_id: str
    medical_record_id: Optional[str] = None
    recorded_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    doctor: Optional[DoctorRef] = None
    patient: Optional[PatientRef] = None


class VitalsEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    vitals: Vitals


class VitalsList(BaseModel):
    success: bool = True
    count: int
    vitals: List[Vitals]


class BloodPressureReading(BaseModel):
    date: Optional[datetime] = None
    systolic: int
    diastolic: int


class MetricReading(BaseModel):
    date: Optional[datetime] = None
    value: Union[int, float]


class BloodPressureTrend(BaseModel):
    avg_systolic: int
    avg_diastolic: int
    readings: List[BloodPressureReading]


class MetricTrend(BaseModel):
    # fixed point string for temperature and weight, 0 when nothing was recorded
    avg: Union[int, str]
    readings: List[MetricReading]


class VitalsTrends(BaseModel):
    blood_pressure: BloodPressureTrend
    temperature: MetricTrend
    weight: MetricTrend
    heart_rate: MetricTrend
    oxygen_saturation: MetricTrend


class VitalsTrendsResponse(BaseModel):
    success: bool = True
    trends: VitalsTrends
    total_readings: int
