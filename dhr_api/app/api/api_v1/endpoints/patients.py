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
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

import dhr_api.app.schemas as schemas
from dhr_api.app.api.deps import (get_appointment_store, get_medical_record_store, get_patient_store,
                                  get_prescription_store, get_vitals_store, to_row)
from dhr_api.app.core.config import settings
from dhr_api.app.stores import AppointmentStore, MedicalRecordStore, PatientStore, PrescriptionStore, VitalsStore
from dhr_api.app.stores.base import utcnow

router = APIRouter()


@router.post("/health-id", response_model=schemas.PatientEnvelope)
async def get_patient_by_health_id(
        body: schemas.HealthIdLookup,
        store: PatientStore = Depends(get_patient_store)):
    patient = await store.get_by_health_id(body.health_id.strip())
    if patient is None:
        raise HTTPException(status_code=404, detail="Patient not found")
    return {"patient": patient}


@router.get("/{patient_id}", response_model=schemas.PatientEnvelope)
async def get_patient_by_id(
        patient_id: UUID,
        store: PatientStore = Depends(get_patient_store)):
    patient = await store.get(str(patient_id))
    if patient is None:
        raise HTTPException(status_code=404, detail="Patient not found")
    return {"patient": patient}


@router.get("/{patient_id}/history", response_model=schemas.PatientHistoryResponse)
async def get_patient_history(
        patient_id: UUID,
        patients: PatientStore = Depends(get_patient_store),
        records: MedicalRecordStore = Depends(get_medical_record_store),
        prescriptions: PrescriptionStore = Depends(get_prescription_store),
        vitals: VitalsStore = Depends(get_vitals_store)):
    patient_id = str(patient_id)
    if await patients.get(patient_id) is None:
        raise HTTPException(status_code=404, detail="Patient not found")

    return {"history": {
        "medical_records": await records.for_patient(patient_id),
        "prescriptions": await prescriptions.for_patient(patient_id),
        "vitals": await vitals.fetch_recent(patient_id, limit=settings.VITALS_HISTORY_LIMIT),
    }}


@router.get("/{patient_id}/stats", response_model=schemas.PatientStatsResponse)
async def get_patient_stats(
        patient_id: UUID,
        patients: PatientStore = Depends(get_patient_store),
        records: MedicalRecordStore = Depends(get_medical_record_store),
        prescriptions: PrescriptionStore = Depends(get_prescription_store),
        appointments: AppointmentStore = Depends(get_appointment_store),
        vitals: VitalsStore = Depends(get_vitals_store)):
    patient_id = str(patient_id)
    if await patients.get(patient_id) is None:
        raise HTTPException(status_code=404, detail="Patient not found")

    return {"stats": {
        "total_visits": await records.count_for_patient(patient_id),
        "active_prescriptions": await prescriptions.count_active_for_patient(patient_id),
        "total_appointments": await appointments.count_for_patient(patient_id),
        "upcoming_appointments": await appointments.count_for_patient(patient_id, upcoming_after=utcnow()),
        "latest_vitals": await vitals.latest(patient_id),
    }}


@router.put("/{patient_id}", response_model=schemas.PatientEnvelope)
async def update_patient(
        patient_id: UUID,
        body: schemas.PatientUpdate,
        store: PatientStore = Depends(get_patient_store)):
    patient = await store.update(str(patient_id), to_row(body, exclude_unset=True))
    if patient is None:
        raise HTTPException(status_code=404, detail="Patient not found")
    return {"message": "Patient updated successfully", "patient": patient}
