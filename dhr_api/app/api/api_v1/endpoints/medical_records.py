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

from fastapi import APIRouter, Depends, HTTPException, status

import dhr_api.app.schemas as schemas
from dhr_api.app.api.deps import get_medical_record_store, get_prescription_store, get_vitals_store, to_row
from dhr_api.app.core.config import settings
from dhr_api.app.stores import MedicalRecordStore, PrescriptionStore, VitalsStore

router = APIRouter()


def _found(record):
    if record is None:
        raise HTTPException(status_code=404, detail="Medical record not found")
    return record


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.MedicalRecordEnvelope)
async def create_medical_record(
        body: schemas.MedicalRecordCreate,
        store: MedicalRecordStore = Depends(get_medical_record_store)):
    record = await store.create(to_row(body, exclude_none=True))
    return {"message": "Medical record created successfully", "medical_record": record}


@router.get("/patient/{patient_id}", response_model=schemas.MedicalRecordList)
async def get_patient_medical_records(
        patient_id: UUID,
        store: MedicalRecordStore = Depends(get_medical_record_store)):
    records = await store.for_patient(str(patient_id))
    return {"count": len(records), "medical_records": records}


@router.get("/patient/{patient_id}/active", response_model=schemas.MedicalRecordEnvelope)
async def get_active_medical_record(
        patient_id: UUID,
        store: MedicalRecordStore = Depends(get_medical_record_store)):
    record = await store.active_for_patient(str(patient_id))
    if record is None:
        raise HTTPException(status_code=404, detail="No active medical record found")
    return {"medical_record": record}


@router.get("/doctor/{doctor_id}", response_model=schemas.MedicalRecordList)
async def get_doctor_medical_records(
        doctor_id: UUID,
        limit: int = settings.DOCTOR_RECORDS_LIMIT,
        store: MedicalRecordStore = Depends(get_medical_record_store)):
    if limit < 1:
        raise HTTPException(status_code=400, detail="limit must be a positive integer")
    records = await store.for_doctor(str(doctor_id), limit=limit)
    return {"count": len(records), "medical_records": records}


@router.get("/{record_id}", response_model=schemas.MedicalRecordEnvelope)
async def get_medical_record_by_id(
        record_id: UUID,
        store: MedicalRecordStore = Depends(get_medical_record_store)):
    return {"medical_record": _found(await store.get(str(record_id)))}


@router.get("/{record_id}/comprehensive", response_model=schemas.ComprehensiveMedicalRecordResponse)
async def get_comprehensive_medical_record(
        record_id: UUID,
        store: MedicalRecordStore = Depends(get_medical_record_store),
        prescriptions: PrescriptionStore = Depends(get_prescription_store),
        vitals: VitalsStore = Depends(get_vitals_store)):
    record = _found(await store.get(str(record_id)))
    record["prescriptions"] = await prescriptions.for_medical_record(str(record_id))
    record["vitals"] = await vitals.all_for_medical_record(str(record_id))
    return {"medical_record": record}


@router.put("/{record_id}", response_model=schemas.MedicalRecordEnvelope)
async def update_medical_record(
        record_id: UUID,
        body: schemas.MedicalRecordUpdate,
        store: MedicalRecordStore = Depends(get_medical_record_store)):
    record = _found(await store.update(str(record_id), to_row(body, exclude_unset=True)))
    return {"message": "Medical record updated successfully", "medical_record": record}


@router.post("/{record_id}/upload", response_model=schemas.MedicalRecordEnvelope)
async def add_file_to_medical_record(
        record_id: UUID,
        body: schemas.FileUpload,
        store: MedicalRecordStore = Depends(get_medical_record_store)):
    file_info = {"name": body.file_name, "url": body.file_url, "type": body.file_type or "unknown"}
    record = _found(await store.add_file(str(record_id), file_info))
    return {"message": "File added to medical record successfully", "medical_record": record}


@router.post("/{record_id}/complete", response_model=schemas.MedicalRecordEnvelope)
async def complete_medical_record(
        record_id: UUID,
        store: MedicalRecordStore = Depends(get_medical_record_store)):
    record = _found(await store.complete(str(record_id)))
    return {"message": "Medical record completed", "medical_record": record}
