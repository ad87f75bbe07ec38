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
from dhr_api.app.api.deps import get_prescription_store, to_row
from dhr_api.app.stores import PrescriptionStore

router = APIRouter()


def _found(prescription):
    if prescription is None:
        raise HTTPException(status_code=404, detail="Prescription not found")
    return prescription


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.PrescriptionEnvelope)
async def create_prescription(
        body: schemas.PrescriptionCreate,
        store: PrescriptionStore = Depends(get_prescription_store)):
    prescription = await store.create(to_row(body, exclude_none=True))
    return {"message": "Prescription created successfully", "prescription": prescription}


@router.post("/bulk", status_code=status.HTTP_201_CREATED, response_model=schemas.PrescriptionList)
async def create_bulk_prescriptions(
        body: schemas.BulkPrescriptionCreate,
        store: PrescriptionStore = Depends(get_prescription_store)):
    shared = to_row(body, exclude={"prescriptions"}, exclude_none=True)
    rows = [{**item.model_dump(exclude_none=True), **shared} for item in body.prescriptions]
    prescriptions = await store.create_many(rows)
    return {
        "message": f"{len(prescriptions)} prescriptions created successfully",
        "count": len(prescriptions),
        "prescriptions": prescriptions,
    }


@router.get("/patient/{patient_id}", response_model=schemas.PrescriptionList)
async def get_patient_prescriptions(
        patient_id: UUID,
        store: PrescriptionStore = Depends(get_prescription_store)):
    prescriptions = await store.for_patient(str(patient_id))
    return {"count": len(prescriptions), "prescriptions": prescriptions}


@router.get("/medical-record/{record_id}", response_model=schemas.PrescriptionList)
async def get_medical_record_prescriptions(
        record_id: UUID,
        store: PrescriptionStore = Depends(get_prescription_store)):
    prescriptions = await store.for_medical_record(str(record_id))
    return {"count": len(prescriptions), "prescriptions": prescriptions}


@router.get("/{prescription_id}", response_model=schemas.PrescriptionEnvelope)
async def get_prescription_by_id(
        prescription_id: UUID,
        store: PrescriptionStore = Depends(get_prescription_store)):
    return {"prescription": _found(await store.get(str(prescription_id)))}


@router.put("/{prescription_id}", response_model=schemas.PrescriptionEnvelope)
async def update_prescription(
        prescription_id: UUID,
        body: schemas.PrescriptionUpdate,
        store: PrescriptionStore = Depends(get_prescription_store)):
    prescription = _found(await store.update(str(prescription_id), to_row(body, exclude_unset=True)))
    return {"message": "Prescription updated successfully", "prescription": prescription}


@router.delete("/{prescription_id}", response_model=schemas.PrescriptionEnvelope)
async def delete_prescription(
        prescription_id: UUID,
        store: PrescriptionStore = Depends(get_prescription_store)):
    prescription = _found(await store.delete(str(prescription_id)))
    return {"message": "Prescription deleted successfully", "prescription": prescription}
