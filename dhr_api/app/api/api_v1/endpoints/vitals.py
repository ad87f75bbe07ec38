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
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

import dhr_api.app.schemas as schemas
from dhr_api.app.api.deps import get_vitals_store, to_row
from dhr_api.app.core import vitals as vitals_core
from dhr_api.app.core.config import settings
from dhr_api.app.stores import VitalsStore

_LOGGER = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.VitalsEnvelope)
async def record_vitals(
        body: schemas.VitalsCreate,
        store: VitalsStore = Depends(get_vitals_store)):
    values = to_row(body)
    values["bmi"] = vitals_core.derive_bmi(body.weight, body.height, body.bmi)
    if values["recorded_at"] is None:
        del values["recorded_at"]

    vitals = await store.create(values)
    _LOGGER.info("Recorded vitals %s for patient %s", vitals["id"], vitals["patient_id"])
    return {"message": "Vitals recorded successfully", "vitals": vitals}


@router.get("/patient/{patient_id}", response_model=schemas.VitalsList)
async def get_patient_vitals(
        patient_id: UUID,
        limit: int = settings.VITALS_HISTORY_LIMIT,
        store: VitalsStore = Depends(get_vitals_store)):
    if limit < 1:
        raise HTTPException(status_code=400, detail="limit must be a positive integer")
    vitals = await store.fetch_recent(str(patient_id), limit=limit)
    return {"count": len(vitals), "vitals": vitals}


@router.get("/patient/{patient_id}/latest", response_model=schemas.VitalsEnvelope)
async def get_latest_vitals(
        patient_id: UUID,
        store: VitalsStore = Depends(get_vitals_store)):
    vitals = await store.latest(str(patient_id))
    if vitals is None:
        raise HTTPException(status_code=404, detail="No vitals found for this patient")
    return {"vitals": vitals}


@router.get("/patient/{patient_id}/trends", response_model=schemas.VitalsTrendsResponse)
async def get_vitals_trends(
        patient_id: UUID,
        limit: int = settings.VITALS_TRENDS_LIMIT,
        store: VitalsStore = Depends(get_vitals_store)):
    if limit < 1:
        raise HTTPException(status_code=400, detail="limit must be a positive integer")
    records = await store.fetch_recent(str(patient_id), limit=limit)
    try:
        trends = vitals_core.compute_trends(records)
    except vitals_core.NoVitalsData:
        raise HTTPException(status_code=404, detail="No vitals data found")
    return {"trends": trends, "total_readings": len(records)}


@router.get("/medical-record/{record_id}", response_model=schemas.VitalsEnvelope)
async def get_vitals_by_medical_record(
        record_id: UUID,
        store: VitalsStore = Depends(get_vitals_store)):
    vitals = await store.by_medical_record(str(record_id))
    if vitals is None:
        raise HTTPException(status_code=404, detail="No vitals found for this medical record")
    return {"vitals": vitals}


@router.get("/{vitals_id}", response_model=schemas.VitalsEnvelope)
async def get_vitals_by_id(
        vitals_id: UUID,
        store: VitalsStore = Depends(get_vitals_store)):
    vitals = await store.get(str(vitals_id))
    if vitals is None:
        raise HTTPException(status_code=404, detail="Vitals not found")
    return {"vitals": vitals}


@router.put("/{vitals_id}", response_model=schemas.VitalsEnvelope)
async def update_vitals(
        vitals_id: UUID,
        body: schemas.VitalsUpdate,
        store: VitalsStore = Depends(get_vitals_store)):
    updates = to_row(body, exclude_unset=True)

    # weight/height changes recompute bmi from the stored row, so read and write under one lock
    async with store.transaction():
        current = await store.fetch_for_update(str(vitals_id))
        if current is None:
            raise HTTPException(status_code=404, detail="Vitals not found")
        fields = vitals_core.bmi_for_update(current, updates)
        vitals = await store.merge_and_persist(str(vitals_id), fields)

    return {"message": "Vitals updated successfully", "vitals": vitals}
