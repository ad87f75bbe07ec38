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

from fastapi import APIRouter, Depends, HTTPException, status

import dhr_api.app.schemas as schemas
from dhr_api.app.api.deps import get_worker_store, to_row
from dhr_api.app.core.health_card import generate_health_id, health_id_qr_code
from dhr_api.app.stores import WorkerStore

_LOGGER = logging.getLogger(__name__)

HEALTH_ID_ATTEMPTS = 5

router = APIRouter()


@router.post("/", response_model=schemas.WorkerCard)
async def get_worker_card(
        body: schemas.HealthIdRequest,
        store: WorkerStore = Depends(get_worker_store)):
    worker = await store.get_by_health_id(body.health_id.strip())
    if worker is None:
        raise HTTPException(status_code=404, detail="Worker not found")
    return {"worker": worker, "qr_code": health_id_qr_code(worker["health_id"])}


@router.post("/health-card", response_model=schemas.HealthCardResponse)
async def show_health_card(
        body: schemas.HealthIdRequest,
        store: WorkerStore = Depends(get_worker_store)):
    worker = await store.get_by_health_id(body.health_id.strip())
    if worker is None:
        raise HTTPException(status_code=404, detail="Worker not found")
    return {"health_card": worker}


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=schemas.WorkerEnvelope)
async def register_worker(
        body: schemas.WorkerRegistration,
        store: WorkerStore = Depends(get_worker_store)):
    for _ in range(HEALTH_ID_ATTEMPTS):
        health_id = generate_health_id()
        if not await store.health_id_taken(health_id):
            break
    else:
        _LOGGER.error("Could not allocate a free health id after %d attempts", HEALTH_ID_ATTEMPTS)
        raise HTTPException(status_code=503, detail="Could not allocate a health ID, try again")

    worker = await store.create({**to_row(body), "health_id": health_id})
    _LOGGER.info("Registered worker with health id %s", health_id)
    return {"message": "Worker registered successfully", "worker": worker}
