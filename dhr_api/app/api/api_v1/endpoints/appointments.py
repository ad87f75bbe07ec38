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
from dhr_api.app.api.deps import get_appointment_store, to_row
from dhr_api.app.core.config import settings
from dhr_api.app.stores import AppointmentStore
from dhr_api.app.stores.base import utcnow

_LOGGER = logging.getLogger(__name__)

router = APIRouter()


def _found(appointment):
    if appointment is None:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.AppointmentEnvelope)
async def create_appointment(
        body: schemas.AppointmentCreate,
        store: AppointmentStore = Depends(get_appointment_store)):
    appointment = await store.create(to_row(body, exclude_none=True))
    _LOGGER.info("Scheduled appointment %s for %s", appointment["id"], appointment["appointment_date"])
    return {"message": "Appointment scheduled successfully", "appointment": appointment}


@router.get("/patient/{patient_id}", response_model=schemas.AppointmentList)
async def get_patient_appointments(
        patient_id: UUID,
        store: AppointmentStore = Depends(get_appointment_store)):
    appointments = await store.for_patient(str(patient_id))
    return {"count": len(appointments), "appointments": appointments}


@router.get("/doctor/{doctor_id}", response_model=schemas.AppointmentList)
async def get_doctor_appointments(
        doctor_id: UUID,
        store: AppointmentStore = Depends(get_appointment_store)):
    appointments = await store.for_doctor(str(doctor_id))
    return {"count": len(appointments), "appointments": appointments}


@router.get("/doctor/{doctor_id}/upcoming", response_model=schemas.AppointmentList)
async def get_upcoming_appointments(
        doctor_id: UUID,
        store: AppointmentStore = Depends(get_appointment_store)):
    appointments = await store.upcoming_for_doctor(str(doctor_id), now=utcnow(),
                                                   limit=settings.UPCOMING_APPOINTMENTS_LIMIT)
    return {"count": len(appointments), "appointments": appointments}


@router.post("/doctor/{doctor_id}/date-range", response_model=schemas.AppointmentList)
async def get_appointments_by_date_range(
        doctor_id: UUID,
        body: schemas.DateRange,
        store: AppointmentStore = Depends(get_appointment_store)):
    appointments = await store.for_doctor_between(str(doctor_id), start=body.start_date, end=body.end_date)
    return {"count": len(appointments), "appointments": appointments}


@router.get("/{appointment_id}", response_model=schemas.AppointmentEnvelope)
async def get_appointment_by_id(
        appointment_id: UUID,
        store: AppointmentStore = Depends(get_appointment_store)):
    return {"appointment": _found(await store.get(str(appointment_id)))}


@router.put("/{appointment_id}", response_model=schemas.AppointmentEnvelope)
async def update_appointment(
        appointment_id: UUID,
        body: schemas.AppointmentUpdate,
        store: AppointmentStore = Depends(get_appointment_store)):
    appointment = _found(await store.update(str(appointment_id), to_row(body, exclude_unset=True)))
    return {"message": "Appointment updated successfully", "appointment": appointment}


@router.post("/{appointment_id}/cancel", response_model=schemas.AppointmentEnvelope)
async def cancel_appointment(
        appointment_id: UUID,
        body: schemas.AppointmentCancel,
        store: AppointmentStore = Depends(get_appointment_store)):
    appointment = _found(await store.cancel(str(appointment_id), reason=body.reason, cancelled_by=body.cancelled_by))
    _LOGGER.info("Appointment %s cancelled by %s", appointment_id, body.cancelled_by)
    return {"message": "Appointment cancelled successfully", "appointment": appointment}


@router.post("/{appointment_id}/complete", response_model=schemas.AppointmentEnvelope)
async def complete_appointment(
        appointment_id: UUID,
        store: AppointmentStore = Depends(get_appointment_store)):
    appointment = _found(await store.complete(str(appointment_id)))
    return {"message": "Appointment marked as completed", "appointment": appointment}


@router.post("/{appointment_id}/reminder-sent", response_model=schemas.AppointmentEnvelope)
async def mark_reminder_sent(
        appointment_id: UUID,
        store: AppointmentStore = Depends(get_appointment_store)):
    appointment = _found(await store.mark_reminder_sent(str(appointment_id)))
    return {"message": "Reminder marked as sent", "appointment": appointment}
