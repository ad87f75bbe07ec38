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
from dhr_api.app.api.deps import get_doctor_store, to_row
from dhr_api.app.core.auth import DoctorUser, bearer_scheme, get_current_doctor
from dhr_api.app.core.authorization.custom_exceptions import (BadCredentialsException, ForbiddenException,
                                                               UnverifiedAccountException)
from dhr_api.app.core.authorization.json_web_token import issue_access_token
from dhr_api.app.core.authorization.passwords import hash_password, verify_password
from dhr_api.app.stores import DoctorStore
from dhr_api.app.stores.base import utcnow

_LOGGER = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.DoctorEnvelope)
async def register_doctor(
        body: schemas.DoctorCreate,
        store: DoctorStore = Depends(get_doctor_store)):
    if await store.get_by_registration_id(body.doctor_id) is not None:
        raise HTTPException(status_code=409, detail="Doctor ID is already registered")

    values = to_row(body, exclude={"password"}, exclude_none=True)
    values["password_hash"] = hash_password(body.password)
    doctor = await store.create(values)
    _LOGGER.info("Registered doctor %s, pending verification", doctor["doctor_id"])
    return {"message": "Doctor registered, awaiting verification", "doctor": doctor}


@router.post("/login", response_model=schemas.DoctorLoginResponse)
async def login_doctor(
        body: schemas.DoctorLogin,
        store: DoctorStore = Depends(get_doctor_store)):
    doctor = await store.get_by_registration_id(body.doctor_id)
    if doctor is None:
        raise HTTPException(status_code=404, detail="Doctor not found")

    if not verify_password(body.password, doctor.get("password_hash")):
        _LOGGER.warning("Failed login for doctor %s", body.doctor_id)
        raise BadCredentialsException

    if not doctor.get("is_verified") or doctor.get("verification_status") != "verified":
        raise UnverifiedAccountException

    doctor = await store.touch_last_login(doctor["id"]) or doctor
    doctor.pop("password_hash", None)
    return {
        "message": "Login successful",
        "doctor": doctor,
        "access_token": issue_access_token(subject=doctor["id"], doctor_id=doctor["doctor_id"]),
    }


@router.get("/profile/{doctor_id}", dependencies=[Depends(bearer_scheme), Depends(get_current_doctor)],
            response_model=schemas.DoctorEnvelope)
async def get_doctor_profile(
        doctor_id: UUID,
        store: DoctorStore = Depends(get_doctor_store)):
    doctor = await store.get(str(doctor_id))
    if doctor is None:
        raise HTTPException(status_code=404, detail="Doctor not found")
    doctor.pop("password_hash", None)
    return {"doctor": doctor}


@router.put("/profile/{doctor_id}", dependencies=[Depends(bearer_scheme)], response_model=schemas.DoctorEnvelope)
async def update_doctor_profile(
        doctor_id: UUID,
        body: schemas.DoctorUpdate,
        store: DoctorStore = Depends(get_doctor_store),
        user: DoctorUser = Depends(get_current_doctor)):
    if user.id != str(doctor_id):
        raise ForbiddenException("Doctors can only update their own profile")

    doctor = await store.update(str(doctor_id), to_row(body, exclude_unset=True))
    if doctor is None:
        raise HTTPException(status_code=404, detail="Doctor not found")
    doctor.pop("password_hash", None)
    return {"message": "Profile updated successfully", "doctor": doctor}


@router.get("/{doctor_id}/stats", dependencies=[Depends(bearer_scheme), Depends(get_current_doctor)],
            response_model=schemas.DoctorStatsResponse)
async def get_doctor_stats(
        doctor_id: UUID,
        store: DoctorStore = Depends(get_doctor_store)):
    stats = await store.stats(str(doctor_id), now=utcnow())
    return {"stats": stats}
