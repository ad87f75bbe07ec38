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
from fastapi import APIRouter, Depends

from dhr_api.app.api.api_v1.endpoints import (appointments, doctors, health, medical_records, patients, prescriptions,
                                              vitals, workers)
from dhr_api.app.core.auth import bearer_scheme, get_current_doctor

# clinical data is only served to signed in doctors
doctor_only = [Depends(bearer_scheme), Depends(get_current_doctor)]

api_router = APIRouter()
api_router.include_router(doctors.router, prefix="/doctors", tags=["Doctors"])
api_router.include_router(patients.router, prefix="/patients", tags=["Patients"], dependencies=doctor_only)
api_router.include_router(appointments.router, prefix="/appointments", tags=["Appointments"], dependencies=doctor_only)
api_router.include_router(medical_records.router, prefix="/medical-records", tags=["Medical Records"],
                          dependencies=doctor_only)
api_router.include_router(prescriptions.router, prefix="/prescriptions", tags=["Prescriptions"],
                          dependencies=doctor_only)
api_router.include_router(vitals.router, prefix="/vitals", tags=["Vitals"], dependencies=doctor_only)
api_router.include_router(workers.router, prefix="/workers", tags=["Workers"])
api_router.include_router(health.router, prefix="/health", tags=["Health"])
