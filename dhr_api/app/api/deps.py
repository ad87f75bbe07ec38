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
from typing import Any, Dict
from uuid import UUID

import databases
from fastapi import Depends
from pydantic import BaseModel

from dhr_api.app.core.database import get_database
from dhr_api.app.stores import (AppointmentStore, DoctorStore, MedicalRecordStore, PatientStore, PrescriptionStore,
                                VitalsStore, WorkerStore)


def to_row(body: BaseModel, **dump_options) -> Dict[str, Any]:
    """Request body as column values; uuids are stored as text by the tables."""
    values = body.model_dump(**dump_options)
    return {key: str(value) if isinstance(value, UUID) else value for key, value in values.items()}


def get_vitals_store(database: databases.Database = Depends(get_database)) -> VitalsStore:
    return VitalsStore(database)


def get_doctor_store(database: databases.Database = Depends(get_database)) -> DoctorStore:
    return DoctorStore(database)


def get_patient_store(database: databases.Database = Depends(get_database)) -> PatientStore:
    return PatientStore(database)


def get_appointment_store(database: databases.Database = Depends(get_database)) -> AppointmentStore:
    return AppointmentStore(database)


def get_medical_record_store(database: databases.Database = Depends(get_database)) -> MedicalRecordStore:
    return MedicalRecordStore(database)


def get_prescription_store(database: databases.Database = Depends(get_database)) -> PrescriptionStore:
    return PrescriptionStore(database)


def get_worker_store(database: databases.Database = Depends(get_database)) -> WorkerStore:
    return WorkerStore(database)
