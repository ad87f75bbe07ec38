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
import datetime
from typing import Any, Dict, Mapping, Optional

import sqlalchemy

import dhr_api.app.models as models
from dhr_api.app.stores.base import TableStore, utcnow


class DoctorStore(TableStore):
    table = models.Doctor

    async def get(self, doctor_id: str) -> Optional[Dict[str, Any]]:
        return await self.get_plain(doctor_id)

    async def get_by_registration_id(self, registration_id: str) -> Optional[Dict[str, Any]]:
        return await self._fetch_one(self.table.select().where(self.table.c.doctor_id == registration_id))

    async def create(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._insert(values)

    async def update(self, doctor_id: str, values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._update(doctor_id, values)

    async def touch_last_login(self, doctor_id: str) -> Optional[Dict[str, Any]]:
        query = self.table.update().where(self.table.c.id == doctor_id) \
            .values(last_login=utcnow()) \
            .returning(*self.table.c)
        return await self._fetch_one(query)

    async def stats(self, doctor_id: str, now: datetime.datetime) -> Dict[str, int]:
        records, appointments, prescriptions = models.MedicalRecord, models.Appointment, models.Prescription

        def count(table, *criteria):
            return sqlalchemy.select(sqlalchemy.func.count()).select_from(table).where(*criteria)

        total_patients = await self.database.fetch_val(
            sqlalchemy.select(sqlalchemy.func.count(sqlalchemy.distinct(records.c.patient_id)))
            .where(records.c.doctor_id == doctor_id))
        total_appointments = await self.database.fetch_val(
            count(appointments, appointments.c.doctor_id == doctor_id))
        total_prescriptions = await self.database.fetch_val(
            count(prescriptions, prescriptions.c.doctor_id == doctor_id))
        upcoming_appointments = await self.database.fetch_val(
            count(appointments,
                  appointments.c.doctor_id == doctor_id,
                  appointments.c.status == "scheduled",
                  appointments.c.appointment_date >= now))

        return {
            "total_patients": total_patients or 0,
            "total_appointments": total_appointments or 0,
            "total_prescriptions": total_prescriptions or 0,
            "upcoming_appointments": upcoming_appointments or 0,
        }
