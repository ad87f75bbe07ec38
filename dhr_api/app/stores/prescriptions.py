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
from typing import Any, Dict, Iterable, List, Mapping, Optional

import sqlalchemy

import dhr_api.app.models as models
from dhr_api.app.stores.base import TableStore, select_related, utcnow

PRESCRIPTION = models.Prescription
DOCTOR = ("doctor", models.Doctor, PRESCRIPTION.c.doctor_id, ("name", "specialization"))
PATIENT = ("patient", models.Patient, PRESCRIPTION.c.patient_id, ("name",))


def _new_prescription(values: Mapping[str, Any]) -> Dict[str, Any]:
    return {**values, "prescribed_date": utcnow(), "status": values.get("status") or "active"}


class PrescriptionStore(TableStore):
    table = PRESCRIPTION

    async def create(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._insert(_new_prescription(values))

    async def create_many(self, rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        async with self.transaction():
            return await self._insert_many(_new_prescription(values) for values in rows)

    async def get(self, prescription_id: str) -> Optional[Dict[str, Any]]:
        query = select_related(self.table, DOCTOR, PATIENT).where(self.table.c.id == prescription_id)
        return await self._fetch_one(query)

    async def for_patient(self, patient_id: str) -> List[Dict[str, Any]]:
        query = select_related(self.table, DOCTOR, PATIENT) \
            .where(self.table.c.patient_id == patient_id) \
            .order_by(sqlalchemy.desc(self.table.c.prescribed_date))
        return await self._fetch_all(query)

    async def for_medical_record(self, record_id: str) -> List[Dict[str, Any]]:
        query = self.table.select() \
            .where(self.table.c.medical_record_id == record_id) \
            .order_by(sqlalchemy.desc(self.table.c.created_at))
        return await self._fetch_all(query)

    async def count_active_for_patient(self, patient_id: str) -> int:
        return await self._count(self.table.c.patient_id == patient_id, self.table.c.status == "active")

    async def update(self, prescription_id: str, values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._update(prescription_id, values)

    async def delete(self, prescription_id: str) -> Optional[Dict[str, Any]]:
        return await self._delete(prescription_id)
