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
from typing import Any, Dict, List, Mapping, Optional

import sqlalchemy

import dhr_api.app.models as models
from dhr_api.app.stores.base import TableStore, select_related, utcnow

RECORD = models.MedicalRecord


def _doctor(*fields):
    return "doctor", models.Doctor, RECORD.c.doctor_id, fields


def _patient(*fields):
    return "patient", models.Patient, RECORD.c.patient_id, fields


class MedicalRecordStore(TableStore):
    table = RECORD

    async def create(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._insert({**values, "visit_date": values.get("visit_date") or utcnow(), "is_active": True})

    async def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        query = select_related(self.table,
                               _doctor("name", "specialization", "hospital_name"),
                               _patient("name", "age", "gender", "health_id")) \
            .where(self.table.c.id == record_id)
        return await self._fetch_one(query)

    async def for_patient(self, patient_id: str) -> List[Dict[str, Any]]:
        query = select_related(self.table,
                               _doctor("name", "specialization", "hospital_name"),
                               _patient("name", "age", "gender")) \
            .where(self.table.c.patient_id == patient_id) \
            .order_by(sqlalchemy.desc(self.table.c.visit_date))
        return await self._fetch_all(query)

    async def active_for_patient(self, patient_id: str) -> Optional[Dict[str, Any]]:
        query = select_related(self.table,
                               _doctor("name", "specialization"),
                               _patient("name", "age", "gender")) \
            .where(self.table.c.patient_id == patient_id, self.table.c.is_active.is_(True)) \
            .order_by(sqlalchemy.desc(self.table.c.visit_date)) \
            .limit(1)
        return await self._fetch_one(query)

    async def for_doctor(self, doctor_id: str, limit: int = 50) -> List[Dict[str, Any]]:
        query = select_related(self.table, _patient("name", "age", "gender", "health_id")) \
            .where(self.table.c.doctor_id == doctor_id) \
            .order_by(sqlalchemy.desc(self.table.c.visit_date)) \
            .limit(limit)
        return await self._fetch_all(query)

    async def count_for_patient(self, patient_id: str) -> int:
        return await self._count(self.table.c.patient_id == patient_id)

    async def update(self, record_id: str, values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._update(record_id, values)

    async def add_file(self, record_id: str, file_info: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        async with self.transaction():
            current = await self._fetch_one(
                sqlalchemy.select(self.table.c.uploaded_files)
                .where(self.table.c.id == record_id)
                .with_for_update())
            if current is None:
                return None
            uploaded_files = list(current["uploaded_files"] or [])
            uploaded_files.append({**file_info, "uploaded_at": utcnow().isoformat()})
            return await self._update(record_id, {"uploaded_files": uploaded_files})

    async def complete(self, record_id: str) -> Optional[Dict[str, Any]]:
        return await self._update(record_id, {"is_active": False, "completed_at": utcnow()})
