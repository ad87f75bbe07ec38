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

DOCTOR = ("doctor", models.Doctor, models.Vitals.c.doctor_id, ("name", "specialization"))
PATIENT = ("patient", models.Patient, models.Vitals.c.patient_id, ("name",))


class VitalsStore(TableStore):
    table = models.Vitals

    async def create(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._insert({**values, "recorded_at": values.get("recorded_at") or utcnow()})

    async def get(self, vitals_id: str) -> Optional[Dict[str, Any]]:
        query = select_related(self.table, DOCTOR, PATIENT).where(self.table.c.id == vitals_id)
        return await self._fetch_one(query)

    async def fetch_recent(self, patient_id: str, limit: int) -> List[Dict[str, Any]]:
        """Newest first."""
        query = select_related(self.table, DOCTOR) \
            .where(self.table.c.patient_id == patient_id) \
            .order_by(sqlalchemy.desc(self.table.c.recorded_at)) \
            .limit(limit)
        return await self._fetch_all(query)

    async def latest(self, patient_id: str) -> Optional[Dict[str, Any]]:
        records = await self.fetch_recent(patient_id, limit=1)
        return records[0] if records else None

    async def by_medical_record(self, record_id: str) -> Optional[Dict[str, Any]]:
        query = self.table.select() \
            .where(self.table.c.medical_record_id == record_id) \
            .order_by(sqlalchemy.desc(self.table.c.recorded_at)) \
            .limit(1)
        return await self._fetch_one(query)

    async def all_for_medical_record(self, record_id: str) -> List[Dict[str, Any]]:
        query = self.table.select() \
            .where(self.table.c.medical_record_id == record_id) \
            .order_by(sqlalchemy.desc(self.table.c.recorded_at))
        return await self._fetch_all(query)

    async def fetch_for_update(self, vitals_id: str) -> Optional[Dict[str, Any]]:
        # must run inside transaction(), the row stays locked until it ends
        query = self.table.select().where(self.table.c.id == vitals_id).with_for_update()
        return await self._fetch_one(query)

    async def merge_and_persist(self, vitals_id: str, fields: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._update(vitals_id, fields)
