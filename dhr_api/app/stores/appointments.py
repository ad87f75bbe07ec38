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
from typing import Any, Dict, List, Mapping, Optional

import sqlalchemy

import dhr_api.app.models as models
from dhr_api.app.stores.base import TableStore, select_related, utcnow

APPOINTMENT = models.Appointment


def _doctor(*fields):
    return "doctor", models.Doctor, APPOINTMENT.c.doctor_id, fields


def _patient(*fields):
    return "patient", models.Patient, APPOINTMENT.c.patient_id, fields


class AppointmentStore(TableStore):
    table = APPOINTMENT

    async def create(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._insert({**values, "status": values.get("status") or "scheduled", "reminder_sent": False})

    async def get(self, appointment_id: str) -> Optional[Dict[str, Any]]:
        query = select_related(self.table,
                               _doctor("name", "specialization", "hospital_name"),
                               _patient("name", "phone", "age", "gender")) \
            .where(self.table.c.id == appointment_id)
        return await self._fetch_one(query)

    async def for_patient(self, patient_id: str) -> List[Dict[str, Any]]:
        query = select_related(self.table,
                               _doctor("name", "specialization", "hospital_name"),
                               _patient("name", "phone")) \
            .where(self.table.c.patient_id == patient_id) \
            .order_by(self.table.c.appointment_date)
        return await self._fetch_all(query)

    async def for_doctor(self, doctor_id: str) -> List[Dict[str, Any]]:
        query = select_related(self.table,
                               _patient("name", "phone", "age", "gender"),
                               _doctor("name")) \
            .where(self.table.c.doctor_id == doctor_id) \
            .order_by(self.table.c.appointment_date)
        return await self._fetch_all(query)

    async def upcoming_for_doctor(self, doctor_id: str, now: datetime.datetime, limit: int = 20) -> List[Dict[str, Any]]:
        query = select_related(self.table, _patient("name", "phone", "age", "gender")) \
            .where(self.table.c.doctor_id == doctor_id,
                   self.table.c.status == "scheduled",
                   self.table.c.appointment_date >= now) \
            .order_by(self.table.c.appointment_date) \
            .limit(limit)
        return await self._fetch_all(query)

    async def for_doctor_between(self, doctor_id: str, start: datetime.datetime,
                                 end: datetime.datetime) -> List[Dict[str, Any]]:
        query = select_related(self.table, _patient("name", "phone", "age", "gender")) \
            .where(self.table.c.doctor_id == doctor_id,
                   self.table.c.appointment_date >= start,
                   self.table.c.appointment_date <= end) \
            .order_by(self.table.c.appointment_date)
        return await self._fetch_all(query)

    async def count_for_patient(self, patient_id: str, upcoming_after: datetime.datetime = None) -> int:
        criteria = [self.table.c.patient_id == patient_id]
        if upcoming_after is not None:
            criteria += [self.table.c.status == "scheduled", self.table.c.appointment_date >= upcoming_after]
        return await self._count(*criteria)

    async def update(self, appointment_id: str, values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._update(appointment_id, values)

    async def cancel(self, appointment_id: str, reason: str, cancelled_by: str = "doctor") -> Optional[Dict[str, Any]]:
        return await self._update(appointment_id, {
            "status": "cancelled",
            "cancellation_reason": reason,
            "cancelled_by": cancelled_by,
            "cancelled_at": utcnow(),
        })

    async def complete(self, appointment_id: str) -> Optional[Dict[str, Any]]:
        return await self._update(appointment_id, {"status": "completed", "completed_at": utcnow()})

    async def mark_reminder_sent(self, appointment_id: str) -> Optional[Dict[str, Any]]:
        return await self._update(appointment_id, {"reminder_sent": True, "reminder_sent_at": utcnow()})
