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
import sqlalchemy

from dhr_api.app.models.metadata import metadata, timestamps, uuid_fk, uuid_pk

Appointment = sqlalchemy.Table(
    "appointments",
    metadata,
    uuid_pk(),
    uuid_fk("patient_id", "patients.id"),
    uuid_fk("doctor_id", "doctors.id"),
    uuid_fk("medical_record_id", "medical_records.id", nullable=True),  # set for follow-ups
    sqlalchemy.Column("appointment_date", sqlalchemy.DateTime(timezone=True), nullable=False, index=True),
    sqlalchemy.Column("appointment_type", sqlalchemy.String),  # follow-up, consultation, emergency
    sqlalchemy.Column("duration_minutes", sqlalchemy.Integer),
    sqlalchemy.Column("status", sqlalchemy.String, nullable=False),  # scheduled, completed, cancelled, no-show
    sqlalchemy.Column("reason", sqlalchemy.Text),
    sqlalchemy.Column("notes", sqlalchemy.Text),
    sqlalchemy.Column("reminder_sent", sqlalchemy.Boolean),
    sqlalchemy.Column("reminder_sent_at", sqlalchemy.DateTime(timezone=True)),
    sqlalchemy.Column("completed_at", sqlalchemy.DateTime(timezone=True)),
    sqlalchemy.Column("cancellation_reason", sqlalchemy.Text),
    sqlalchemy.Column("cancelled_at", sqlalchemy.DateTime(timezone=True)),
    sqlalchemy.Column("cancelled_by", sqlalchemy.String),  # doctor, patient, system
    *timestamps(),
)
