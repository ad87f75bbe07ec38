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

Prescription = sqlalchemy.Table(
    "prescriptions",
    metadata,
    uuid_pk(),
    uuid_fk("patient_id", "patients.id"),
    uuid_fk("doctor_id", "doctors.id"),
    uuid_fk("medical_record_id", "medical_records.id", nullable=True),
    sqlalchemy.Column("medicine_name", sqlalchemy.String, nullable=False),
    sqlalchemy.Column("dosage", sqlalchemy.String),
    sqlalchemy.Column("frequency", sqlalchemy.String),
    sqlalchemy.Column("duration", sqlalchemy.String),
    sqlalchemy.Column("instructions", sqlalchemy.Text),
    sqlalchemy.Column("status", sqlalchemy.String),  # active, completed, discontinued
    sqlalchemy.Column("prescribed_date", sqlalchemy.DateTime(timezone=True)),
    sqlalchemy.Column("start_date", sqlalchemy.Date),
    sqlalchemy.Column("end_date", sqlalchemy.Date),
    *timestamps(),
)
