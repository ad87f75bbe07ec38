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

Vitals = sqlalchemy.Table(
    "vitals",
    metadata,
    uuid_pk(),
    uuid_fk("patient_id", "patients.id"),
    uuid_fk("doctor_id", "doctors.id"),
    uuid_fk("medical_record_id", "medical_records.id", nullable=True),
    sqlalchemy.Column("blood_pressure_systolic", sqlalchemy.Integer),
    sqlalchemy.Column("blood_pressure_diastolic", sqlalchemy.Integer),
    sqlalchemy.Column("temperature", sqlalchemy.Numeric(5, 2)),
    sqlalchemy.Column("blood_sugar", sqlalchemy.Integer),  # mg/dL
    sqlalchemy.Column("weight", sqlalchemy.Numeric(6, 2)),  # kg
    sqlalchemy.Column("height", sqlalchemy.Numeric(6, 2)),  # cm
    sqlalchemy.Column("bmi", sqlalchemy.Numeric(5, 1)),
    sqlalchemy.Column("heart_rate", sqlalchemy.Integer),
    sqlalchemy.Column("oxygen_saturation", sqlalchemy.Integer),  # percent
    sqlalchemy.Column("respiratory_rate", sqlalchemy.Integer),
    sqlalchemy.Column("pulse", sqlalchemy.Integer),
    sqlalchemy.Column("notes", sqlalchemy.Text),
    sqlalchemy.Column("recorded_at", sqlalchemy.DateTime(timezone=True), index=True),
    *timestamps(),
)
