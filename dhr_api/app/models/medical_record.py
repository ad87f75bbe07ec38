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

from dhr_api.app.models.metadata import JSONB, metadata, timestamps, uuid_fk, uuid_pk

MedicalRecord = sqlalchemy.Table(
    "medical_records",
    metadata,
    uuid_pk(),
    uuid_fk("patient_id", "patients.id"),
    uuid_fk("doctor_id", "doctors.id"),
    sqlalchemy.Column("visit_date", sqlalchemy.DateTime(timezone=True), index=True),
    sqlalchemy.Column("visit_type", sqlalchemy.String),
    sqlalchemy.Column("symptoms", sqlalchemy.Text),
    sqlalchemy.Column("diagnosis", sqlalchemy.Text),
    sqlalchemy.Column("diagnosis_code", sqlalchemy.String),  # ICD-10
    sqlalchemy.Column("disease_status", sqlalchemy.String),  # resolved, ongoing, infectious
    sqlalchemy.Column("clinical_notes", sqlalchemy.Text),
    sqlalchemy.Column("treatment_plan", sqlalchemy.Text),
    sqlalchemy.Column("patient_progress", sqlalchemy.String),  # improving, stable, deteriorating
    sqlalchemy.Column("test_results", JSONB),
    sqlalchemy.Column("uploaded_files", JSONB),
    sqlalchemy.Column("health_education_sent", sqlalchemy.Boolean),
    sqlalchemy.Column("preferred_language", sqlalchemy.String),
    sqlalchemy.Column("communication_method", JSONB),  # sms, whatsapp, voice
    sqlalchemy.Column("is_active", sqlalchemy.Boolean),
    sqlalchemy.Column("completed_at", sqlalchemy.DateTime(timezone=True)),
    *timestamps(),
)
