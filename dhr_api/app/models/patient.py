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

from dhr_api.app.models.metadata import metadata, timestamps, uuid_pk

Patient = sqlalchemy.Table(
    "patients",
    metadata,
    uuid_pk(),
    sqlalchemy.Column("health_id", sqlalchemy.String, unique=True, index=True),
    sqlalchemy.Column("name", sqlalchemy.String, nullable=False),
    sqlalchemy.Column("age", sqlalchemy.Integer),
    sqlalchemy.Column("gender", sqlalchemy.String),
    sqlalchemy.Column("phone", sqlalchemy.String),
    sqlalchemy.Column("date_of_birth", sqlalchemy.Date),
    sqlalchemy.Column("address", sqlalchemy.String),
    sqlalchemy.Column("blood_group", sqlalchemy.String),
    sqlalchemy.Column("emergency_contact", sqlalchemy.String),
    sqlalchemy.Column("preferred_language", sqlalchemy.String),
    *timestamps(),
)
