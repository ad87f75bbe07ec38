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

Doctor = sqlalchemy.Table(
    "doctors",
    metadata,
    uuid_pk(),
    sqlalchemy.Column("doctor_id", sqlalchemy.String, unique=True, nullable=False),  # registration login id
    sqlalchemy.Column("name", sqlalchemy.String, nullable=False),
    sqlalchemy.Column("email", sqlalchemy.String),
    sqlalchemy.Column("phone", sqlalchemy.String),
    sqlalchemy.Column("specialization", sqlalchemy.String),
    sqlalchemy.Column("qualification", sqlalchemy.String),
    sqlalchemy.Column("registration_number", sqlalchemy.String),
    sqlalchemy.Column("registration_council", sqlalchemy.String),
    sqlalchemy.Column("hospital_name", sqlalchemy.String),
    sqlalchemy.Column("hospital_address", sqlalchemy.String),
    sqlalchemy.Column("city", sqlalchemy.String),
    sqlalchemy.Column("state", sqlalchemy.String),
    sqlalchemy.Column("pincode", sqlalchemy.String),
    sqlalchemy.Column("is_verified", sqlalchemy.Boolean, server_default=sqlalchemy.false()),
    sqlalchemy.Column("verification_status", sqlalchemy.String, server_default="pending"),  # pending, verified, rejected
    sqlalchemy.Column("verified_by", sqlalchemy.String),
    sqlalchemy.Column("verification_date", sqlalchemy.DateTime(timezone=True)),
    sqlalchemy.Column("avatar_url", sqlalchemy.String),
    sqlalchemy.Column("experience_years", sqlalchemy.Integer),
    sqlalchemy.Column("password_hash", sqlalchemy.String),
    *timestamps(),
    sqlalchemy.Column("last_login", sqlalchemy.DateTime(timezone=True)),
)
