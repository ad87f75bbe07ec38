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
from fastapi import Depends
from fastapi.security import HTTPBearer
from pydantic import BaseModel

from dhr_api.app.core.authorization.authorization_header_elements import get_bearer_token
from dhr_api.app.core.authorization.json_web_token import JsonWebToken

# only advertises the scheme in the openapi docs, the header is parsed by get_bearer_token
bearer_scheme = HTTPBearer(auto_error=False)


class DoctorUser(BaseModel):
    id: str
    doctor_id: str


def get_current_doctor(token: str = Depends(get_bearer_token)) -> DoctorUser:
    payload = JsonWebToken(token).validate()
    return DoctorUser(id=payload["sub"], doctor_id=payload.get("doctor_id", ""))
