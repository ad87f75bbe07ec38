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
from typing import NamedTuple

from fastapi import Request

from dhr_api.app.core.authorization.custom_exceptions import BadCredentialsException, RequiresAuthenticationException

BEARER_SCHEME = "bearer"


class AuthorizationHeaderElements(NamedTuple):
    authorization_scheme: str
    bearer_token: str
    are_valid: bool


def get_authorization_header_elements(authorization_header: str) -> AuthorizationHeaderElements:
    """Split ``<scheme> <token>``; anything but exactly two parts is rejected outright."""
    parts = authorization_header.split()
    if len(parts) != 2:
        raise BadCredentialsException
    scheme, token = parts
    return AuthorizationHeaderElements(scheme, token, scheme.lower() == BEARER_SCHEME)


def get_bearer_token(request: Request) -> str:
    """Doctor access token from the request, 401 when it is missing or not a bearer token."""
    authorization_header = request.headers.get("Authorization", "").strip()
    if not authorization_header:
        raise RequiresAuthenticationException

    elements = get_authorization_header_elements(authorization_header)
    if not elements.are_valid:
        raise BadCredentialsException
    return elements.bearer_token
