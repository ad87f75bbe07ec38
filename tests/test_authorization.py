import datetime
import unittest

import jwt
from fastapi import HTTPException

from dhr_api.app.core.authorization.authorization_header_elements import get_authorization_header_elements
from dhr_api.app.core.authorization.json_web_token import JsonWebToken, issue_access_token
from dhr_api.app.core.authorization.passwords import hash_password, verify_password
from dhr_api.app.core.config import settings


class TestPasswords(unittest.TestCase):

    def test_hash_verifies(self):
        encoded = hash_password("correct horse", iterations=1000)
        self.assertTrue(verify_password("correct horse", encoded))
        self.assertFalse(verify_password("wrong horse", encoded))

    def test_hashes_are_salted(self):
        first = hash_password("same password", iterations=1000)
        second = hash_password("same password", iterations=1000)
        self.assertNotEqual(first, second)
        self.assertTrue(first.startswith("pbkdf2_sha256$1000$"))

    def test_plaintext_stored_value_never_matches(self):
        # rows written before hashing was introduced hold the password itself
        self.assertFalse(verify_password("hunter22", "hunter22"))
        self.assertFalse(verify_password("hunter22", ""))
        self.assertFalse(verify_password("hunter22", None))

    def test_unknown_algorithm_is_rejected(self):
        encoded = hash_password("pw", iterations=1000).replace("pbkdf2_sha256", "md5", 1)
        self.assertFalse(verify_password("pw", encoded))


class TestJsonWebToken(unittest.TestCase):

    def test_round_trip_claims(self):
        token = issue_access_token(subject="0b0c5f0e-3a7e-4c61-9d2d-0a8f3f3b8c11", doctor_id="DOC1001")
        payload = JsonWebToken(token).validate()
        self.assertEqual(payload["sub"], "0b0c5f0e-3a7e-4c61-9d2d-0a8f3f3b8c11")
        self.assertEqual(payload["doctor_id"], "DOC1001")
        self.assertEqual(payload["iss"], settings.JWT_ISSUER)

    def test_expired_token_is_rejected(self):
        issued = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(days=30)
        token = issue_access_token(subject="abc", doctor_id="DOC1", now=issued)
        with self.assertRaises(HTTPException) as ctx:
            JsonWebToken(token).validate()
        self.assertEqual(ctx.exception.status_code, 401)

    def test_foreign_signature_is_rejected(self):
        now = datetime.datetime.now(datetime.timezone.utc)
        token = jwt.encode({"sub": "abc", "iss": settings.JWT_ISSUER, "iat": now,
                            "exp": now + datetime.timedelta(hours=1)},
                           "some-other-signing-key-0123456789abcdef", algorithm="HS256")
        with self.assertRaises(HTTPException):
            JsonWebToken(token).validate()


class TestAuthorizationHeader(unittest.TestCase):

    def test_bearer_header(self):
        elements = get_authorization_header_elements("Bearer abc.def.ghi")
        self.assertTrue(elements.are_valid)
        self.assertEqual(elements.bearer_token, "abc.def.ghi")

    def test_other_scheme_is_not_valid(self):
        self.assertFalse(get_authorization_header_elements("Basic dXNlcjpwdw==").are_valid)

    def test_malformed_header_raises(self):
        with self.assertRaises(HTTPException):
            get_authorization_header_elements("Bearer")


if __name__ == '__main__':
    unittest.main()
