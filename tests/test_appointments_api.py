import datetime
import unittest
import uuid

from fastapi.testclient import TestClient

from dhr_api.app.api import deps
from dhr_api.app.core.auth import DoctorUser, get_current_doctor
from dhr_api.main import app
from tests.fakes import FakeAppointmentStore

PATIENT = str(uuid.uuid4())
DOCTOR = str(uuid.uuid4())
UTC = datetime.timezone.utc


class TestAppointmentsApi(unittest.TestCase):

    def setUp(self):
        self.store = FakeAppointmentStore()
        app.dependency_overrides[deps.get_appointment_store] = lambda: self.store
        app.dependency_overrides[get_current_doctor] = lambda: DoctorUser(id=DOCTOR, doctor_id="DOC1001")
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _seed(self, day, **values):
        return self.store.put({"patient_id": PATIENT, "doctor_id": DOCTOR, "status": "scheduled",
                               "appointment_date": datetime.datetime(2025, 6, day, 10, tzinfo=UTC), **values})

    def test_create_defaults(self):
        response = self.client.post("/v1/appointments/", json={
            "patient_id": PATIENT, "doctor_id": DOCTOR,
            "appointment_date": "2025-06-10T09:30:00Z", "appointment_type": "consultation"})
        self.assertEqual(response.status_code, 201)
        appointment = response.json()["appointment"]
        self.assertEqual(appointment["status"], "scheduled")
        self.assertFalse(appointment["reminder_sent"])

    def test_create_with_unknown_status(self):
        response = self.client.post("/v1/appointments/", json={
            "patient_id": PATIENT, "doctor_id": DOCTOR,
            "appointment_date": "2025-06-10T09:30:00Z", "status": "postponed"})
        self.assertEqual(response.status_code, 422)

    def test_cancel(self):
        row = self._seed(10)
        response = self.client.post(f"/v1/appointments/{row['id']}/cancel",
                                    json={"reason": "Patient travelling", "cancelled_by": "patient"})
        self.assertEqual(response.status_code, 200)
        appointment = response.json()["appointment"]
        self.assertEqual(appointment["status"], "cancelled")
        self.assertEqual(appointment["cancellation_reason"], "Patient travelling")
        self.assertEqual(appointment["cancelled_by"], "patient")
        self.assertIsNotNone(appointment["cancelled_at"])

    def test_cancel_requires_reason(self):
        row = self._seed(10)
        response = self.client.post(f"/v1/appointments/{row['id']}/cancel", json={})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(self.store.rows[row["id"]]["status"], "scheduled")

    def test_cancel_unknown_appointment(self):
        response = self.client.post(f"/v1/appointments/{uuid.uuid4()}/cancel", json={"reason": "n/a"})
        self.assertEqual(response.status_code, 404)

    def test_date_range(self):
        self._seed(5)
        inside = self._seed(12)
        self._seed(20)
        response = self.client.post(f"/v1/appointments/doctor/{DOCTOR}/date-range", json={
            "start_date": "2025-06-10T00:00:00Z", "end_date": "2025-06-15T00:00:00Z"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 1)
        self.assertEqual(body["appointments"][0]["id"], inside["id"])

    def test_date_range_out_of_order(self):
        response = self.client.post(f"/v1/appointments/doctor/{DOCTOR}/date-range", json={
            "start_date": "2025-06-15T00:00:00Z", "end_date": "2025-06-10T00:00:00Z"})
        self.assertEqual(response.status_code, 422)

    def test_date_range_mixing_naive_and_aware_bounds(self):
        inside = self._seed(12)
        self._seed(20)
        response = self.client.post(f"/v1/appointments/doctor/{DOCTOR}/date-range", json={
            "start_date": "2025-06-10T00:00:00", "end_date": "2025-06-15T00:00:00Z"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 1)
        self.assertEqual(body["appointments"][0]["id"], inside["id"])

    def test_date_range_naive_bounds_out_of_order(self):
        response = self.client.post(f"/v1/appointments/doctor/{DOCTOR}/date-range", json={
            "start_date": "2025-06-15T00:00:00Z", "end_date": "2025-06-10T00:00:00"})
        self.assertEqual(response.status_code, 422)

    def test_update_keeps_participants(self):
        row = self._seed(10)
        response = self.client.put(f"/v1/appointments/{row['id']}",
                                   json={"notes": "Bring reports", "patient_id": str(uuid.uuid4())})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["appointment"]["notes"], "Bring reports")
        self.assertEqual(self.store.rows[row["id"]]["patient_id"], PATIENT)


if __name__ == '__main__':
    unittest.main()
