import datetime
import unittest
import uuid

from fastapi.testclient import TestClient

from dhr_api.app.api import deps
from dhr_api.app.core.auth import DoctorUser, get_current_doctor
from dhr_api.main import app
from tests.fakes import FakeVitalsStore

PATIENT = str(uuid.uuid4())
DOCTOR = str(uuid.uuid4())


def recorded(hours_ago):
    return datetime.datetime(2025, 4, 1, 12, tzinfo=datetime.timezone.utc) - datetime.timedelta(hours=hours_ago)


class TestVitalsApi(unittest.TestCase):

    def setUp(self):
        self.store = FakeVitalsStore()
        app.dependency_overrides[deps.get_vitals_store] = lambda: self.store
        app.dependency_overrides[get_current_doctor] = lambda: DoctorUser(id=DOCTOR, doctor_id="DOC1001")
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _seed(self, **values):
        return self.store.put({"patient_id": PATIENT, "doctor_id": DOCTOR, "recorded_at": recorded(0), **values})

    def test_record_vitals_derives_bmi(self):
        response = self.client.post("/v1/vitals/", json={
            "patient_id": PATIENT, "doctor_id": DOCTOR, "weight": 70, "height": 175, "heart_rate": 72})
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["vitals"]["bmi"], 22.9)
        self.assertEqual(len(self.store.rows), 1)

    def test_record_vitals_keeps_supplied_bmi(self):
        response = self.client.post("/v1/vitals/", json={
            "patient_id": PATIENT, "doctor_id": DOCTOR, "weight": 70, "height": 175, "bmi": 25.0})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["vitals"]["bmi"], 25.0)

    def test_record_vitals_without_height_has_no_bmi(self):
        response = self.client.post("/v1/vitals/", json={"patient_id": PATIENT, "doctor_id": DOCTOR, "weight": 70})
        self.assertEqual(response.status_code, 201)
        self.assertIsNone(response.json()["vitals"]["bmi"])

    def test_record_vitals_requires_patient_and_doctor(self):
        response = self.client.post("/v1/vitals/", json={"doctor_id": DOCTOR, "weight": 70})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(self.store.rows, {})

    def test_measurements_outside_column_range_are_rejected(self):
        for measurements in ({"weight": 100, "height": 1}, {"weight": 501}, {"height": 301},
                             {"temperature": 116}, {"bmi": 1000}):
            with self.subTest(**measurements):
                response = self.client.post("/v1/vitals/", json={
                    "patient_id": PATIENT, "doctor_id": DOCTOR, **measurements})
                self.assertEqual(response.status_code, 422)
        self.assertEqual(self.store.rows, {})

    def test_extreme_measurements_within_range(self):
        response = self.client.post("/v1/vitals/", json={
            "patient_id": PATIENT, "doctor_id": DOCTOR, "weight": 500, "height": 30, "temperature": 115})
        self.assertEqual(response.status_code, 201)
        # 500 / 0.3**2 still fits in the bmi column
        self.assertEqual(response.json()["vitals"]["bmi"], 5555.6)

    def test_update_with_height_out_of_range(self):
        row = self._seed(weight=80.0, height=180.0, bmi=24.7)
        response = self.client.put(f"/v1/vitals/{row['id']}", json={"height": 1})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(self.store.rows[row["id"]]["bmi"], 24.7)

    def test_update_weight_uses_stored_height(self):
        row = self._seed(weight=80.0, height=180.0, bmi=24.7)
        response = self.client.put(f"/v1/vitals/{row['id']}", json={"weight": 90})
        self.assertEqual(response.status_code, 200)
        vitals = response.json()["vitals"]
        self.assertEqual(vitals["bmi"], 27.8)
        self.assertEqual(vitals["height"], 180.0)

    def test_update_without_weight_or_height_keeps_bmi(self):
        row = self._seed(weight=80.0, height=180.0, bmi=24.7)
        response = self.client.put(f"/v1/vitals/{row['id']}", json={"notes": "rechecked"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["vitals"]["bmi"], 24.7)

    def test_update_ignores_identifying_fields(self):
        row = self._seed(weight=80.0, height=180.0)
        other_patient = str(uuid.uuid4())
        response = self.client.put(f"/v1/vitals/{row['id']}", json={"patient_id": other_patient, "pulse": 70})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.store.rows[row["id"]]["patient_id"], PATIENT)

    def test_update_unknown_vitals(self):
        response = self.client.put(f"/v1/vitals/{uuid.uuid4()}", json={"weight": 90})
        self.assertEqual(response.status_code, 404)

    def test_get_vitals_by_id(self):
        row = self._seed(heart_rate=64)
        response = self.client.get(f"/v1/vitals/{row['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["vitals"]["heart_rate"], 64)
        self.assertEqual(self.client.get(f"/v1/vitals/{uuid.uuid4()}").status_code, 404)

    def test_malformed_id_is_rejected(self):
        self.assertEqual(self.client.get("/v1/vitals/not-a-uuid").status_code, 422)

    def test_history_is_newest_first(self):
        for hours_ago in (5, 1, 3):
            self._seed(heart_rate=60 + hours_ago, recorded_at=recorded(hours_ago))
        response = self.client.get(f"/v1/vitals/patient/{PATIENT}?limit=2")
        body = response.json()
        self.assertEqual(body["count"], 2)
        self.assertEqual([v["heart_rate"] for v in body["vitals"]], [61, 63])

    def test_latest_without_records(self):
        response = self.client.get(f"/v1/vitals/patient/{PATIENT}/latest")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "No vitals found for this patient")

    def test_trends_without_records(self):
        response = self.client.get(f"/v1/vitals/patient/{PATIENT}/trends")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "No vitals data found")

    def test_trends(self):
        self._seed(blood_pressure_systolic=120, blood_pressure_diastolic=80, temperature=98.6,
                   recorded_at=recorded(1))
        self._seed(blood_pressure_systolic=130, temperature=99.0, recorded_at=recorded(2))

        response = self.client.get(f"/v1/vitals/patient/{PATIENT}/trends")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["total_readings"], 2)
        trends = body["trends"]
        self.assertEqual(trends["blood_pressure"]["avg_systolic"], 120)
        self.assertEqual(trends["blood_pressure"]["avg_diastolic"], 80)
        self.assertEqual(len(trends["blood_pressure"]["readings"]), 1)
        self.assertEqual(trends["temperature"]["avg"], "98.8")
        self.assertEqual(trends["heart_rate"], {"avg": 0, "readings": []})

    def test_trends_default_to_ten_most_recent(self):
        for hours_ago in range(12):
            self._seed(heart_rate=70, recorded_at=recorded(hours_ago))
        body = self.client.get(f"/v1/vitals/patient/{PATIENT}/trends").json()
        self.assertEqual(body["total_readings"], 10)
        self.assertEqual(len(body["trends"]["heart_rate"]["readings"]), 10)


class TestVitalsApiAuthentication(unittest.TestCase):

    def setUp(self):
        app.dependency_overrides[deps.get_vitals_store] = lambda: FakeVitalsStore()
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_requires_token(self):
        response = self.client.get(f"/v1/vitals/patient/{PATIENT}/trends")
        self.assertEqual(response.status_code, 401)

    def test_rejects_garbage_token(self):
        response = self.client.get(f"/v1/vitals/patient/{PATIENT}/trends",
                                   headers={"Authorization": "Bearer not.a.token"})
        self.assertEqual(response.status_code, 401)


if __name__ == '__main__':
    unittest.main()
