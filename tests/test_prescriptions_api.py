import unittest
import uuid

from fastapi.testclient import TestClient

from dhr_api.app.api import deps
from dhr_api.app.core.auth import DoctorUser, get_current_doctor
from dhr_api.main import app
from tests.fakes import FakePrescriptionStore

PATIENT = str(uuid.uuid4())
DOCTOR = str(uuid.uuid4())
RECORD = str(uuid.uuid4())


class TestPrescriptionsApi(unittest.TestCase):

    def setUp(self):
        self.store = FakePrescriptionStore()
        app.dependency_overrides[deps.get_prescription_store] = lambda: self.store
        app.dependency_overrides[get_current_doctor] = lambda: DoctorUser(id=DOCTOR, doctor_id="DOC1001")
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _seed(self, **values):
        return self.store.put({"patient_id": PATIENT, "doctor_id": DOCTOR, "medicine_name": "Amoxicillin",
                               "status": "active", **values})

    def test_create_defaults_to_active(self):
        response = self.client.post("/v1/prescriptions/", json={
            "patient_id": PATIENT, "doctor_id": DOCTOR, "medicine_name": "Amoxicillin",
            "dosage": "500 mg", "frequency": "thrice daily"})
        self.assertEqual(response.status_code, 201)
        prescription = response.json()["prescription"]
        self.assertEqual(prescription["status"], "active")
        self.assertIsNotNone(prescription["prescribed_date"])

    def test_create_requires_medicine(self):
        response = self.client.post("/v1/prescriptions/", json={"patient_id": PATIENT, "doctor_id": DOCTOR})
        self.assertEqual(response.status_code, 422)

    def test_bulk_create_shares_ids(self):
        response = self.client.post("/v1/prescriptions/bulk", json={
            "patient_id": PATIENT, "doctor_id": DOCTOR, "medical_record_id": RECORD,
            "prescriptions": [
                {"medicine_name": "Metformin", "dosage": "500 mg"},
                {"medicine_name": "Atorvastatin", "status": "completed"},
            ]})
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["count"], 2)
        self.assertEqual(body["message"], "2 prescriptions created successfully")
        for prescription in body["prescriptions"]:
            self.assertEqual(prescription["patient_id"], PATIENT)
            self.assertEqual(prescription["doctor_id"], DOCTOR)
            self.assertEqual(prescription["medical_record_id"], RECORD)
        self.assertEqual([p["status"] for p in body["prescriptions"]], ["active", "completed"])

    def test_bulk_create_needs_at_least_one(self):
        response = self.client.post("/v1/prescriptions/bulk", json={
            "patient_id": PATIENT, "doctor_id": DOCTOR, "prescriptions": []})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(self.store.rows, {})

    def test_bulk_create_rejects_unknown_status(self):
        response = self.client.post("/v1/prescriptions/bulk", json={
            "patient_id": PATIENT, "doctor_id": DOCTOR,
            "prescriptions": [{"medicine_name": "Metformin", "status": "paused"}]})
        self.assertEqual(response.status_code, 422)

    def test_list_by_patient_and_record(self):
        self._seed(medical_record_id=RECORD)
        self._seed()
        self.assertEqual(self.client.get(f"/v1/prescriptions/patient/{PATIENT}").json()["count"], 2)
        self.assertEqual(self.client.get(f"/v1/prescriptions/medical-record/{RECORD}").json()["count"], 1)

    def test_update(self):
        row = self._seed()
        response = self.client.put(f"/v1/prescriptions/{row['id']}", json={"status": "discontinued"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["prescription"]["status"], "discontinued")

    def test_delete(self):
        row = self._seed()
        response = self.client.delete(f"/v1/prescriptions/{row['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["prescription"]["id"], row["id"])
        self.assertEqual(self.client.get(f"/v1/prescriptions/{row['id']}").status_code, 404)

    def test_delete_unknown_prescription(self):
        response = self.client.delete(f"/v1/prescriptions/{uuid.uuid4()}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Prescription not found")


if __name__ == '__main__':
    unittest.main()
