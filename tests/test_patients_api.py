import datetime
import unittest
import uuid

from fastapi.testclient import TestClient

from dhr_api.app.api import deps
from dhr_api.app.core.auth import DoctorUser, get_current_doctor
from dhr_api.main import app
from tests.fakes import (FakeAppointmentStore, FakeMedicalRecordStore, FakePatientStore, FakePrescriptionStore,
                         FakeVitalsStore, now)

DOCTOR = str(uuid.uuid4())


class TestPatientsApi(unittest.TestCase):

    def setUp(self):
        self.patients = FakePatientStore()
        self.records = FakeMedicalRecordStore()
        self.prescriptions = FakePrescriptionStore()
        self.appointments = FakeAppointmentStore()
        self.vitals = FakeVitalsStore()
        app.dependency_overrides.update({
            deps.get_patient_store: lambda: self.patients,
            deps.get_medical_record_store: lambda: self.records,
            deps.get_prescription_store: lambda: self.prescriptions,
            deps.get_appointment_store: lambda: self.appointments,
            deps.get_vitals_store: lambda: self.vitals,
            get_current_doctor: lambda: DoctorUser(id=DOCTOR, doctor_id="DOC1001"),
        })
        self.client = TestClient(app)
        self.patient = self.patients.put({"name": "Anu Thomas", "age": 34, "health_id": "HID00001111"})
        self.patient_id = self.patient["id"]

    def tearDown(self):
        app.dependency_overrides.clear()

    def _link(self, **values):
        return {"patient_id": self.patient_id, "doctor_id": DOCTOR, **values}

    def test_get_patient(self):
        response = self.client.get(f"/v1/patients/{self.patient_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["patient"]["name"], "Anu Thomas")

    def test_get_unknown_patient(self):
        response = self.client.get(f"/v1/patients/{uuid.uuid4()}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Patient not found")

    def test_lookup_by_health_id(self):
        response = self.client.post("/v1/patients/health-id", json={"health_id": " HID00001111 "})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["patient"]["id"], self.patient_id)
        missing = self.client.post("/v1/patients/health-id", json={"health_id": "HID99999999"})
        self.assertEqual(missing.status_code, 404)

    def test_history(self):
        record = self.records.put(self._link(visit_date=now(), is_active=True, diagnosis="Hypertension"))
        self.prescriptions.put(self._link(medicine_name="Amlodipine", status="active",
                                          medical_record_id=record["id"]))
        self.vitals.put(self._link(recorded_at=now(), blood_pressure_systolic=150, blood_pressure_diastolic=95))
        self.records.put({"patient_id": str(uuid.uuid4()), "doctor_id": DOCTOR, "visit_date": now()})

        response = self.client.get(f"/v1/patients/{self.patient_id}/history")
        self.assertEqual(response.status_code, 200)
        history = response.json()["history"]
        self.assertEqual([r["diagnosis"] for r in history["medical_records"]], ["Hypertension"])
        self.assertEqual([p["medicine_name"] for p in history["prescriptions"]], ["Amlodipine"])
        self.assertEqual(history["vitals"][0]["blood_pressure_systolic"], 150)

    def test_history_of_unknown_patient(self):
        response = self.client.get(f"/v1/patients/{uuid.uuid4()}/history")
        self.assertEqual(response.status_code, 404)

    def test_stats(self):
        self.records.put(self._link(visit_date=now(), is_active=False))
        self.records.put(self._link(visit_date=now(), is_active=True))
        self.prescriptions.put(self._link(medicine_name="Metformin", status="active"))
        self.prescriptions.put(self._link(medicine_name="Paracetamol", status="completed"))
        self.appointments.put(self._link(status="completed",
                                         appointment_date=now() - datetime.timedelta(days=7)))
        self.appointments.put(self._link(status="scheduled",
                                         appointment_date=now() + datetime.timedelta(days=7)))
        self.appointments.put(self._link(status="cancelled",
                                         appointment_date=now() + datetime.timedelta(days=8)))
        self.vitals.put(self._link(recorded_at=now() - datetime.timedelta(days=1), heart_rate=80))
        self.vitals.put(self._link(recorded_at=now(), heart_rate=76))

        response = self.client.get(f"/v1/patients/{self.patient_id}/stats")
        self.assertEqual(response.status_code, 200)
        stats = response.json()["stats"]
        self.assertEqual(stats["total_visits"], 2)
        self.assertEqual(stats["active_prescriptions"], 1)
        self.assertEqual(stats["total_appointments"], 3)
        self.assertEqual(stats["upcoming_appointments"], 1)
        self.assertEqual(stats["latest_vitals"]["heart_rate"], 76)

    def test_stats_without_vitals(self):
        stats = self.client.get(f"/v1/patients/{self.patient_id}/stats").json()["stats"]
        self.assertEqual(stats["total_visits"], 0)
        self.assertIsNone(stats["latest_vitals"])

    def test_stats_of_unknown_patient(self):
        response = self.client.get(f"/v1/patients/{uuid.uuid4()}/stats")
        self.assertEqual(response.status_code, 404)

    def test_update(self):
        response = self.client.put(f"/v1/patients/{self.patient_id}", json={"blood_group": "O+", "age": 35})
        self.assertEqual(response.status_code, 200)
        patient = response.json()["patient"]
        self.assertEqual(patient["blood_group"], "O+")
        self.assertEqual(patient["name"], "Anu Thomas")

    def test_update_unknown_patient(self):
        response = self.client.put(f"/v1/patients/{uuid.uuid4()}", json={"age": 35})
        self.assertEqual(response.status_code, 404)

    def test_requires_token(self):
        del app.dependency_overrides[get_current_doctor]
        response = self.client.get(f"/v1/patients/{self.patient_id}")
        self.assertEqual(response.status_code, 401)


if __name__ == '__main__':
    unittest.main()
