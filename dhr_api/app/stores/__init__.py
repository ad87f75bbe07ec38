from .appointments import AppointmentStore
from .doctors import DoctorStore
from .medical_records import MedicalRecordStore
from .patients import PatientStore
from .prescriptions import PrescriptionStore
from .vitals import VitalsStore
from .workers import WorkerStore
