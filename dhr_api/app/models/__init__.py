from .metadata import metadata
from .doctor import Doctor
from .patient import Patient
from .appointment import Appointment
from .medical_record import MedicalRecord
from .prescription import Prescription
from .vitals import Vitals
from .worker import Worker
