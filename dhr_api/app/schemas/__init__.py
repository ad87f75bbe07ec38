from .related import DoctorRef, PatientRef
from .vitals import (Vitals, VitalsCreate, VitalsUpdate, VitalsEnvelope, VitalsList, VitalsTrends,
                     VitalsTrendsResponse)
from .prescription import (Prescription, PrescriptionCreate, PrescriptionUpdate, BulkPrescriptionCreate,
                           PrescriptionEnvelope, PrescriptionList)
from .medical_record import (MedicalRecord, MedicalRecordCreate, MedicalRecordUpdate, MedicalRecordEnvelope,
                             MedicalRecordList, ComprehensiveMedicalRecord, ComprehensiveMedicalRecordResponse,
                             FileUpload)
from .appointment import (Appointment, AppointmentCreate, AppointmentUpdate, AppointmentCancel, DateRange,
                          AppointmentEnvelope, AppointmentList)
from .doctor import (Doctor, DoctorCreate, DoctorUpdate, DoctorLogin, DoctorEnvelope, DoctorLoginResponse,
                     DoctorStats, DoctorStatsResponse)
from .patient import (Patient, PatientUpdate, HealthIdLookup, PatientEnvelope, PatientHistory,
                      PatientHistoryResponse, PatientStats, PatientStatsResponse)
from .worker import HealthIdRequest, WorkerRegistration, Worker, WorkerCard, HealthCardResponse, WorkerEnvelope
