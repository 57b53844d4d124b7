from dialysis_records.models.user import Account
from dialysis_records.models.patient import Patient
from dialysis_records.models.pathology import PathologyRecord
from dialysis_records.models.hemodialysis import HemodialysisRecord
from dialysis_records.models.dialysis_chart import DialysisChart
from dialysis_records.models.equipment import EquipmentMaintenanceRecord
from dialysis_records.models.medication import MedicationComorbidities
from dialysis_records.models.patient_management import PatientManagementRecord
from dialysis_records.models.report import MonthlyReport
from dialysis_records.models.clinical_progress import ClinicalProgressEntry
from dialysis_records.models.medical_note import (
    MedicalNote, GeneralDetails, DialysisPrescription, SessionDetails, PreAssessment, PostDialysis,
)

__all__ = ["Account", "Patient", "PathologyRecord", "HemodialysisRecord", "DialysisChart",
           "EquipmentMaintenanceRecord", "MedicationComorbidities", "PatientManagementRecord",
           "MonthlyReport", "ClinicalProgressEntry", "MedicalNote", "GeneralDetails",
           "DialysisPrescription", "SessionDetails", "PreAssessment", "PostDialysis"]
