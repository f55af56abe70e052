"""HL7 v3 ServiceDeliveryLocationRoleType codes.

The selectable codes of the value set, grouped the way the code system groups
them. Abstract grouping codes (``_DedicatedClinicalLocationRoleType`` and
friends) are not selectable and appear only as ``RoleTypeCategory`` values.
"""

from enum import Enum

from src.models.coding import ExtensibleEnum


class RoleTypeCategory(str, Enum):
    """Abstract grouping a role type belongs to."""

    DEDICATED_CLINICAL = "dedicated_clinical"
    DEDICATED_NON_CLINICAL = "dedicated_non_clinical"
    INCIDENTAL = "incidental"


class ServiceDeliveryLocationRoleType(ExtensibleEnum):
    """Type of function performed at a location."""

    # Diagnostics or therapeutics units
    DIAGNOSTICS_OR_THERAPEUTICS_UNIT = "DX"
    CARDIOVASCULAR_DIAGNOSTICS_UNIT = "CVDX"
    CARDIAC_CATHETERIZATION_LAB = "CATH"
    ECHOCARDIOGRAPHY_LAB = "ECHO"
    GASTROENTEROLOGY_DIAGNOSTICS_LAB = "GIDX"
    ENDOSCOPY_LAB = "ENDOS"
    RADIOLOGY_DIAGNOSTICS_UNIT = "RADDX"
    RADIATION_ONCOLOGY_UNIT = "RADO"
    NEURORADIOLOGY_UNIT = "RNEU"

    # Hospitals
    HOSPITAL = "HOSP"
    CHRONIC_CARE_FACILITY = "CHR"
    GENERAL_ACUTE_CARE_HOSPITAL = "GACH"
    MILITARY_HOSPITAL = "MHSP"
    PSYCHIATRIC_CARE_FACILITY = "PSYCHF"
    REHABILITATION_HOSPITAL = "RH"
    ADDICTION_TREATMENT_CENTER = "RHAT"
    INTELLECTUAL_IMPAIRMENT_CENTER = "RHII"
    PARENTS_WITH_ADJUSTMENT_DIFFICULTIES_CENTER = "RHMAD"
    PHYSICAL_IMPAIRMENT_CENTER = "RHPI"
    HEARING_IMPAIRMENT_CENTER = "RHPIH"
    MOTOR_SKILLS_IMPAIRMENT_CENTER = "RHPIMS"
    VISUAL_SKILLS_IMPAIRMENT_CENTER = "RHPIVS"
    YOUTHS_WITH_ADJUSTMENT_DIFFICULTIES_CENTER = "RHYAD"

    # Hospital units
    HOSPITAL_UNIT = "HU"
    BONE_MARROW_TRANSPLANT_UNIT = "BMTU"
    CORONARY_CARE_UNIT = "CCU"
    CHEST_UNIT = "CHEST"
    EPILEPSY_UNIT = "EPIL"
    EMERGENCY_ROOM = "ER"
    EMERGENCY_TRAUMA_UNIT = "ETU"
    HEMODIALYSIS_UNIT = "HD"
    HOSPITAL_LABORATORY = "HLAB"
    INPATIENT_LABORATORY = "INLAB"
    OUTPATIENT_LABORATORY = "OUTLAB"
    RADIOLOGY_UNIT = "HRAD"
    SPECIMEN_COLLECTION_SITE = "HUSCS"
    INTENSIVE_CARE_UNIT = "ICU"
    PEDIATRIC_INTENSIVE_CARE_UNIT = "PEDICU"
    PEDIATRIC_NEONATAL_INTENSIVE_CARE_UNIT = "PEDNICU"
    INPATIENT_PHARMACY = "INPHARM"
    MEDICAL_LABORATORY = "MBL"
    NEUROLOGY_CRITICAL_CARE_AND_STROKE_UNIT = "NCCS"
    NEUROSURGERY_UNIT = "NS"
    OUTPATIENT_PHARMACY = "OUTPHARM"
    PEDIATRIC_UNIT = "PEDU"
    PSYCHIATRIC_HOSPITAL_UNIT = "PHU"
    REHABILITATION_HOSPITAL_UNIT = "RHU"
    SLEEP_DISORDERS_UNIT = "SLEEP"

    # Nursing and custodial care
    NURSING_OR_CUSTODIAL_CARE_FACILITY = "NCCF"
    SKILLED_NURSING_FACILITY = "SNF"

    # Outpatient facilities
    OUTPATIENT_FACILITY = "OF"
    ALLERGY_CLINIC = "ALL"
    AMPUTEE_CLINIC = "AMPUT"
    BONE_MARROW_TRANSPLANT_CLINIC = "BMTC"
    BREAST_CLINIC = "BREAST"
    CHILD_AND_ADOLESCENT_NEUROLOGY_CLINIC = "CANC"
    CHILD_AND_ADOLESCENT_PSYCHIATRY_CLINIC = "CAPC"
    CARDIAC_REHABILITATION_CLINIC = "CARD"
    PEDIATRIC_CARDIOLOGY_CLINIC = "PEDCARD"
    COAGULATION_CLINIC = "COAG"
    COLON_AND_RECTAL_SURGERY_CLINIC = "CRS"
    DERMATOLOGY_CLINIC = "DERM"
    ENDOCRINOLOGY_CLINIC = "ENDO"
    PEDIATRIC_ENDOCRINOLOGY_CLINIC = "PEDE"
    OTORHINOLARYNGOLOGY_CLINIC = "ENT"
    FAMILY_MEDICINE_CLINIC = "FMC"
    GASTROENTEROLOGY_CLINIC = "GI"
    PEDIATRIC_GASTROENTEROLOGY_CLINIC = "PEDGI"
    GENERAL_INTERNAL_MEDICINE_CLINIC = "GIM"
    GYNECOLOGY_CLINIC = "GYN"
    HEMATOLOGY_CLINIC = "HEM"
    PEDIATRIC_HEMATOLOGY_CLINIC = "PEDHEM"
    HYPERTENSION_CLINIC = "HTN"
    IMPAIRMENT_EVALUATION_CENTER = "IEC"
    INFECTIOUS_DISEASE_CLINIC = "INFD"
    PEDIATRIC_INFECTIOUS_DISEASE_CLINIC = "PEDID"
    INFERTILITY_CLINIC = "INV"
    LYMPHEDEMA_CLINIC = "LYMPH"
    MEDICAL_GENETICS_CLINIC = "MGEN"
    NEPHROLOGY_CLINIC = "NEPH"
    PEDIATRIC_NEPHROLOGY_CLINIC = "PEDNEPH"
    NEUROLOGY_CLINIC = "NEUR"
    OBSTETRICS_CLINIC = "OB"
    ORAL_AND_MAXILLOFACIAL_SURGERY_CLINIC = "OMS"
    MEDICAL_ONCOLOGY_CLINIC = "ONCL"
    PEDIATRIC_ONCOLOGY_CLINIC = "PEDHO"
    OPHTHALMOLOGY_CLINIC = "OPH"
    OPTOMETRY_CLINIC = "OPTC"
    ORTHOPEDICS_CLINIC = "ORTHO"
    HAND_CLINIC = "HAND"
    PAIN_CLINIC = "PAINCL"
    PRIMARY_CARE_CLINIC = "PC"
    PEDIATRICS_CLINIC = "PEDC"
    PEDIATRIC_RHEUMATOLOGY_CLINIC = "PEDRHEUM"
    PODIATRY_CLINIC = "POD"
    PREVENTIVE_MEDICINE_CLINIC = "PREV"
    PROCTOLOGY_CLINIC = "PROCTO"
    PROVIDERS_OFFICE = "PROFF"
    PROSTHODONTICS_CLINIC = "PROS"
    PSYCHOLOGY_CLINIC = "PSI"
    PSYCHIATRY_CLINIC = "PSY"
    RHEUMATOLOGY_CLINIC = "RHEUM"
    SPORTS_MEDICINE_CLINIC = "SPMED"
    SURGERY_CLINIC = "SU"
    PLASTIC_SURGERY_CLINIC = "PLS"
    UROLOGY_CLINIC = "URO"
    TRANSPLANT_CLINIC = "TR"
    TRAVEL_AND_GEOGRAPHIC_MEDICINE_CLINIC = "TRAVEL"
    WOUND_CLINIC = "WND"

    # Residential treatment
    RESIDENTIAL_TREATMENT_FACILITY = "RTF"
    PAIN_REHABILITATION_CENTER = "PRC"
    SUBSTANCE_USE_REHABILITATION_FACILITY = "SURF"

    # Dedicated non-clinical locations
    DELIVERY_ADDRESS = "DADDR"
    MOBILE_UNIT = "MOBL"
    AMBULANCE = "AMB"
    PHARMACY = "PHARM"

    # Incidental locations
    ACCIDENT_SITE = "ACC"
    COMMUNITY_LOCATION = "COMM"
    COMMUNITY_SERVICE_CENTER = "CSC"
    PATIENTS_RESIDENCE = "PTRES"
    SCHOOL = "SCHOOL"
    UNDERAGE_PROTECTION_CENTER = "UPC"
    WORK_SITE = "WORK"
