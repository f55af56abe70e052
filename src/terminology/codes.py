"""ServiceDeliveryLocationRoleType concept table and hierarchy lookups."""

from collections.abc import Mapping
from types import MappingProxyType

from src.models.coding import UnknownCode
from src.terminology.models import RoleTypeConcept
from src.terminology.role_types import (
    RoleTypeCategory,
    ServiceDeliveryLocationRoleType,
)

_T = ServiceDeliveryLocationRoleType
_CLINICAL = RoleTypeCategory.DEDICATED_CLINICAL
_NON_CLINICAL = RoleTypeCategory.DEDICATED_NON_CLINICAL
_INCIDENTAL = RoleTypeCategory.INCIDENTAL

# (code, display, parent, category), parents listed before their children
_ROWS: tuple[tuple[_T, str, _T | None, RoleTypeCategory], ...] = (
    (_T.DIAGNOSTICS_OR_THERAPEUTICS_UNIT, "Diagnostics or therapeutics unit", None, _CLINICAL),
    (_T.CARDIOVASCULAR_DIAGNOSTICS_UNIT, "Cardiovascular diagnostics or therapeutics unit", _T.DIAGNOSTICS_OR_THERAPEUTICS_UNIT, _CLINICAL),
    (_T.CARDIAC_CATHETERIZATION_LAB, "Cardiac catheterization lab", _T.CARDIOVASCULAR_DIAGNOSTICS_UNIT, _CLINICAL),
    (_T.ECHOCARDIOGRAPHY_LAB, "Echocardiography lab", _T.CARDIOVASCULAR_DIAGNOSTICS_UNIT, _CLINICAL),
    (_T.GASTROENTEROLOGY_DIAGNOSTICS_LAB, "Gastroenterology diagnostics or therapeutics lab", _T.DIAGNOSTICS_OR_THERAPEUTICS_UNIT, _CLINICAL),
    (_T.ENDOSCOPY_LAB, "Endoscopy lab", _T.GASTROENTEROLOGY_DIAGNOSTICS_LAB, _CLINICAL),
    (_T.RADIOLOGY_DIAGNOSTICS_UNIT, "Radiology diagnostics or therapeutics unit", _T.DIAGNOSTICS_OR_THERAPEUTICS_UNIT, _CLINICAL),
    (_T.RADIATION_ONCOLOGY_UNIT, "Radiation oncology unit", _T.RADIOLOGY_DIAGNOSTICS_UNIT, _CLINICAL),
    (_T.NEURORADIOLOGY_UNIT, "Neuroradiology unit", _T.RADIOLOGY_DIAGNOSTICS_UNIT, _CLINICAL),
    (_T.HOSPITAL, "Hospital", None, _CLINICAL),
    (_T.CHRONIC_CARE_FACILITY, "Chronic care facility", _T.HOSPITAL, _CLINICAL),
    (_T.GENERAL_ACUTE_CARE_HOSPITAL, "Hospitals; General Acute Care Hospital", _T.HOSPITAL, _CLINICAL),
    (_T.MILITARY_HOSPITAL, "Military Hospital", _T.HOSPITAL, _CLINICAL),
    (_T.PSYCHIATRIC_CARE_FACILITY, "Psychiatric Care Facility", _T.HOSPITAL, _CLINICAL),
    (_T.REHABILITATION_HOSPITAL, "Rehabilitation hospital", _T.HOSPITAL, _CLINICAL),
    (_T.ADDICTION_TREATMENT_CENTER, "Addiction treatment center", _T.REHABILITATION_HOSPITAL, _CLINICAL),
    (_T.INTELLECTUAL_IMPAIRMENT_CENTER, "Intellectual impairment center", _T.REHABILITATION_HOSPITAL, _CLINICAL),
    (_T.PARENTS_WITH_ADJUSTMENT_DIFFICULTIES_CENTER, "Parents with adjustment difficulties center", _T.REHABILITATION_HOSPITAL, _CLINICAL),
    (_T.PHYSICAL_IMPAIRMENT_CENTER, "Physical impairment center", _T.REHABILITATION_HOSPITAL, _CLINICAL),
    (_T.HEARING_IMPAIRMENT_CENTER, "Physical impairment - hearing center", _T.PHYSICAL_IMPAIRMENT_CENTER, _CLINICAL),
    (_T.MOTOR_SKILLS_IMPAIRMENT_CENTER, "Physical impairment - motor skills center", _T.PHYSICAL_IMPAIRMENT_CENTER, _CLINICAL),
    (_T.VISUAL_SKILLS_IMPAIRMENT_CENTER, "Physical impairment - visual skills center", _T.PHYSICAL_IMPAIRMENT_CENTER, _CLINICAL),
    (_T.YOUTHS_WITH_ADJUSTMENT_DIFFICULTIES_CENTER, "Youths with adjustment difficulties center", _T.REHABILITATION_HOSPITAL, _CLINICAL),
    (_T.HOSPITAL_UNIT, "Hospital unit", None, _CLINICAL),
    (_T.BONE_MARROW_TRANSPLANT_UNIT, "Bone marrow transplant unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.CORONARY_CARE_UNIT, "Coronary care unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.CHEST_UNIT, "Chest unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.EPILEPSY_UNIT, "Epilepsy unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.EMERGENCY_ROOM, "Emergency room", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.EMERGENCY_TRAUMA_UNIT, "Emergency trauma unit", _T.EMERGENCY_ROOM, _CLINICAL),
    (_T.HEMODIALYSIS_UNIT, "Hemodialysis unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.HOSPITAL_LABORATORY, "Hospital laboratory", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.INPATIENT_LABORATORY, "Inpatient laboratory", _T.HOSPITAL_LABORATORY, _CLINICAL),
    (_T.OUTPATIENT_LABORATORY, "Outpatient laboratory", _T.HOSPITAL_LABORATORY, _CLINICAL),
    (_T.RADIOLOGY_UNIT, "Radiology unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.SPECIMEN_COLLECTION_SITE, "Specimen collection site", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.INTENSIVE_CARE_UNIT, "Intensive care unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.PEDIATRIC_INTENSIVE_CARE_UNIT, "Pediatric intensive care unit", _T.INTENSIVE_CARE_UNIT, _CLINICAL),
    (_T.PEDIATRIC_NEONATAL_INTENSIVE_CARE_UNIT, "Pediatric neonatal intensive care unit", _T.PEDIATRIC_INTENSIVE_CARE_UNIT, _CLINICAL),
    (_T.INPATIENT_PHARMACY, "Inpatient pharmacy", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.MEDICAL_LABORATORY, "Medical laboratory", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.NEUROLOGY_CRITICAL_CARE_AND_STROKE_UNIT, "Neurology critical care and stroke unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.NEUROSURGERY_UNIT, "Neurosurgery unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.OUTPATIENT_PHARMACY, "Outpatient pharmacy", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.PEDIATRIC_UNIT, "Pediatric unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.PSYCHIATRIC_HOSPITAL_UNIT, "Psychiatric hospital unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.REHABILITATION_HOSPITAL_UNIT, "Rehabilitation hospital unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.SLEEP_DISORDERS_UNIT, "Sleep disorders unit", _T.HOSPITAL_UNIT, _CLINICAL),
    (_T.NURSING_OR_CUSTODIAL_CARE_FACILITY, "Nursing or custodial care facility", None, _CLINICAL),
    (_T.SKILLED_NURSING_FACILITY, "Skilled nursing facility", _T.NURSING_OR_CUSTODIAL_CARE_FACILITY, _CLINICAL),
    (_T.OUTPATIENT_FACILITY, "Outpatient facility", None, _CLINICAL),
    (_T.ALLERGY_CLINIC, "Allergy clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.AMPUTEE_CLINIC, "Amputee clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.BONE_MARROW_TRANSPLANT_CLINIC, "Bone marrow transplant clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.BREAST_CLINIC, "Breast clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.CHILD_AND_ADOLESCENT_NEUROLOGY_CLINIC, "Child and adolescent neurology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.CHILD_AND_ADOLESCENT_PSYCHIATRY_CLINIC, "Child and adolescent psychiatry clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.CARDIAC_REHABILITATION_CLINIC, "Ambulatory Health Care Facilities; Clinic/Center; Rehabilitation: Cardiac Facilities", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PEDIATRIC_CARDIOLOGY_CLINIC, "Pediatric cardiology clinic", _T.CARDIAC_REHABILITATION_CLINIC, _CLINICAL),
    (_T.COAGULATION_CLINIC, "Coagulation clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.COLON_AND_RECTAL_SURGERY_CLINIC, "Colon and rectal surgery clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.DERMATOLOGY_CLINIC, "Dermatology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.ENDOCRINOLOGY_CLINIC, "Endocrinology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PEDIATRIC_ENDOCRINOLOGY_CLINIC, "Pediatric endocrinology clinic", _T.ENDOCRINOLOGY_CLINIC, _CLINICAL),
    (_T.OTORHINOLARYNGOLOGY_CLINIC, "Otorhinolaryngology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.FAMILY_MEDICINE_CLINIC, "Family medicine clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.GASTROENTEROLOGY_CLINIC, "Gastroenterology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PEDIATRIC_GASTROENTEROLOGY_CLINIC, "Pediatric gastroenterology clinic", _T.GASTROENTEROLOGY_CLINIC, _CLINICAL),
    (_T.GENERAL_INTERNAL_MEDICINE_CLINIC, "General internal medicine clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.GYNECOLOGY_CLINIC, "Gynecology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.HEMATOLOGY_CLINIC, "Hematology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PEDIATRIC_HEMATOLOGY_CLINIC, "Pediatric hematology clinic", _T.HEMATOLOGY_CLINIC, _CLINICAL),
    (_T.HYPERTENSION_CLINIC, "Hypertension clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.IMPAIRMENT_EVALUATION_CENTER, "Impairment evaluation center", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.INFECTIOUS_DISEASE_CLINIC, "Infectious disease clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PEDIATRIC_INFECTIOUS_DISEASE_CLINIC, "Pediatric infectious disease clinic", _T.INFECTIOUS_DISEASE_CLINIC, _CLINICAL),
    (_T.INFERTILITY_CLINIC, "Infertility clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.LYMPHEDEMA_CLINIC, "Lympedema clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.MEDICAL_GENETICS_CLINIC, "Medical genetics clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.NEPHROLOGY_CLINIC, "Nephrology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PEDIATRIC_NEPHROLOGY_CLINIC, "Pediatric nephrology clinic", _T.NEPHROLOGY_CLINIC, _CLINICAL),
    (_T.NEUROLOGY_CLINIC, "Neurology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.OBSTETRICS_CLINIC, "Obstetrics clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.ORAL_AND_MAXILLOFACIAL_SURGERY_CLINIC, "Oral and maxillofacial surgery clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.MEDICAL_ONCOLOGY_CLINIC, "Medical oncology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PEDIATRIC_ONCOLOGY_CLINIC, "Pediatric oncology clinic", _T.MEDICAL_ONCOLOGY_CLINIC, _CLINICAL),
    (_T.OPHTHALMOLOGY_CLINIC, "Opthalmology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.OPTOMETRY_CLINIC, "Optometry clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.ORTHOPEDICS_CLINIC, "Orthopedics clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.HAND_CLINIC, "Hand clinic", _T.ORTHOPEDICS_CLINIC, _CLINICAL),
    (_T.PAIN_CLINIC, "Pain clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PRIMARY_CARE_CLINIC, "Primary care clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PEDIATRICS_CLINIC, "Pediatrics clinic", _T.PRIMARY_CARE_CLINIC, _CLINICAL),
    (_T.PEDIATRIC_RHEUMATOLOGY_CLINIC, "Pediatric rheumatology clinic", _T.PEDIATRICS_CLINIC, _CLINICAL),
    (_T.PODIATRY_CLINIC, "Podiatry clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PREVENTIVE_MEDICINE_CLINIC, "Preventive medicine clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PROCTOLOGY_CLINIC, "Proctology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PROVIDERS_OFFICE, "Provider's Office", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PROSTHODONTICS_CLINIC, "Prosthodontics clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PSYCHOLOGY_CLINIC, "Psychology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PSYCHIATRY_CLINIC, "Psychiatry clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.RHEUMATOLOGY_CLINIC, "Rheumatology clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.SPORTS_MEDICINE_CLINIC, "Sports medicine clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.SURGERY_CLINIC, "Surgery clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.PLASTIC_SURGERY_CLINIC, "Plastic surgery clinic", _T.SURGERY_CLINIC, _CLINICAL),
    (_T.UROLOGY_CLINIC, "Urology clinic", _T.SURGERY_CLINIC, _CLINICAL),
    (_T.TRANSPLANT_CLINIC, "Transplant clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.TRAVEL_AND_GEOGRAPHIC_MEDICINE_CLINIC, "Travel and geographic medicine clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.WOUND_CLINIC, "Wound clinic", _T.OUTPATIENT_FACILITY, _CLINICAL),
    (_T.RESIDENTIAL_TREATMENT_FACILITY, "Residential treatment facility", None, _CLINICAL),
    (_T.PAIN_REHABILITATION_CENTER, "Pain rehabilitation center", _T.RESIDENTIAL_TREATMENT_FACILITY, _CLINICAL),
    (_T.SUBSTANCE_USE_REHABILITATION_FACILITY, "Substance use rehabilitation facility", _T.RESIDENTIAL_TREATMENT_FACILITY, _CLINICAL),
    (_T.DELIVERY_ADDRESS, "Delivery Address", None, _NON_CLINICAL),
    (_T.MOBILE_UNIT, "Mobile Unit", None, _NON_CLINICAL),
    (_T.AMBULANCE, "Ambulance", _T.MOBILE_UNIT, _NON_CLINICAL),
    (_T.PHARMACY, "Pharmacy", None, _NON_CLINICAL),
    (_T.ACCIDENT_SITE, "Accident site", None, _INCIDENTAL),
    (_T.COMMUNITY_LOCATION, "Community Location", None, _INCIDENTAL),
    (_T.COMMUNITY_SERVICE_CENTER, "Community service center", _T.COMMUNITY_LOCATION, _INCIDENTAL),
    (_T.PATIENTS_RESIDENCE, "Patient's Residence", None, _INCIDENTAL),
    (_T.SCHOOL, "School", None, _INCIDENTAL),
    (_T.UNDERAGE_PROTECTION_CENTER, "Underage protection center", None, _INCIDENTAL),
    (_T.WORK_SITE, "Work site", None, _INCIDENTAL),
)  # fmt: skip


def _build_concepts() -> Mapping[str, RoleTypeConcept]:
    """Build the read-only code -> concept table from the rows above."""
    concepts: dict[str, RoleTypeConcept] = {}
    for member, display, parent, category in _ROWS:
        parent_code = parent.value if parent is not None else None
        level = concepts[parent_code].level + 1 if parent_code is not None else 1
        concepts[member.value] = RoleTypeConcept(
            code=member.value,
            display=display,
            category=category,
            parent_code=parent_code,
            level=level,
        )
    return MappingProxyType(concepts)


_CONCEPTS = _build_concepts()


def _code_of(code: str | ServiceDeliveryLocationRoleType | UnknownCode) -> str:
    """Normalize a code argument to the table's canonical key."""
    if isinstance(code, UnknownCode):
        return code.value
    member = ServiceDeliveryLocationRoleType.match(str(code))
    return member.value if member is not None else str(code)


def get_all_concepts() -> list[RoleTypeConcept]:
    """Get all role type concepts in code system order.

    Returns:
        List of all RoleTypeConcept objects.
    """
    return list(_CONCEPTS.values())


def get_concept(
    code: str | ServiceDeliveryLocationRoleType | UnknownCode,
) -> RoleTypeConcept | None:
    """Get a specific concept by its code.

    Args:
        code: The concept code (e.g., 'HOSP'), matched ignoring case, or a
            decoded role type value.

    Returns:
        RoleTypeConcept if found, None otherwise.
    """
    return _CONCEPTS.get(_code_of(code))


def validate_code(code: str) -> bool:
    """Check if a code is one of the known role types.

    Args:
        code: The code to validate.

    Returns:
        True if the code exists, False otherwise.
    """
    return get_concept(code) is not None


def get_children(
    code: str | ServiceDeliveryLocationRoleType | UnknownCode,
) -> list[RoleTypeConcept]:
    """Get all direct children of a concept.

    Args:
        code: The parent concept code.

    Returns:
        List of concepts that have this code as their parent.
    """
    parent_code = _code_of(code)
    return [c for c in _CONCEPTS.values() if c.parent_code == parent_code]


def get_ancestors(
    code: str | ServiceDeliveryLocationRoleType | UnknownCode,
) -> list[RoleTypeConcept]:
    """Get all ancestors of a concept (parent, grandparent, etc.).

    Args:
        code: The concept code.

    Returns:
        List of concepts from immediate parent to root.
        Empty list if the concept is top-level or not found.
    """
    ancestors: list[RoleTypeConcept] = []

    current = get_concept(code)
    if current is None:
        return ancestors

    while current.parent_code is not None:
        parent = _CONCEPTS.get(current.parent_code)
        if parent is None:
            break
        ancestors.append(parent)
        current = parent

    return ancestors


def get_full_path(
    code: str | ServiceDeliveryLocationRoleType | UnknownCode,
) -> str | None:
    """Get the full hierarchical path for a concept.

    Args:
        code: The concept code.

    Returns:
        Full path string (e.g., 'Hospital unit > Intensive care unit'),
        or None if the concept is not found.
    """
    concept = get_concept(code)
    if concept is None:
        return None

    ancestors = get_ancestors(code)
    path_parts = [a.display for a in reversed(ancestors)] + [concept.display]
    return " > ".join(path_parts)


def is_a(
    code: str | ServiceDeliveryLocationRoleType | UnknownCode,
    ancestor: str | ServiceDeliveryLocationRoleType,
) -> bool:
    """Check whether a concept is the given concept or one of its descendants.

    Args:
        code: The concept code to test.
        ancestor: The concept code to test against.

    Returns:
        True if ``code`` equals ``ancestor`` or descends from it. Unknown
        codes are never subsumed by anything.
    """
    concept = get_concept(code)
    if concept is None:
        return False
    wanted = _code_of(ancestor)
    if concept.code == wanted:
        return True
    return any(a.code == wanted for a in get_ancestors(concept.code))


def search_concepts(
    query: str,
    category: RoleTypeCategory | None = None,
    limit: int = 20,
) -> list[RoleTypeConcept]:
    """Search for concepts matching a query string.

    Args:
        query: Search query (case-insensitive), matched against codes and
            display names.
        category: Optional filter by category.
        limit: Maximum number of results to return.

    Returns:
        List of matching concepts, ordered by relevance.
    """
    query_lower = query.lower()
    results: list[tuple[int, RoleTypeConcept]] = []

    for concept in _CONCEPTS.values():
        if category is not None and concept.category != category:
            continue

        score = 0

        # Exact code match ranks highest
        if query_lower == concept.code.lower():
            score += 100

        display_lower = concept.display.lower()
        if query_lower in display_lower:
            score += 50
            if display_lower.startswith(query_lower):
                score += 20

        if score > 0:
            results.append((score, concept))

    # Stable sort keeps code system order among equal scores
    results.sort(key=lambda x: x[0], reverse=True)

    return [concept for _, concept in results[:limit]]


def get_concepts_by_category(category: RoleTypeCategory) -> list[RoleTypeConcept]:
    """Get all concepts in a category.

    Args:
        category: The category of concepts to retrieve.

    Returns:
        List of concepts in the category.
    """
    return [c for c in _CONCEPTS.values() if c.category == category]


def get_top_level_concepts(
    category: RoleTypeCategory | None = None,
) -> list[RoleTypeConcept]:
    """Get all top-level concepts (concepts without parents).

    Args:
        category: Optional filter by category.

    Returns:
        List of top-level concepts.
    """
    return [
        c
        for c in _CONCEPTS.values()
        if c.is_top_level and (category is None or c.category == category)
    ]
