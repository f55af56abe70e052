"""ServiceDeliveryLocationRoleType code system and hierarchy utilities."""

from src.terminology.codes import (
    get_all_concepts,
    get_ancestors,
    get_children,
    get_concept,
    get_concepts_by_category,
    get_full_path,
    get_top_level_concepts,
    is_a,
    search_concepts,
    validate_code,
)
from src.terminology.models import RoleTypeConcept
from src.terminology.role_types import (
    RoleTypeCategory,
    ServiceDeliveryLocationRoleType,
)

__all__ = [
    "ServiceDeliveryLocationRoleType",
    "RoleTypeCategory",
    "RoleTypeConcept",
    "get_concept",
    "get_children",
    "get_ancestors",
    "get_full_path",
    "is_a",
    "search_concepts",
    "validate_code",
    "get_all_concepts",
    "get_concepts_by_category",
    "get_top_level_concepts",
]
