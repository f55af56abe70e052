"""Tests for the ServiceDeliveryLocationRoleType hierarchy."""

from src.models.coding import UnknownCode
from src.terminology import (
    RoleTypeCategory,
    ServiceDeliveryLocationRoleType,
    get_all_concepts,
    get_ancestors,
    get_children,
    get_concept,
    get_full_path,
    is_a,
    search_concepts,
    validate_code,
)
from src.terminology.codes import get_concepts_by_category, get_top_level_concepts


class TestConceptTable:
    """Tests for the concept table."""

    def test_every_code_has_a_concept(self) -> None:
        """Test that the table covers the whole code list in order."""
        concepts = get_all_concepts()
        assert [c.code for c in concepts] == ServiceDeliveryLocationRoleType.codes()

    def test_parents_exist(self) -> None:
        """Test that every parent code is itself a concept."""
        for concept in get_all_concepts():
            if concept.parent_code is not None:
                assert get_concept(concept.parent_code) is not None

    def test_children_share_parent_category(self) -> None:
        """Test that concepts stay in their parent's category."""
        for concept in get_all_concepts():
            if concept.parent_code is not None:
                parent = get_concept(concept.parent_code)
                assert parent is not None
                assert parent.category == concept.category

    def test_levels(self) -> None:
        """Test that hierarchy levels follow the parents."""
        hospital_unit = get_concept("HU")
        nicu = get_concept("PEDNICU")
        assert hospital_unit is not None and hospital_unit.level == 1
        assert hospital_unit.is_top_level
        assert nicu is not None and nicu.level == 4


class TestGetConcept:
    """Tests for get_concept and validate_code."""

    def test_existing_code(self) -> None:
        """Test retrieving a concept by code."""
        concept = get_concept("ICU")
        assert concept is not None
        assert concept.display == "Intensive care unit"
        assert concept.parent_code == "HU"
        assert concept.category == RoleTypeCategory.DEDICATED_CLINICAL

    def test_code_matches_ignoring_case(self) -> None:
        """Test that lookups follow the code list's matching."""
        concept = get_concept("icu")
        assert concept is not None
        assert concept.code == "ICU"

    def test_decoded_values(self) -> None:
        """Test lookups with decoded members and fallbacks."""
        concept = get_concept(ServiceDeliveryLocationRoleType.AMBULANCE)
        assert concept is not None
        assert concept.display == "Ambulance"
        assert get_concept(UnknownCode(ServiceDeliveryLocationRoleType, "X1")) is None

    def test_validate_code(self) -> None:
        """Test code validation."""
        assert validate_code("HOSP") is True
        assert validate_code("hosp") is True
        assert validate_code("NOPE") is False


class TestHierarchy:
    """Tests for hierarchy navigation."""

    def test_children(self) -> None:
        """Test direct children of a concept."""
        children = [c.code for c in get_children("ICU")]
        assert children == ["PEDICU"]

    def test_children_of_leaf(self) -> None:
        """Test that leaf concepts have no children."""
        assert get_children("PEDNICU") == []

    def test_ancestors_nearest_first(self) -> None:
        """Test the ancestor chain order."""
        ancestors = [c.code for c in get_ancestors("PEDNICU")]
        assert ancestors == ["PEDICU", "ICU", "HU"]

    def test_ancestors_of_unknown_code(self) -> None:
        """Test that unknown codes have no ancestors."""
        assert get_ancestors("NOPE") == []

    def test_full_path(self) -> None:
        """Test the display path from the top-level concept."""
        assert get_full_path("ICU") == "Hospital unit > Intensive care unit"
        assert get_full_path("HU") == "Hospital unit"
        assert get_full_path("NOPE") is None

    def test_is_a(self) -> None:
        """Test subsumption checks."""
        assert is_a("PEDNICU", "HU")
        assert is_a("ICU", ServiceDeliveryLocationRoleType.INTENSIVE_CARE_UNIT)
        assert is_a("ICU", "ICU")
        assert not is_a("HU", "ICU")
        assert not is_a(UnknownCode(ServiceDeliveryLocationRoleType, "ICU2"), "HU")


class TestSearch:
    """Tests for search_concepts."""

    def test_exact_code_ranks_first(self) -> None:
        """Test that an exact code match is the top result."""
        results = search_concepts("ICU")
        assert results[0].code == "ICU"

    def test_prefix_ranks_above_substring(self) -> None:
        """Test that displays starting with the query rank higher."""
        results = search_concepts("pharmacy")
        assert [c.code for c in results] == ["PHARM", "INPHARM", "OUTPHARM"]

    def test_category_filter(self) -> None:
        """Test filtering search results by category."""
        results = search_concepts(
            "pharmacy", category=RoleTypeCategory.DEDICATED_CLINICAL
        )
        assert [c.code for c in results] == ["INPHARM", "OUTPHARM"]

    def test_limit(self) -> None:
        """Test the result limit."""
        assert len(search_concepts("unit", limit=3)) == 3

    def test_no_match(self) -> None:
        """Test that unmatched queries return nothing."""
        assert search_concepts("zzzz") == []


class TestCategories:
    """Tests for category helpers."""

    def test_concepts_by_category(self) -> None:
        """Test that categories partition the table."""
        total = sum(len(get_concepts_by_category(c)) for c in RoleTypeCategory)
        assert total == len(get_all_concepts())
        incidental = [
            c.code for c in get_concepts_by_category(RoleTypeCategory.INCIDENTAL)
        ]
        assert "SCHOOL" in incidental
        assert "WORK" in incidental

    def test_top_level_concepts(self) -> None:
        """Test that top-level concepts have no parent."""
        top = get_top_level_concepts(RoleTypeCategory.DEDICATED_CLINICAL)
        assert {"DX", "HOSP", "HU"} <= {c.code for c in top}
        assert all(c.parent_code is None for c in top)
