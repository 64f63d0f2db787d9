"""Tests for the decoded result set."""

import pytest

from meilimelo import Results, ResultsConsumedError


def test_decode_metadata(employee_schema, search_response):
    """Metadata fields equal the JSON fields verbatim."""
    results = Results[employee_schema].model_validate(search_response)

    assert results.query == "sky"
    assert results.nb_hits == 3
    assert results.exhaustive_hits is False
    assert results.exhaustive_facets is True
    assert results.distribution == {"roles": {"Tech": 2, "Lead": 1}}
    assert results.limit == 20
    assert results.offset == 0
    assert results.duration == 4
    assert len(results) == 3


def test_optional_fields_absent(employee_schema, search_response):
    del search_response["exhaustiveFacetsCount"]
    del search_response["facetsDistribution"]

    results = Results[employee_schema].model_validate(search_response)

    assert results.exhaustive_facets is None
    assert results.distribution is None


def test_hits_typed_and_ordered(employee_schema, search_response):
    """Hits decode into the schema, in backend order."""
    results = Results[employee_schema].model_validate(search_response)

    assert all(isinstance(hit, employee_schema) for hit in results)
    assert [hit.firstname for hit in results] == ["Luke", "Anakin", "Shmi"]
    assert results[1].roles == ["Lead", "Tech"]


def test_hits_cannot_be_mutated(employee_schema, search_response):
    results = Results[employee_schema].model_validate(search_response)

    with pytest.raises(AttributeError):
        results.hits.clear()

    assert len(results) == 3
    assert isinstance(results.hits, tuple)


def test_formatted_companion(employee_schema, search_response):
    results = Results[employee_schema].model_validate(search_response)

    assert results[0].formatted.lastname == "<em>Sky</em>walker"
    assert results[1].formatted is None


def test_iteration_repeatable(employee_schema, search_response):
    """Iterating by reference twice yields the same sequence."""
    results = Results[employee_schema].model_validate(search_response)

    first = list(results)
    second = list(results)

    assert first == second
    assert [h.firstname for h in first] == ["Luke", "Anakin", "Shmi"]


def test_consume_once(employee_schema, search_response):
    """consume() yields every hit once, then the set is exhausted."""
    results = Results[employee_schema].model_validate(search_response)

    consumed = list(results.consume())

    assert [h.firstname for h in consumed] == ["Luke", "Anakin", "Shmi"]
    with pytest.raises(ResultsConsumedError):
        results.consume()
    with pytest.raises(ResultsConsumedError):
        list(results)
    with pytest.raises(ResultsConsumedError):
        results[0]


def test_no_reordering_or_dedup(employee_schema, search_response):
    duplicate = dict(search_response["hits"][1])
    search_response["hits"].insert(0, duplicate)

    results = Results[employee_schema].model_validate(search_response)

    assert [h.firstname for h in results] == ["Anakin", "Luke", "Anakin", "Shmi"]


def test_results_immutable(employee_schema, search_response):
    from pydantic import ValidationError

    results = Results[employee_schema].model_validate(search_response)

    with pytest.raises(ValidationError):
        results.nb_hits = 0
