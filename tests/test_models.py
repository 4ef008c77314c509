"""Tests for record row parsing and enum helpers."""

import pytest

from sitecalc.models.enums import ConceptStatus
from sitecalc.models.records import ActualCostEntry, Concept, ConceptForecast


class TestConceptForecastFromRow:
    def test_parses_row(self):
        forecast = ConceptForecast.from_row(
            {"concept_id": 7, "site_id": "site-1", "forecast_total_cost": "1500.50"}
        )
        assert forecast.concept_id == "7"
        assert forecast.forecast_total_cost == 1500.5
        assert forecast.concept_name is None

    def test_missing_cost_defaults_to_zero(self):
        forecast = ConceptForecast.from_row({"concept_id": "1", "site_id": "s"})
        assert forecast.forecast_total_cost == 0.0

    def test_missing_concept_id_raises(self):
        with pytest.raises(KeyError):
            ConceptForecast.from_row({"site_id": "s"})


class TestActualCostEntryFromRow:
    def test_parses_row(self):
        entry = ActualCostEntry.from_row(
            {"concept_id": "1", "actual_cost": 900, "logged_at": "2024-05-01T00:00:00Z", "site_id": 3}
        )
        assert entry.actual_cost == 900.0
        assert entry.site_id == "3"

    def test_site_is_optional(self):
        entry = ActualCostEntry.from_row({"concept_id": "1", "actual_cost": None})
        assert entry.site_id is None
        assert entry.actual_cost == 0.0


class TestConceptFromRow:
    def test_parses_row(self):
        concept = Concept.from_row(
            {
                "id": 12,
                "site_id": "site-1",
                "name": "Framing",
                "status": "active",
                "planned_quantity": 200,
                "unit_price": "80",
                "start_date": "2024-04-16",
                "end_date": "",
                "progress": 45,
            }
        )
        assert concept.id == "12"
        assert concept.unit_price == 80.0
        assert concept.end_date is None
        assert concept.progress == 45.0

    def test_progress_percentage_fallback(self):
        concept = Concept.from_row({"id": "1", "name": "Roofing", "progress_percentage": 20})
        assert concept.progress == 20.0

    def test_defaults(self):
        concept = Concept.from_row({"id": "1"})
        assert concept.name == ""
        assert concept.planned_quantity == 0.0
        assert concept.progress is None


class TestConceptStatus:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("planning", ConceptStatus.PLANNING),
            (" Active ", ConceptStatus.ACTIVE),
            ("COMPLETED", ConceptStatus.COMPLETED),
            ("in_progress", ConceptStatus.UNKNOWN),
            ("", ConceptStatus.UNKNOWN),
            (None, ConceptStatus.UNKNOWN),
        ],
    )
    def test_parse(self, raw, expected):
        assert ConceptStatus.parse(raw) == expected
