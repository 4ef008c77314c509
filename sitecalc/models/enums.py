from enum import Enum


class ConceptCategory(str, Enum):
    FOUNDATION = "foundation"
    FRAMING = "framing"
    ELECTRICAL = "electrical"
    PLUMBING = "plumbing"
    ROOFING = "roofing"
    DRYWALL = "drywall"
    FLOORING = "flooring"
    PAINTING = "painting"


class ConceptStatus(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "ConceptStatus":
        """Map a raw status string to a member; unrecognized values become UNKNOWN."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class TradeType(str, Enum):
    CONCRETE_WORKER = "concrete_worker"
    REBAR_WORKER = "rebar_worker"
    EXCAVATOR_OPERATOR = "excavator_operator"
    CARPENTER = "carpenter"
    FRAMER = "framer"
    CRANE_OPERATOR = "crane_operator"
    ELECTRICIAN = "electrician"
    ELECTRICAL_HELPER = "electrical_helper"
    PLUMBER = "plumber"
    PIPEFITTER = "pipefitter"
    ROOFER = "roofer"
    ROOFING_HELPER = "roofing_helper"
    DRYWALL_INSTALLER = "drywall_installer"
    TAPER = "taper"
    FLOORING_INSTALLER = "flooring_installer"
    TILE_SETTER = "tile_setter"
    PAINTER = "painter"
    PAINTING_HELPER = "painting_helper"


class ComparisonSortField(str, Enum):
    CONCEPT_ID = "concept_id"
    ACTUAL_COST = "actual_cost"
    FORECASTED_COST = "forecasted_cost"
    VARIANCE_PERCENT = "variance_percent"
