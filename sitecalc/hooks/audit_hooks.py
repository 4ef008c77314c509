"""Audit trail for site calculator runs.

Each run produces a ``CalculationAudit`` holding the calculator inputs and a
flat snapshot of the result record, so a logged entry can be replayed
against the same numbers later.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationAudit:
    operation: str
    site_id: str
    inputs: dict[str, Any]
    result: dict[str, Any]
    recorded_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def snapshot_result(result: Any) -> dict[str, Any]:
    """Flatten a calculator result for the audit entry.

    Record results keep every field; lists of records are reduced to their
    count, since per-concept rows are already in the data store.
    """
    if result is None:
        return {}
    if is_dataclass(result) and not isinstance(result, type):
        return {key: _plain(value) for key, value in asdict(result).items()}
    if isinstance(result, (list, tuple)):
        return {"count": len(result)}
    return {"value": _plain(result)}


def log_calculation(
    operation: str,
    site_id: str,
    inputs: Optional[dict[str, Any]] = None,
    result: Any = None,
) -> CalculationAudit:
    """Log one calculator run at INFO and return its audit record."""
    audit = CalculationAudit(
        operation=operation,
        site_id=site_id,
        inputs={key: _plain(value) for key, value in (inputs or {}).items()},
        result=snapshot_result(result),
    )
    logger.info(
        "Site %s %s inputs=%s result=%s", site_id, operation, audit.inputs, audit.result
    )
    return audit
