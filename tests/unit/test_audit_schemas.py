"""Tests for schema validation of audit events."""

import json
from pathlib import Path

import jsonschema
import pytest

from socialgraph.audit.logger import AuditLogger
from socialgraph.network import SocialNetwork

_SCHEMAS_DIR = Path(__file__).parent.parent.parent / "schemas"


@pytest.fixture(scope="module")
def event_schema() -> dict:
    """Load log event JSON schema."""
    with (_SCHEMAS_DIR / "log_event.schema.json").open() as f:
        return json.load(f)


@pytest.mark.unit
def test_generated_events_validate(tmp_path: Path, event_schema: dict) -> None:
    """Test events produced by a network run validate against schema."""
    log_path = tmp_path / "events.jsonl"
    with AuditLogger(run_id="run", log_path=log_path) as logger:
        logger.run_started(command=["socialgraph", "demo"], parameters={})
        network = SocialNetwork(audit_logger=logger)
        network.add_friendships([(1, 2), (2, 3)])
        logger.error("ValueError", "boom", user=2)
        logger.run_finished(status="success", duration_seconds=0.01, counters={"users": 3})

    with log_path.open() as f:
        lines = [line for line in f if line.strip()]

    assert len(lines) == 8
    for line in lines:
        jsonschema.validate(instance=json.loads(line), schema=event_schema)


@pytest.mark.unit
def test_invalid_events_rejected_by_schema(event_schema: dict) -> None:
    """Test schema rejects invalid level and missing fields."""
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance={"ts": "x", "run_id": "x"}, schema=event_schema)

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(
            instance={
                "ts": "2026-01-01T00:00:00Z",
                "run_id": "x",
                "level": "LOUD",
                "event": "e",
                "data": {},
            },
            schema=event_schema,
        )
