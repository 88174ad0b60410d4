"""Audit logging subsystem for socialgraph.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: structured event record
"""

from socialgraph.audit.helpers import generate_run_id, get_iso_timestamp
from socialgraph.audit.logger import AuditLogger
from socialgraph.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
    "get_iso_timestamp",
]
