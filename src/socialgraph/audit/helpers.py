"""Helper utilities for audit logging: run IDs and timestamps."""

import secrets
from datetime import UTC, datetime

__all__ = [
    "generate_run_id",
    "get_iso_timestamp",
    "get_package_version",
]


def get_iso_timestamp() -> str:
    """Get current UTC timestamp in ISO8601 format with microseconds.

    Returns
    -------
    str
        ISO8601 timestamp (e.g., "2026-02-03T12:34:56.123456Z").
    """
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def generate_run_id() -> str:
    """Generate unique run identifier.

    Returns
    -------
    str
        Run ID in format: ISO8601_timestamp__random_suffix.
    """
    return f"{get_iso_timestamp()}__{secrets.token_hex(4)}"


def get_package_version() -> str:
    """Get socialgraph package version.

    Returns
    -------
    str
        Package version or "unknown".
    """
    import importlib.metadata

    try:
        return importlib.metadata.version("socialgraph")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"
