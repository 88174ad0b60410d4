"""Load social networks from JSON files.

File format::

    {"users": [1, 2, 3], "friendships": [[1, 2], [2, 3]]}

Both keys are optional. Identifiers are integers or strings, one type per
file, so that recommendation tie-breaking can order them.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema

from socialgraph.audit.logger import AuditLogger
from socialgraph.config import NetworkConfig
from socialgraph.errors import NetworkFileError
from socialgraph.network import SocialNetwork

__all__ = ["NETWORK_SCHEMA", "load_network", "network_from_dict"]

NETWORK_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "socialgraph network",
    "type": "object",
    "properties": {
        "users": {
            "type": "array",
            "items": {"$ref": "#/$defs/user_id"},
        },
        "friendships": {
            "type": "array",
            "items": {
                "type": "array",
                "items": {"$ref": "#/$defs/user_id"},
                "minItems": 2,
                "maxItems": 2,
            },
        },
    },
    "additionalProperties": False,
    "$defs": {
        "user_id": {"type": ["integer", "string"]},
    },
}


def network_from_dict(
    data: dict[str, Any],
    config: NetworkConfig | None = None,
    audit_logger: AuditLogger | None = None,
) -> SocialNetwork:
    """Build a network from an already parsed document.

    Parameters
    ----------
    data : dict[str, Any]
        Document matching NETWORK_SCHEMA.
    config : NetworkConfig | None, optional
        Network configuration.
    audit_logger : AuditLogger | None, optional
        Event logger attached to the network.

    Returns
    -------
    SocialNetwork
        Network with all users and friendships added.

    Raises
    ------
    jsonschema.ValidationError
        If data does not match NETWORK_SCHEMA.
    ValueError
        If identifiers are not integers or strings (e.g. ``1.0``), or if
        integer and string identifiers are mixed.
    """
    jsonschema.validate(instance=data, schema=NETWORK_SCHEMA)

    users = data.get("users", [])
    friendships = [tuple(pair) for pair in data.get("friendships", [])]

    id_types = {type(user) for user in users}
    id_types.update(type(user) for pair in friendships for user in pair)
    # jsonschema counts 1.0 as an integer
    if not id_types <= {int, str}:
        raise ValueError("User identifiers must be integers or strings, not floats")
    if len(id_types) > 1:
        raise ValueError("User identifiers must be all integers or all strings")

    network = SocialNetwork(config=config, audit_logger=audit_logger)
    for user in users:
        network.add_user(user)
    network.add_friendships(friendships)
    return network


def load_network(
    path: str | Path,
    config: NetworkConfig | None = None,
    audit_logger: AuditLogger | None = None,
) -> SocialNetwork:
    """Load a network from a JSON file.

    Parameters
    ----------
    path : str | Path
        Path to network file.
    config : NetworkConfig | None, optional
        Network configuration.
    audit_logger : AuditLogger | None, optional
        Event logger attached to the network.

    Returns
    -------
    SocialNetwork
        Loaded network.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    NetworkFileError
        If the file is not UTF-8 JSON or does not match the format.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise NetworkFileError(
            f"Invalid JSON in {file_path.name}: {e}",
            file=str(file_path),
        ) from e

    try:
        return network_from_dict(data, config=config, audit_logger=audit_logger)
    except jsonschema.ValidationError as e:
        raise NetworkFileError(
            f"Invalid network file {file_path.name}: {e.message}",
            file=str(file_path),
        ) from e
    except ValueError as e:
        raise NetworkFileError(
            f"Invalid network file {file_path.name}: {e}",
            file=str(file_path),
        ) from e
