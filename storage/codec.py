"""Conversion between a Round and the blob kept in the key-value slot.

Layout: {"version": 1, "holes": [...18 holes...], "currentHole": n}
with camelCase hole keys. A blob without "version" is read as version 1;
missing or null "holes" and "currentHole" fall back to a fresh round's values.
"""

import json

from pydantic import ValidationError

from models import Round
from storage.exceptions import InvalidBlobError

SCHEMA_VERSION = 1


def round_to_blob(round_: Round) -> str:
    """Round -> JSON string for the key-value slot."""
    payload = {"version": SCHEMA_VERSION}
    payload.update(round_.model_dump(mode="json", by_alias=True))
    return json.dumps(payload)


def round_from_blob(blob: str) -> Round:
    """JSON string from the key-value slot -> Round. Raises InvalidBlobError."""
    try:
        payload = json.loads(blob)
    except (TypeError, ValueError) as exc:
        raise InvalidBlobError(f"Stored round is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise InvalidBlobError("Stored round is not a JSON object")

    version = payload.pop("version", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise InvalidBlobError(f"Unsupported round schema version {version!r}")

    # Absent or null sections take a fresh round's values
    payload = {k: v for k, v in payload.items() if v is not None}
    try:
        return Round.model_validate(payload)
    except ValidationError as exc:
        raise InvalidBlobError(
            f"Stored round has the wrong shape: {exc.errors()[0]['msg']}"
        ) from exc
