"""Payload and record serializers for the clinic app."""
from __future__ import annotations

MISSING_CODES = {'required', 'blank', 'null'}


def describe_errors(errors: dict) -> str:
    """Flatten ``serializer.errors`` into the single text of an InvalidPayload."""
    missing: list[str] = []
    invalid: list[str] = []
    for field, details in errors.items():
        details = details if isinstance(details, list) else [details]
        if all(getattr(d, 'code', None) in MISSING_CODES for d in details):
            missing.append(field)
        else:
            invalid.append(f"{field} ({'; '.join(str(d) for d in details)})")
    parts = []
    if missing:
        parts.append('Missing required fields: ' + ', '.join(missing))
    if invalid:
        parts.append('Invalid fields: ' + ', '.join(invalid))
    return '; '.join(parts) or 'Invalid payload'
