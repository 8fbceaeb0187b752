"""Required-field checks for create payloads."""

from typing import Any, Iterable, Mapping

from .errors import EmptyField


def validate_payload(payload: Mapping[str, Any], required_fields: Iterable[str]) -> None:
    """Raise ``EmptyField`` for the first required field that is missing or empty.

    Fields are checked in the given order, so the error always names the
    earliest offending field.  Any falsy value (``None``, ``""``) counts
    as empty.
    """
    for field in required_fields:
        if not payload.get(field):
            raise EmptyField(f"Field {field} is required.")
