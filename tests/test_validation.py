import pytest

from pet_adoption_api.app.core.errors import EmptyField
from pet_adoption_api.app.core.validation import validate_payload


def test_complete_payload_passes():
    validate_payload({"name": "Rex", "age": "3"}, ["name", "age"])


@pytest.mark.parametrize("payload", [{"age": "3"}, {"name": "", "age": "3"}, {"name": None, "age": "3"}])
def test_missing_or_empty_field_is_reported(payload):
    with pytest.raises(EmptyField) as excinfo:
        validate_payload(payload, ["name", "age"])
    assert excinfo.value.to_dict() == {"EmptyField": "Field name is required."}


def test_first_offending_field_wins():
    with pytest.raises(EmptyField, match="Field age is required."):
        validate_payload({"name": "Rex"}, ["age", "breed"])


def test_fields_not_listed_are_ignored():
    validate_payload({"name": "Rex", "notes": ""}, ["name"])
