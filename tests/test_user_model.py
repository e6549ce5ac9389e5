import pytest
from pydantic import ValidationError

from bookkeeping_client.models.user import INT64_MAX, INT64_MIN, USER_WIRE_KEYS, User


def test_user_validates_from_wire_keys():
    user = User.model_validate({"externalId": 4821, "id": 17, "name": "Jane Doe"})

    assert user.external_id == 4821
    assert user.id == 17
    assert user.name == "Jane Doe"


def test_user_accepts_python_attribute_names():
    user = User(external_id=1, id=2, name="x")

    assert user == User.model_validate({"externalId": 1, "id": 2, "name": "x"})


def test_user_dump_by_alias_emits_all_keys_even_when_zero_valued():
    user = User(external_id=0, id=0, name="")

    assert user.model_dump(by_alias=True) == {"externalId": 0, "id": 0, "name": ""}


def test_wire_keys():
    assert USER_WIRE_KEYS == {"externalId", "id", "name"}


@pytest.mark.parametrize("missing", ["externalId", "id", "name"])
def test_user_requires_every_wire_key(missing):
    data = {"externalId": 1, "id": 2, "name": "x"}
    del data[missing]

    with pytest.raises(ValidationError) as exc:
        User.model_validate(data)

    assert missing in str(exc.value)


def test_user_accepts_int64_extremes():
    user = User(external_id=INT64_MIN, id=INT64_MAX, name="edge")

    assert user.external_id == -(2**63)
    assert user.id == 2**63 - 1


@pytest.mark.parametrize("value", [2**63, -(2**63) - 1])
def test_user_rejects_out_of_range_integers(value):
    with pytest.raises(ValidationError):
        User(external_id=value, id=1, name="x")


@pytest.mark.parametrize("value", ["17", 17.0, True])
def test_user_rejects_non_integer_ids(value):
    with pytest.raises(ValidationError):
        User.model_validate({"externalId": 1, "id": value, "name": "x"})


def test_user_rejects_non_string_name():
    with pytest.raises(ValidationError):
        User.model_validate({"externalId": 1, "id": 2, "name": 3})


def test_user_ignores_unknown_keys():
    user = User.model_validate({"externalId": 1, "id": 2, "name": "x", "email": "a@b.c"})

    assert user.model_dump(by_alias=True) == {"externalId": 1, "id": 2, "name": "x"}


def test_user_is_immutable_and_hashable():
    user = User(external_id=1, id=2, name="x")

    with pytest.raises(ValidationError):
        user.name = "y"

    assert len({user, User(external_id=1, id=2, name="x")}) == 1
