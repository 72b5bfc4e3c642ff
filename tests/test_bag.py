import pytest

from argtree.bag import ParameterBag, TaggedValue
from argtree.exceptions import BagAccessError, MissingValueError, ValueTypeError


@pytest.fixture
def bag():
    return ParameterBag(
        {
            "name": TaggedValue(str, "Ryan"),
            "price": TaggedValue("double", 12400.0),
            "count": TaggedValue(int, 3),
            "receipt": TaggedValue(bool, False),
        }
    )


def test_contains(bag):
    assert bag.contains("name")
    assert "price" in bag
    assert not bag.contains("discount")
    assert "discount" not in bag


def test_get_untyped_and_typed(bag):
    assert bag.get("name") == "Ryan"
    assert bag.get("name", str) == "Ryan"
    assert bag.get("price", float) == 12400.0
    assert bag.get("price", "double") == 12400.0
    assert bag["count"] == 3


def test_get_missing_is_contract_violation(bag):
    with pytest.raises(MissingValueError):
        bag.get("discount")
    with pytest.raises(KeyError):
        bag["discount"]


def test_get_wrong_type_is_contract_violation(bag):
    with pytest.raises(ValueTypeError):
        bag.get("name", int)
    with pytest.raises(ValueTypeError):
        bag.get("price", "integer")
    with pytest.raises(TypeError):
        bag.get("count", str)


def test_switch_does_not_read_as_int(bag):
    with pytest.raises(BagAccessError):
        bag.get("receipt", int)


def test_flag_accessor(bag):
    assert bag.flag("receipt") is False
    with pytest.raises(ValueTypeError):
        bag.flag("name")


def test_read_only(bag):
    with pytest.raises(TypeError):
        bag["name"] = "other"
    with pytest.raises(TypeError):
        bag._values["name"] = TaggedValue(str, "other")


def test_mapping_helpers(bag):
    assert len(bag) == 4
    assert list(bag) == ["name", "price", "count", "receipt"]
    assert bag.type_of("price") == "double"
    assert bag.as_dict() == {
        "name": "Ryan",
        "price": 12400.0,
        "count": 3,
        "receipt": False,
    }


def test_equality():
    first = ParameterBag({"a": TaggedValue(int, 1)})
    assert first == ParameterBag({"a": TaggedValue(int, 1)})
    assert first != ParameterBag({"a": TaggedValue(str, 1)})
    assert first != ParameterBag()
    assert "ParameterBag(a=1)" == repr(first)
