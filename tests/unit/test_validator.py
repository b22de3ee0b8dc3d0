"""Tests for structural condition validation."""

import pytest

from recfilter.engine import is_valid_condition, validate_conditions
from recfilter.models import (
    AmountCondition,
    AmountRangeValue,
    BooleanCondition,
    BooleanValue,
    DateCondition,
    DateRangeValue,
    MultiSelectCondition,
    MultiSelectValue,
    NumberCondition,
    NumberValue,
    SingleSelectCondition,
    SingleSelectValue,
    TextCondition,
    TextValue,
)


def _condition(field_type, value, operator="is"):
    return {"id": "c", "field": "f", "operator": operator, "fieldType": field_type, "value": value}


@pytest.mark.parametrize(
    "field_type,value,expected",
    [
        ("text", {"value": "eng"}, True),
        ("text", {"value": ""}, False),
        ("text", {"value": "   "}, False),
        ("number", {"value": 0}, True),
        ("number", {"value": -3.5}, True),
        ("number", {"value": float("nan")}, False),
        ("number", {"value": "abc"}, False),
        ("date", {"startDate": "2024-01-01", "endDate": "2024-05-01"}, True),
        ("date", {"startDate": "2024-01-01", "endDate": "2024-01-01"}, True),
        ("date", {"startDate": "2024-05-01", "endDate": "2024-01-01"}, False),
        ("date", {"startDate": "", "endDate": "2024-01-01"}, False),
        ("date", {"startDate": "2024-01-01", "endDate": "later"}, False),
        ("amount", {"minAmount": 100, "maxAmount": 100}, True),
        ("amount", {"minAmount": 200, "maxAmount": 100}, False),
        ("amount", {"minAmount": float("nan"), "maxAmount": 100}, False),
        ("singleSelect", {"value": "Engineering"}, True),
        ("singleSelect", {"value": ""}, False),
        ("multiSelect", {"values": ["React"]}, True),
        ("multiSelect", {"values": []}, False),
        ("boolean", {"value": False}, True),
        ("boolean", {"value": True}, True),
        ("boolean", {"value": "true"}, False),
        ("boolean", {"value": 1}, False),
    ],
)
def test_payload_rules(field_type, value, expected):
    assert is_valid_condition(_condition(field_type, value)) is expected


def test_validates_models():
    assert is_valid_condition(
        TextCondition(field="role", operator="contains", value=TextValue(value="eng"))
    )
    assert not is_valid_condition(
        DateCondition(
            field="joinDate",
            operator="between",
            value=DateRangeValue(start_date="2024-05-01", end_date="2024-01-01"),
        )
    )


def test_default_payloads():
    """Freshly created conditions only validate for number, amount and boolean."""
    assert not is_valid_condition(TextCondition(field="name", operator="equals"))
    assert is_valid_condition(NumberCondition(field="projects", operator="equals"))
    assert not is_valid_condition(DateCondition(field="joinDate", operator="between"))
    assert is_valid_condition(AmountCondition(field="salary", operator="between"))
    assert not is_valid_condition(SingleSelectCondition(field="department", operator="is"))
    assert not is_valid_condition(MultiSelectCondition(field="skills", operator="in"))
    assert is_valid_condition(BooleanCondition(field="isActive", operator="is"))


def test_unknown_field_type_is_invalid():
    assert not is_valid_condition(_condition("color", {"value": "red"}))


@pytest.mark.parametrize(
    "condition",
    [
        None,
        "text",
        42,
        [],
        {},
        {"fieldType": "text"},
        {"field": "name", "operator": "equals", "fieldType": "text", "value": None},
        {"field": "name", "operator": "equals", "fieldType": "text", "value": {"value": ["a"]}},
        {"field": "skills", "operator": "in", "fieldType": "multiSelect", "value": {"values": "React"}},
    ],
)
def test_malformed_conditions_never_raise(condition):
    assert is_valid_condition(condition) is False


def test_validator_does_not_check_operator():
    condition = NumberCondition(field="projects", operator="approximately", value=NumberValue(value=3))
    assert is_valid_condition(condition)


def test_validate_conditions_maps_ids():
    conditions = [
        SingleSelectCondition(id="dept", field="department", operator="is", value=SingleSelectValue(value="HR")),
        AmountCondition(
            id="salary",
            field="salary",
            operator="between",
            value=AmountRangeValue(min_amount=10, max_amount=1),
        ),
        {"field": "skills", "operator": "in", "fieldType": "multiSelect", "value": {"values": ["SQL"]}},
    ]
    assert validate_conditions(conditions) == {"dept": True, "salary": False, "2": True}


def test_boolean_model_payload():
    assert is_valid_condition(BooleanCondition(field="isActive", operator="is", value=BooleanValue(value=True)))
    assert not is_valid_condition(
        MultiSelectCondition(field="skills", operator="in", value=MultiSelectValue(values=[]))
    )


@pytest.mark.parametrize(
    "start,end",
    [
        ("2024-01-01", "9999-12-31T23:00:00-05:00"),
        ("0001-01-01T00:00:00+05:00", "2024-01-01"),
    ],
)
def test_date_outside_supported_years_is_invalid(start, end):
    condition = _condition("date", {"startDate": start, "endDate": end})
    assert is_valid_condition(condition) is False
