import pytest
from pydantic import ValidationError as PydanticValidationError

from sevalink.models import (
    ClassificationResult,
    IncomingMessage,
    category_for_slots,
    enumerated_answer,
    filter_slots,
    merge_slot_maps,
)
from sevalink.utils import Formatters, Helpers, RateLimiter


def test_merge_slot_maps_ignores_empty_values_and_copies():
    prior = {"bloodType": "O+", "hospitalName": "City Hospital"}
    merged = merge_slot_maps(prior, {"bloodType": "AB-", "unitsNeeded": None, "patientName": ""})
    assert merged == {"bloodType": "AB-", "hospitalName": "City Hospital"}
    assert prior["bloodType"] == "O+"


def test_filter_slots():
    assert filter_slots("complaint", {"complaintCategory": "Electricity", "bloodType": "O+"}) == {
        "complaintCategory": "Electricity"
    }
    assert filter_slots("general_inquiry", {"bloodType": "O+"}) == {}


@pytest.mark.parametrize("slots, expected", [
    ({"complaintLocation": "MG Road"}, "complaint"),
    ({"hospitalName": "City Hospital", "location": "Guntur"}, "blood_request"),
    ({"serviceType": "Companionship"}, "elder_support"),
    ({"location": "Guntur"}, None),
    ({}, None),
    (None, None),
])
def test_category_for_slots(slots, expected):
    assert category_for_slots(slots) == expected


def test_classification_result_rejects_unknown_values():
    with pytest.raises(PydanticValidationError):
        ClassificationResult(category="shopping")
    with pytest.raises(PydanticValidationError):
        ClassificationResult(priority="whenever")
    assert ClassificationResult().needs_request() is False
    assert ClassificationResult(category="complaint").needs_request() is True


def test_incoming_message():
    message = IncomingMessage(
        text="  AB negative  ",
        input_method="voice",
        conversation_context={"hospitalName": "City Hospital", "patientName": None},
    )
    assert message.clean_text == "AB negative"
    assert message.is_voice is True
    assert message.conversation_context == {"hospitalName": "City Hospital"}

    with pytest.raises(PydanticValidationError):
        IncomingMessage(text="hi", input_method="sms")
    with pytest.raises(PydanticValidationError):
        IncomingMessage(text="hi", confidence=1.5)


def test_format_for_voice():
    text = "✅ **Blood Request Created!**\n\n• Blood Type: O+\n• Units: 1"
    assert Formatters.format_for_voice(text) == "Blood Request Created!. Blood Type: O+. Units: 1"


def test_format_names():
    assert Formatters.format_slot_name("bloodType") == "blood type"
    assert Formatters.format_slot_name("complaintCategory") == "complaint category"


def test_helpers():
    assert Helpers.summarize("  short   text ") == "short text"
    assert Helpers.summarize("abcdef", limit=3) == "abc..."
    assert Helpers.strip_trailing_punctuation("MG Road, ") == "MG Road"
    assert Helpers.is_empty_value([]) is True
    assert Helpers.is_empty_value(0) is False


def test_rate_limiter():
    limiter = RateLimiter(max_requests=2, window_seconds=60)
    assert limiter.check_rate_limit("user-1") is True
    assert limiter.check_rate_limit("user-1") is True
    assert limiter.check_rate_limit("user-1") is False
    assert limiter.check_rate_limit("user-2") is True

    assert 0 < limiter.get_reset_time("user-1") <= 60


@pytest.mark.parametrize("category, text, expected", [
    ("complaint", "Public Safety", ("complaintCategory", "Public Safety")),
    ("elder_support", "  household   help. ", ("serviceType", "Household Help")),
    ("elder_support", "I need household help for my dad", None),
    ("blood_request", "O+", None),
    (None, "Public Safety", None),
])
def test_enumerated_answer(category, text, expected):
    assert enumerated_answer(category, text) == expected
