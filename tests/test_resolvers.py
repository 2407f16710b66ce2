import pytest

from conftest import FakeAugmentation
from sevalink.engine import (
    ClassificationResolver,
    ExtractionResolver,
    FollowUpResolver,
    ConfirmationResolver,
)


@pytest.mark.asyncio
async def test_classification_without_ai_uses_heuristic():
    resolution = await ClassificationResolver().resolve(text="I need O+ blood urgently", context={})
    assert resolution.using_fallback is True
    assert resolution.source == "heuristic"
    assert resolution.value.category == "blood_request"
    assert resolution.value.priority == "urgent"


@pytest.mark.asyncio
async def test_ai_category_wins_over_heuristic():
    ai = FakeAugmentation({"classify": {"category": "elder_support", "priority": "low", "response": None}})
    resolution = await ClassificationResolver(ai).resolve(text="I need O+ blood", context={})
    assert resolution.using_fallback is False
    assert resolution.value.category == "elder_support"
    assert resolution.value.priority == "low"


@pytest.mark.asyncio
async def test_ai_general_inquiry_defers_to_heuristic_category():
    ai = FakeAugmentation({"classify": {"category": "general_inquiry", "priority": None, "response": "Hi"}})
    resolution = await ClassificationResolver(ai).resolve(text="Garbage near my house, please fix soon", context={})
    assert resolution.value.category == "complaint"
    assert resolution.value.priority == "high"
    assert resolution.value.response == "Hi"
    assert resolution.using_fallback is False


@pytest.mark.asyncio
async def test_ai_failure_falls_back():
    ai = FakeAugmentation(fail=True)
    resolution = await ClassificationResolver(ai).resolve(text="hello", context={})
    assert resolution.using_fallback is True
    assert resolution.value.category == "general_inquiry"
    assert ai.calls == ["classify"]


@pytest.mark.asyncio
async def test_ai_timeout_falls_back():
    ai = FakeAugmentation({"classify": {"category": "complaint"}}, delay=1.0)
    resolution = await ClassificationResolver(ai, timeout=0.05).resolve(text="AB negative", context={})
    assert resolution.using_fallback is True
    assert resolution.value.category == "blood_request"


@pytest.mark.asyncio
async def test_unexpected_ai_error_falls_back():
    class _Broken(FakeAugmentation):
        async def classify(self, text, context=None):
            raise RuntimeError("boom")

    resolution = await ClassificationResolver(_Broken()).resolve(text="hello", context={})
    assert resolution.using_fallback is True


@pytest.mark.asyncio
async def test_accepted_ai_extraction_merges_context_and_filters_missing():
    ai = FakeAugmentation({"extract": {
        "success": True,
        "usingFallback": False,
        "extractedInfo": {"bloodType": "B+", "unitsNeeded": 2},
        "missingRequired": ["hospitalName", "somethingElse"],
        "needsMoreInfo": True,
    }})
    resolution = await ExtractionResolver(ai).resolve(
        text="B+ 2 units", category="blood_request", language="en", context={"relationship": "Mother"}
    )
    result = resolution.value
    assert resolution.using_fallback is False
    assert result.slots == {"relationship": "Mother", "bloodType": "B+", "unitsNeeded": 2}
    assert result.missing == ["hospitalName"]
    assert result.needs_more_info is True


@pytest.mark.asyncio
async def test_ai_needs_more_info_without_missing_slots_is_complete():
    ai = FakeAugmentation({"extract": {
        "success": True,
        "usingFallback": False,
        "extractedInfo": {"bloodType": "B+"},
        "missingRequired": ["notASlot"],
        "needsMoreInfo": True,
    }})
    result = (await ExtractionResolver(ai).resolve(
        text="B+", category="blood_request", language="en", context={}
    )).value
    assert result.missing == []
    assert result.needs_more_info is False


@pytest.mark.asyncio
async def test_rejected_ai_extraction_uses_heuristic_in_full():
    ai = FakeAugmentation({"extract": {
        "success": False,
        "usingFallback": True,
        "extractedInfo": {"bloodType": "AB-"},
        "missingRequired": [],
        "needsMoreInfo": False,
    }})
    resolution = await ExtractionResolver(ai).resolve(
        text="I need A+ blood", category="blood_request", language="en", context={}
    )
    assert resolution.using_fallback is True
    assert resolution.value.slots["bloodType"] == "A+"
    assert resolution.value.missing == []


@pytest.mark.asyncio
async def test_heuristic_extraction_reports_missing():
    result = (await ExtractionResolver().resolve(
        text="I need blood", category="blood_request", language="en", context={}
    )).value
    assert result.slots == {}
    assert result.missing == ["bloodType"]
    assert result.needs_more_info is True
    assert result.using_fallback is True


@pytest.mark.asyncio
async def test_follow_up_question_in_user_language():
    resolution = await FollowUpResolver().resolve(
        category="blood_request", missing_field="bloodType", slots={}, language="hi"
    )
    assert resolution.using_fallback is True
    assert resolution.value.startswith("मैं समझता हूं")


@pytest.mark.asyncio
async def test_follow_up_from_ai():
    ai = FakeAugmentation({"follow_up": {"question": "Which blood group?", "success": True, "usingFallback": False}})
    resolution = await FollowUpResolver(ai).resolve(
        category="blood_request", missing_field="bloodType", slots={}, language="en"
    )
    assert resolution.value == "Which blood group?"
    assert resolution.using_fallback is False


@pytest.mark.asyncio
async def test_blank_ai_question_is_rejected():
    ai = FakeAugmentation({"follow_up": {"question": "  ", "success": True, "usingFallback": False}})
    resolution = await FollowUpResolver(ai).resolve(
        category="complaint", missing_field="complaintCategory", slots={}, language="en"
    )
    assert resolution.using_fallback is True
    assert resolution.value.startswith("What type of issue")


@pytest.mark.asyncio
async def test_confirmation_fallback_mentions_request():
    resolution = await ConfirmationResolver().resolve(
        category="blood_request", slots={"bloodType": "O+"}, request_id="req-9", language="en"
    )
    assert resolution.using_fallback is True
    assert "O+" in resolution.value
    assert "req-9" in resolution.value
