from datetime import datetime

import pytest

from sevalink.engine import (
    RequestClassifier,
    PriorityResolver,
    CompletenessChecker,
    TitleBuilder,
    RequestAssembler,
    GeneralResponder,
)
from sevalink.errors import ValidationError
from sevalink.models import BloodRequestEntity, ComplaintEntity, ElderSupportEntity
from sevalink.prompts import PromptTemplates
from sevalink.validators import RequestValidator

USER = {"id": "user-1", "name": "Ravi Kumar", "phone": "+919876543210", "email": "ravi@example.com"}


@pytest.mark.parametrize("text, expected", [
    ("I need O positive blood urgently", "blood_request"),
    ("Blood needed urgently for emergency surgery", "blood_request"),
    ("AB negative", "blood_request"),
    ("मुझे ओ पॉजिटिव खून चाहिए", "blood_request"),
    ("There is an emergency, send an ambulance", "emergency"),
    ("My grandmother needs medicines", "elder_support"),
    ("Street lights not working near MG Road", "complaint"),
    ("Garbage not collected in our colony", "complaint"),
    ("What is mitochondria?", "general_inquiry"),
    ("", "general_inquiry"),
])
def test_categorize(text, expected):
    assert RequestClassifier().categorize(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("need blood urgently", "urgent"),
    ("critical patient", "urgent"),
    ("please do it soon", "high"),
    ("it is not urgent", "low"),
    ("whenever you can", "low"),
    ("hello there", "medium"),
    ("", "medium"),
])
def test_priority(text, expected):
    assert PriorityResolver().determine(text) == expected


def test_missing_required_info():
    checker = CompletenessChecker()
    assert checker.get_missing_required_info("blood_request", {}) == ["bloodType"]
    assert checker.get_missing_required_info("blood_request", {"bloodType": "O+"}) == []
    assert checker.get_missing_required_info("complaint", {"complaintLocation": "MG Road"}) == ["complaintCategory"]
    assert checker.get_missing_required_info("general_inquiry", {}) == []


def test_support_type_satisfies_service_type():
    checker = CompletenessChecker()
    assert checker.get_missing_required_info("elder_support", {"supportType": ["medical"]}) == []
    assert checker.get_missing_required_info("elder_support", {"supportType": []}) == ["serviceType"]


def test_missing_slots_follow_ask_order():
    checker = CompletenessChecker()
    assert checker.order_missing("blood_request", ["urgencyLevel", "custom", "bloodType"]) == [
        "bloodType", "urgencyLevel", "custom"
    ]
    assert checker.next_slot("blood_request", ["hospitalName", "unitsNeeded"]) == "unitsNeeded"
    assert checker.next_slot("blood_request", []) is None


def test_titles():
    builder = TitleBuilder()
    assert builder.build("I need O+ blood", "blood", blood_type="O+", location="Vijayawada") == (
        "Need O+ blood - Vijayawada", "Request for O+ blood in Vijayawada."
    )
    assert builder.build("get vegetables and milk", "elder_support")[0] == "Grocery help needed"
    assert builder.build("Street lights not working near MG Road", "complaint",
                         complaint_category="Electricity", location="MG Road")[0] == (
        "Street lights not working - MG Road"
    )
    assert builder.build("Something happened", "complaint", complaint_category="Public Safety")[0] == (
        "Public safety issue"
    )


def test_fallback_title_is_sentence_cased_summary():
    title, description = TitleBuilder().build("x" * 100, "other")
    assert title == "X" + "x" * 79 + "..."
    assert description == title


def test_map_priority():
    assert RequestAssembler.map_priority("urgent") == "urgent"
    assert RequestAssembler.map_priority("high") == "high"
    assert RequestAssembler.map_priority("low") == "medium"
    assert RequestAssembler.map_priority("medium") == "medium"


def test_blood_urgency_precedence():
    assert RequestAssembler.resolve_blood_urgency("need blood urgently", {"urgencyLevel": "low"}) == "urgent"
    assert RequestAssembler.resolve_blood_urgency("need blood", {"urgencyLevel": "LOW"}) == "low"
    assert RequestAssembler.resolve_blood_urgency("need blood", {"urgencyLevel": "someday"}) == "high"
    assert RequestAssembler.resolve_blood_urgency("need blood", {}) == "high"


def test_parse_date():
    now = datetime(2026, 1, 1)
    assert RequestAssembler.parse_date("2026-10-20", now) == datetime(2026, 10, 20)
    assert RequestAssembler.parse_date("someday soon", now) == now
    assert RequestAssembler.parse_date(None, now) == now


def test_assemble_blood_request():
    entity = RequestAssembler().assemble(
        "blood_request",
        {"bloodType": "O+", "urgencyLevel": "urgent"},
        "I need O positive blood urgently",
        USER,
        "urgent",
        input_method="voice",
    )
    assert isinstance(entity, BloodRequestEntity)
    assert entity.type == "blood"
    assert entity.blood_type == "O+"
    assert entity.priority == "urgent"
    assert entity.urgency_level == "urgent"
    assert entity.units_needed == 1
    assert entity.hospital_name == "To be specified"
    assert entity.patient_name == "Ravi Kumar"
    assert entity.relationship == "Self"
    assert entity.source == "voice_chat"
    assert entity.location.address == "Potti Sriramulu College Road, Vinchipeta"
    assert entity.title == "Need O+ blood"


def test_assemble_blood_request_stores_english_text():
    entity = RequestAssembler().assemble(
        "blood_request", {"bloodType": "O+"}, "मुझे ओ पॉजिटिव खून चाहिए", USER, "medium"
    )
    assert entity.medical_condition == "मुझे O positive blood need"
    assert entity.urgency_level == "high"
    assert entity.priority == "high"


def test_assemble_complaint():
    entity = RequestAssembler().assemble(
        "complaint",
        {"complaintCategory": "Electricity", "complaintLocation": "MG Road"},
        "Street lights not working near MG Road",
        USER,
        "medium",
    )
    assert isinstance(entity, ComplaintEntity)
    assert entity.title == "Street lights not working - MG Road"
    assert entity.complaint_location == "MG Road"
    assert entity.location.address == "MG Road"
    assert entity.severity == "medium"
    assert entity.source == "text_chat"


def test_assemble_urgent_complaint_is_high_severity():
    entity = RequestAssembler().assemble(
        "complaint", {"complaintCategory": "Road Maintenance"}, "Road caved in, urgent", USER, "urgent"
    )
    assert entity.severity == "high"
    assert entity.priority == "urgent"


def test_assemble_elder_support_defaults():
    entity = RequestAssembler().assemble(
        "elder_support", {"serviceType": "Medicine Delivery", "age": 78}, "medicine for my grandmother", USER, "low"
    )
    assert isinstance(entity, ElderSupportEntity)
    assert entity.age == "78"
    assert entity.support_type == ["other"]
    assert entity.frequency == "one-time"
    assert entity.priority == "medium"
    assert entity.title == "Medicine delivery needed"


def test_entity_document_uses_camel_case():
    entity = RequestAssembler().assemble("blood_request", {"bloodType": "A-"}, "A- blood", USER, "high")
    document = entity.to_document()
    assert document["bloodType"] == "A-"
    assert document["unitsNeeded"] == 1
    assert "blood_type" not in document


def test_validator():
    validator = RequestValidator()
    validator.validate("blood_request", {"bloodType": "O+", "unitsNeeded": "2"})
    validator.validate("complaint", {})

    with pytest.raises(ValidationError) as missing:
        validator.validate("blood_request", {})
    assert missing.value.field == "bloodType"

    with pytest.raises(ValidationError):
        validator.validate("blood_request", {"bloodType": "Z+"})

    with pytest.raises(ValidationError) as units:
        validator.validate("blood_request", {"bloodType": "O+", "unitsNeeded": 0})
    assert units.value.field == "unitsNeeded"

    with pytest.raises(ValidationError):
        validator.validate("blood_request", {"bloodType": "O+", "unitsNeeded": "two"})

    with pytest.raises(ValidationError):
        validator.validate("emergency", {})


@pytest.mark.parametrize("message, category, expected", [
    ("hello", "general_inquiry", "get_greeting"),
    ("how are you doing today my friend", "general_inquiry", "get_how_are_you"),
    ("thanks a lot", "general_inquiry", "get_thanks_reply"),
    ("what can you do", "general_inquiry", "get_capabilities"),
    ("tell me about SevaLink please", "general_inquiry", "get_about"),
    ("what is the capital of France", "general_inquiry", "get_out_of_scope"),
    ("ok", "general_inquiry", "get_default_reply"),
])
def test_general_responder(message, category, expected):
    templates = PromptTemplates()
    assert GeneralResponder(templates).respond(message, category) == getattr(templates, expected)()


def test_general_responder_knowledge_and_emergency():
    templates = PromptTemplates()
    responder = GeneralResponder(templates)
    assert "Mitochondria" in responder.respond("what is mitochondria")
    assert responder.respond("fire!", "emergency", "hi") == templates.get_emergency_advice("hi")
