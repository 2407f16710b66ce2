from datetime import datetime, timedelta

import pytest

from sevalink.extractors import (
    BloodTypeExtractor,
    BloodRequestExtractor,
    ElderSupportExtractor,
    ComplaintExtractor,
    LocationExtractor,
    RequestInfoExtractor,
)


@pytest.fixture
def blood_types():
    return BloodTypeExtractor()


@pytest.mark.parametrize("message, expected", [
    ("I need O+ blood", "O+"),
    ("ab- required", "AB-"),
    ("B+ve donor please", "B+"),
    ("A negative", "A-"),
    ("patient is o-negative", "O-"),
    ("AB negative", "AB-"),
    ("looking for O pos", "O+"),
    ("need B positive for surgery", "B+"),
    ("मुझे ओ पॉजिटिव खून चाहिए", "O+"),
    ("एबी नेगेटिव खून", "AB-"),
    ("బి పాజిటివ్ రక్తం కావాలి", "B+"),
    ("ఎబి నెగటివ్", "AB-"),
])
def test_blood_type_forms(blood_types, message, expected):
    assert blood_types.extract_blood_type(message) == expected


@pytest.mark.parametrize("message", [
    "I need blood",
    "",
    "   ",
    "I am so positive about this",
    "Road near Benz Circle",
    "Plan B - need blood donors at the camp",
    "Give me a +ve response, I need blood",
    "Grade A + bonus marks",
    "need a - sign here",
])
def test_blood_type_is_never_guessed(blood_types, message):
    assert blood_types.extract_blood_type(message) is None


def test_blood_request_slots():
    slots = BloodRequestExtractor().extract(
        "Need 2 units of B+ blood for my father at City Hospital, patient name is Suresh Rao"
    )
    assert slots["bloodType"] == "B+"
    assert slots["unitsNeeded"] == 2
    assert slots["hospitalName"] == "City Hospital"
    assert slots["patientName"] == "Suresh Rao"
    assert slots["relationship"] == "Father"
    assert "location" not in slots


def test_blood_request_urgent_wording_sets_date_now():
    slots = BloodRequestExtractor().extract("I need O positive blood urgently")
    assert slots["urgencyLevel"] == "urgent"
    assert abs(datetime.fromisoformat(slots["requiredDate"]) - datetime.utcnow()) < timedelta(minutes=1)


def test_blood_request_tomorrow():
    slots = BloodRequestExtractor().extract("need A+ blood tomorrow")
    required = datetime.fromisoformat(slots["requiredDate"])
    assert required.date() == (datetime.utcnow() + timedelta(days=1)).date()
    assert "urgencyLevel" not in slots


def test_blood_request_not_urgent_is_low():
    slots = BloodRequestExtractor().extract("need A+ blood, not urgent")
    assert slots["urgencyLevel"] == "low"
    assert "requiredDate" not in slots


def test_blood_request_location_is_not_the_hospital():
    slots = BloodRequestExtractor().extract("Need O- blood at Apollo Hospital in Vijayawada")
    assert slots["hospitalName"] == "Apollo Hospital"
    assert slots["location"] == "Vijayawada"


def test_elder_support_slots():
    slots = ElderSupportExtractor().extract(
        "My grandmother needs medicine delivery daily in the morning, she is 78 years old, near Benz Circle"
    )
    assert slots["serviceType"] == "Medicine Delivery"
    assert slots["supportType"] == ["medical"]
    assert slots["frequency"] == "daily"
    assert slots["timeSlot"] == "morning"
    assert slots["age"] == "78"
    assert slots["location"] == "Benz Circle"
    assert "elderName" not in slots


def test_elder_name():
    slots = ElderSupportExtractor().extract("Grocery shopping for my mother Lakshmi every week")
    assert slots["elderName"] == "Lakshmi"
    assert slots["serviceType"] == "Grocery Shopping"
    assert slots["frequency"] == "weekly"


def test_complaint_place_name_does_not_decide_category():
    slots = ComplaintExtractor().extract("Street lights not working near MG Road")
    assert slots["complaintCategory"] == "Electricity"
    assert slots["complaintLocation"] == "MG Road"


@pytest.mark.parametrize("message, category, severity", [
    ("Huge potholes on the road near Ring Road, very dangerous", "Road Maintenance", "high"),
    ("Water leaking from the pipeline at Gandhi Nagar", "Water Supply", None),
    ("Garbage not collected for a week", "Waste Management", None),
    ("Minor theft reported in our lane", "Public Safety", "low"),
])
def test_complaint_categories(message, category, severity):
    slots = ComplaintExtractor().extract(message)
    assert slots["complaintCategory"] == category
    assert slots.get("severity") == severity


def test_complaint_without_category_leaves_it_missing():
    slots = ComplaintExtractor().extract("I want to report a problem near Benz Circle")
    assert slots == {"complaintLocation": "Benz Circle"}


def test_location_skips_excluded_and_stop_words():
    extractor = LocationExtractor()
    assert extractor.extract_location("I live in Guntur") == "Guntur"
    assert extractor.extract_location("at City Hospital near Labbipet", exclude=["City Hospital"]) == "Labbipet"
    assert extractor.extract_location("nothing to see here") is None


def test_request_info_merges_with_prior_slots():
    extractor = RequestInfoExtractor()
    prior = {"hospitalName": "City Hospital", "relationship": "Mother"}
    merged = extractor.extract_request_info("AB negative", "blood_request", prior)
    assert merged == {"hospitalName": "City Hospital", "relationship": "Mother", "bloodType": "AB-"}
    assert prior == {"hospitalName": "City Hospital", "relationship": "Mother"}


def test_request_info_unknown_category():
    assert RequestInfoExtractor().extract_request_info("hello", "general_inquiry", {"a": 1}) == {"a": 1}
