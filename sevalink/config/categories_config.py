"""
Request categories, slot definitions and enumerations
"""

# Every category the classifier can produce
CATEGORIES = [
    "blood_request",
    "elder_support",
    "complaint",
    "emergency",
    "general_inquiry"
]

# Categories that end in a persisted service request
REQUEST_CATEGORIES = ["blood_request", "elder_support", "complaint"]

PRIORITIES = ["urgent", "high", "medium", "low"]

# Category -> stored request type
REQUEST_TYPES = {
    "blood_request": "blood",
    "elder_support": "elder_support",
    "complaint": "complaint"
}

# Slot names a category may carry
SLOT_NAMES = {
    "blood_request": [
        "bloodType",
        "unitsNeeded",
        "hospitalName",
        "patientName",
        "relationship",
        "urgencyLevel",
        "requiredDate",
        "location"
    ],
    "elder_support": [
        "serviceType",
        "supportType",
        "elderName",
        "age",
        "frequency",
        "timeSlot",
        "location"
    ],
    "complaint": [
        "complaintCategory",
        "complaintLocation",
        "severity"
    ]
}

# Slots whose absence blocks finalization
REQUIRED_SLOTS = {
    "blood_request": ["bloodType"],
    "elder_support": ["serviceType"],
    "complaint": ["complaintCategory"]
}

# A required slot is also satisfied by any of these
EQUIVALENT_SLOTS = {
    "serviceType": ["supportType"]
}

# Order in which missing slots are asked for
FOLLOW_UP_ORDER = {
    "blood_request": ["bloodType", "unitsNeeded", "hospitalName", "relationship", "urgencyLevel"],
    "elder_support": ["serviceType", "age", "frequency"],
    "complaint": ["complaintCategory", "complaintLocation"]
}

BLOOD_TYPES = ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]

ELDER_SERVICE_TYPES = [
    "Medicine Delivery",
    "Medical Appointment",
    "Grocery Shopping",
    "Household Help",
    "Companionship",
    "Emergency Assistance",
    "Other"
]

COMPLAINT_CATEGORIES = [
    "Road Maintenance",
    "Water Supply",
    "Waste Management",
    "Electricity",
    "Public Safety",
    "Other"
]

# Slots answered by picking one value from a fixed list
ENUMERATED_SLOTS = {
    "elder_support": ("serviceType", ELDER_SERVICE_TYPES),
    "complaint": ("complaintCategory", COMPLAINT_CATEGORIES)
}
