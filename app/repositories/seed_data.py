DEFAULT_SETTINGS = {
    "ai_enabled": "true",
    "urgent_threshold": "3",
    "screening_mode": "intelligent",
    "notification_level": "high",
}

SEED_WHITELIST = [
    {"phone_number": "+1234567890", "contact_name": "Emergency Contact", "relationship": "Family"},
    {"phone_number": "+1987654321", "contact_name": "Dr. Smith", "relationship": "Doctor"},
    {"phone_number": "+1555123456", "contact_name": "Work Assistant", "relationship": "Professional"},
]

SEED_BLOCKED = [
    {"phone_number": "+1800SPAM99", "reason": "Telemarketer", "attempts": 5},
    {"phone_number": "+1999ROBO00", "reason": "Robocall", "attempts": 3},
]

SEED_CALL_HISTORY = [
    {
        "phone_number": "+1234567890",
        "caller_name": "Emergency Contact",
        "call_type": "urgent",
        "duration": 120,
        "urgency_level": "high",
        "status": "answered",
        "ai_action": "immediate_notify",
    },
    {
        "phone_number": "+1555999888",
        "caller_name": "Unknown Caller",
        "call_type": "screening",
        "duration": 45,
        "urgency_level": "low",
        "status": "screened",
        "ai_action": "ai_handled",
    },
    {
        "phone_number": "+1800SPAM99",
        "caller_name": "Telemarketer",
        "call_type": "blocked",
        "duration": 0,
        "urgency_level": "none",
        "status": "blocked",
        "ai_action": "auto_block",
    },
]
