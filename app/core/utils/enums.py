from enum import Enum


class UrgencyLevelEnum(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class ScreeningVerdictEnum(Enum):
    TRUSTED = "trusted"
    BLOCKED = "blocked"
    UNKNOWN = "unknown"


class UsageTypeEnum(Enum):
    AI_CHAT = "ai_chat"
    VOICE_COMMAND = "voice_command"
    CALL_SCREENING = "call_screening"


class StorageBackendEnum(Enum):
    DEMO = "demo"
    DATABASE = "database"
