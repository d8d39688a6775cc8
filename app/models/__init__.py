from .base import Base
from .whitelist_contact import WhitelistContact
from .blocked_number import BlockedNumber
from .call_history import CallHistoryEntry
from .app_setting import AppSetting
from .usage_record import UsageRecord
from .voice_command import VoiceCommandLog

__all__ = ["Base", "WhitelistContact", "BlockedNumber", "CallHistoryEntry", "AppSetting", "UsageRecord", "VoiceCommandLog"]
