from decimal import Decimal, ROUND_HALF_UP

from app.core.utils.enums import UsageTypeEnum


# Flat mock rates in USD per unit of usage
USAGE_RATE_CATALOG = {
    UsageTypeEnum.AI_CHAT.value: {
        'rate': Decimal("0.0200"),
        'unit': 'message',
        'display_name': "AI chat message",
    },
    UsageTypeEnum.VOICE_COMMAND.value: {
        'rate': Decimal("0.0100"),
        'unit': 'command',
        'display_name': "Voice command",
    },
    UsageTypeEnum.CALL_SCREENING.value: {
        'rate': Decimal("0.0500"),
        'unit': 'call',
        'display_name': "Screened call",
    },
}

COST_QUANTUM = Decimal("0.0001")


def get_rate(usage_type: str) -> Decimal:
    entry = USAGE_RATE_CATALOG.get(usage_type)
    if entry is None:
        raise ValueError(f"Unknown usage type: {usage_type}")
    return entry['rate']


def compute_cost(usage_type: str, amount: Decimal) -> Decimal:
    return (Decimal(amount) * get_rate(usage_type)).quantize(COST_QUANTUM, rounding=ROUND_HALF_UP)
