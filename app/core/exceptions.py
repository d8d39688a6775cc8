from decimal import Decimal


class UsageLimitExceeded(Exception):
    """The caller's mock monthly credit is used up."""

    def __init__(self, limit: Decimal, used: Decimal):
        self.limit = limit
        self.used = used
        super().__init__(f"Monthly credit limit of {limit} reached (used {used})")
