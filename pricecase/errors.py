# pricecase/errors.py
# -----------------------------------------------------------------------------
# Domain errors raised by services/crud and mapped to HTTP codes in routers
# -----------------------------------------------------------------------------


class PricecaseError(Exception):
    """Base class for errors the HTTP layer knows how to report."""


class SnapshotNotFound(PricecaseError):
    def __init__(self, snapshot_id: str):
        super().__init__(f"shared snapshot {snapshot_id!r} not found or expired")
        self.snapshot_id = snapshot_id


class ScenarioLimitReached(PricecaseError):
    def __init__(self, limit: int):
        super().__init__(f"at most {limit} scenario copies may coexist")
        self.limit = limit


class UnknownPreset(PricecaseError):
    def __init__(self, name: str):
        super().__init__(f"unknown pricing preset {name!r}")
        self.name = name
