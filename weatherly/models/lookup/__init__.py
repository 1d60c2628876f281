from weatherly.models.lookup.lookup_state import (
    Failure,
    Idle,
    Loading,
    LookupSnapshot,
    LookupState,
    Success,
)

__all__ = ["Failure", "Idle", "Loading", "LookupSnapshot", "LookupState", "Success"]
