# ipma_dashboard/api/errors.py
"""Virhetyypit IPMA-säähaulle."""

from __future__ import annotations

from datetime import datetime


class IpmaError(RuntimeError):
    """Base exception for all IPMA weather errors."""


class UpstreamFetchError(IpmaError):
    """Raised when an IPMA resource cannot be reached or decoded."""

    def __init__(self, resource: str, cause: BaseException | None = None) -> None:
        self.resource = resource
        self.cause = cause
        super().__init__(f"An error occurred while retrieving weather information from IPMA ({resource}).")


class UpstreamSchemaError(IpmaError):
    """Raised when an IPMA response is missing required structure."""

    def __init__(self, resource: str, detail: str) -> None:
        self.resource = resource
        self.detail = detail
        super().__init__(
            f"Necessary field(s) were missing from weather information returned by IPMA ({resource}): {detail}"
        )


class EmptyCandidateSet(IpmaError):
    """Raised when a nearest-neighbour search gets no candidates."""

    def __init__(self, kind: str = "candidate") -> None:
        self.kind = kind
        super().__init__(f"Cannot resolve nearest {kind}: no candidates available")


class NoCurrentObservation(IpmaError):
    """Raised when no observation snapshot is at or before the reference time."""

    def __init__(self, reference_time: datetime) -> None:
        self.reference_time = reference_time
        super().__init__(f"No observation available at or before {reference_time.isoformat()}")


class MissingStationDataError(IpmaError):
    """Raised when the resolved station has no record in the current snapshot."""

    def __init__(self, station_id: int | str, timestamp: datetime) -> None:
        self.station_id = station_id
        self.timestamp = timestamp
        super().__init__(f"Station {station_id} has no observation for {timestamp.isoformat()}")
