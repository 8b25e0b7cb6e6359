# ipma_dashboard/api/observations.py
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from ipma_dashboard.api.errors import NoCurrentObservation, UpstreamSchemaError
from ipma_dashboard.api.ipma_models import ObservationSnapshot


def parse_utc_timestamp(raw: str) -> datetime | None:
    """
    Parsii IPMA:n aikaleiman ("2024-05-01T10:00") UTC-ajaksi.

    Naivi aikaleima tulkitaan aina UTC:ksi. Rikkinäinen -> None.
    """
    try:
        ts = datetime.fromisoformat(str(raw).strip().replace("Z", "+00:00"))
    except ValueError:
        return None

    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def parse_observations(raw: Any, resource: str = "observations") -> dict[str, ObservationSnapshot]:
    """
    Muuntaa observations.json -dokumentin {aikaleima: snapshot} -hakemistoksi.

    Avaimet säilyvät alkuperäisinä merkkijonoina; aikaleimat, joita ei
    voi tulkita, ohitetaan.
    """
    if not isinstance(raw, Mapping):
        raise UpstreamSchemaError(resource, "top-level value is not a timestamp mapping")

    snapshots: dict[str, ObservationSnapshot] = {}
    for key, stations in raw.items():
        ts = parse_utc_timestamp(key)
        if ts is None:
            # rikkinäinen aikaleima -> ohitetaan
            continue
        snapshots[str(key)] = ObservationSnapshot.from_dict(ts, stations, resource)
    return snapshots


def select_current(
    snapshots: Mapping[str, ObservationSnapshot],
    now: datetime | None = None,
) -> ObservationSnapshot:
    """Finds the latest snapshot whose timestamp is at or before *now* (UTC).

    The feed's key order is not chronological, so every entry is scanned.
    A naive *now* is taken as UTC.

    Raises:
        NoCurrentObservation: if every snapshot is in the future or there
            are none at all.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    latest: ObservationSnapshot | None = None
    for snapshot in snapshots.values():
        if snapshot.timestamp > now:
            continue
        if latest is None or snapshot.timestamp > latest.timestamp:
            latest = snapshot

    if latest is None:
        raise NoCurrentObservation(now)
    return latest
