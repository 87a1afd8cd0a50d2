"""Parsers turning platform contest-list payloads into Contest objects."""

from datetime import datetime, timedelta, timezone
from typing import Any

from loguru import logger

from domain.models import Contest, ContestStatus, Platform

CODEFORCES_BASE_URL = "https://codeforces.com"

PHASE_STATUS = {
    "BEFORE": ContestStatus.UPCOMING,
    "CODING": ContestStatus.ONGOING,
    "PENDING_SYSTEM_TEST": ContestStatus.PAST,
    "SYSTEM_TEST": ContestStatus.PAST,
    "FINISHED": ContestStatus.PAST,
}


def status_from_times(start: datetime, end: datetime, now: datetime) -> ContestStatus:
    """Derive contest status from its schedule."""
    if now < start:
        return ContestStatus.UPCOMING
    if now < end:
        return ContestStatus.ONGOING
    return ContestStatus.PAST


def _parse_datetime(value: Any) -> datetime | None:
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return None


class ContestListParser:
    """Parser for contest-list JSON payloads."""

    @classmethod
    def parse_codeforces(cls, data: dict[str, Any], now: datetime | None = None) -> list[Contest]:
        """
        Parse the response of Codeforces ``contest.list``.

        Contests without a start time are dropped. Status comes from the
        contest phase and falls back to the schedule.
        """
        if data.get("status") != "OK":
            raise ValueError(f"Codeforces API returned status {data.get('status')!r}")

        now = now or datetime.now(timezone.utc)
        contests = []
        for item in data.get("result", []):
            start_seconds = item.get("startTimeSeconds")
            if start_seconds is None:
                continue

            duration = int(item.get("durationSeconds", 0))
            start = datetime.fromtimestamp(start_seconds, tz=timezone.utc)
            end = start + timedelta(seconds=duration)
            status = PHASE_STATUS.get(item.get("phase", "")) or status_from_times(start, end, now)

            contests.append(
                Contest(
                    id=f"codeforces-{item['id']}",
                    name=item.get("name", f"Contest {item['id']}"),
                    platform=Platform.CODEFORCES,
                    start_time=start,
                    end_time=end,
                    status=status,
                    url=f"{CODEFORCES_BASE_URL}/contest/{item['id']}",
                    duration=duration,
                    additional_info={
                        key: item.get(key)
                        for key in ("type", "phase", "kind", "difficulty", "season")
                        if item.get(key) is not None
                    },
                )
            )

        logger.debug(f"Parsed {len(contests)} Codeforces contests")
        return contests

    @classmethod
    def parse_records(
        cls, records: list[dict[str, Any]], platform: Platform, now: datetime | None = None
    ) -> list[Contest]:
        """
        Parse already-normalized contest records served by a proxy endpoint.

        Accepts both camelCase and snake_case field names. Records with a
        missing id, name or start time are skipped.
        """
        now = now or datetime.now(timezone.utc)
        contests = []
        for record in records:
            start = _parse_datetime(record.get("startTime", record.get("start_time")))
            end = _parse_datetime(record.get("endTime", record.get("end_time")))
            if not record.get("id") or not record.get("name") or start is None:
                logger.debug(f"Skipping incomplete {platform.value} record: {record!r}")
                continue

            duration = record.get("duration")
            if end is None:
                end = start + timedelta(seconds=int(duration or 0))

            try:
                status = ContestStatus(record.get("status"))
            except ValueError:
                status = status_from_times(start, end, now)

            contests.append(
                Contest(
                    id=str(record["id"]),
                    name=record["name"],
                    platform=platform,
                    start_time=start,
                    end_time=end,
                    status=status,
                    url=record.get("url"),
                    duration=int(duration) if duration is not None else None,
                )
            )

        logger.debug(f"Parsed {len(contests)} {platform.value} contests")
        return contests
