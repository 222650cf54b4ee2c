"""Log payload parsing.

Service log events carry ``"<timestamp>: <message>"``; container log events
carry ``"<timestamp> <message>"``. Payloads without a delimiter after a
non-empty prefix keep their full text as the message and are stamped with
the local receipt time.
"""

from __future__ import annotations

from datetime import datetime, timezone

from unitdeck.constants.values import (
    CONTAINER_LOG_DELIMITER,
    DOWNLOAD_LINE_SEPARATOR,
    SERVICE_LOG_DELIMITER,
)
from unitdeck.models.logs.log_record import LogRecord


def receipt_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp used for payloads that carry none."""
    moment = now or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def parse_log_payload(
    payload: str, delimiter: str, *, received_at: datetime | None = None
) -> LogRecord:
    """Split ``payload`` at the first ``delimiter``."""
    index = payload.find(delimiter)
    if index > 0:
        return LogRecord(
            timestamp=payload[:index],
            message=payload[index + len(delimiter):],
        )
    return LogRecord(timestamp=receipt_timestamp(received_at), message=payload)


def parse_service_log(payload: str, *, received_at: datetime | None = None) -> LogRecord:
    return parse_log_payload(payload, SERVICE_LOG_DELIMITER, received_at=received_at)


def parse_container_log(payload: str, *, received_at: datetime | None = None) -> LogRecord:
    return parse_log_payload(payload, CONTAINER_LOG_DELIMITER, received_at=received_at)


def serialize_records(records: list[LogRecord]) -> str:
    """Render records as downloaded log text."""
    return "\n".join(record.to_line() for record in records)


def parse_serialized(text: str) -> list[LogRecord]:
    """Read downloaded log text back into records."""
    if not text:
        return []
    return [
        parse_log_payload(line, DOWNLOAD_LINE_SEPARATOR) for line in text.split("\n")
    ]


__all__ = [
    "parse_container_log",
    "parse_log_payload",
    "parse_serialized",
    "parse_service_log",
    "receipt_timestamp",
    "serialize_records",
]
