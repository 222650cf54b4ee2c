"""Display formatting for metric values."""

from __future__ import annotations

from unitdeck.constants.limits import MAX_SAFE_BYTES
from unitdeck.constants.values import MEASURING_LABEL, NOT_AVAILABLE_LABEL, PLACEHOLDER
from unitdeck.models.core.service_info import CPU_MEASURING

_BYTE_UNITS: tuple[str, ...] = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_DURATION_UNITS: tuple[tuple[str, int], ...] = (
    ("d", 86_400),
    ("h", 3_600),
    ("m", 60),
    ("s", 1),
)


def format_bytes(value: float | None, decimals: int = 2) -> str:
    """Format a byte count with 1024-based units.

    Values beyond 2**53 are systemd's "unset" marker and render as N/A.
    """
    if value is None:
        return PLACEHOLDER
    if value == 0:
        return "0 Bytes"
    if value > MAX_SAFE_BYTES or value < 0:
        return NOT_AVAILABLE_LABEL

    index = 0
    scaled = float(value)
    while scaled >= 1024 and index < len(_BYTE_UNITS) - 1:
        scaled /= 1024
        index += 1

    text = f"{scaled:.{max(decimals, 0)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {_BYTE_UNITS[index]}"


def format_cpu(value: float | None) -> str:
    """Format a CPU percentage, with the measuring sentinel spelled out."""
    if value is None:
        return PLACEHOLDER
    if value == CPU_MEASURING:
        return MEASURING_LABEL
    return f"{value:.1f}%"


def format_duration(seconds: float | None) -> str:
    """Format seconds as its two most significant units ("3d 4h", "5m 2s")."""
    if seconds is None:
        return PLACEHOLDER
    remaining = int(seconds)
    if remaining <= 0:
        return "0s"

    parts: list[str] = []
    for suffix, size in _DURATION_UNITS:
        amount, remaining = divmod(remaining, size)
        if amount:
            parts.append(f"{amount}{suffix}")
        if len(parts) == 2:
            break
    return " ".join(parts)
