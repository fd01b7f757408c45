"""
Formatting helpers for the records UI.
"""
from typing import Optional

import pandas as pd

# (record field, table header)
RECORD_COLUMNS = [
    ("name", "Name"),
    ("fatherName", "Father/Husband Name"),
    ("address", "Address"),
    ("phoneNumber", "Phone Number"),
]
EDITABLE_FIELDS = [
    ("name", "Name"),
    ("fatherName", "Father/Husband Name"),
    ("address", "Address"),
    ("phoneNumber", "Phone Number"),
    ("email", "Email"),
]


def display_value(value) -> str:
    """Cell text for a record value, '-' when missing or blank."""
    if value is None:
        return "-"
    text = str(value).strip()
    return text or "-"


def records_to_dataframe(records: list[dict]) -> pd.DataFrame:
    """Table of the displayed columns, one row per record."""
    rows = [
        {header: display_value(record.get(field)) for field, header in RECORD_COLUMNS}
        for record in records
    ]
    return pd.DataFrame(rows, columns=[header for _, header in RECORD_COLUMNS])


def edit_form_defaults(record: dict) -> dict[str, str]:
    """Pre-filled form values for a record (empty string when missing)."""
    return {
        field: "" if record.get(field) is None else str(record.get(field))
        for field, _ in EDITABLE_FIELDS
    }


def build_update_payload(values: dict[str, Optional[str]]) -> dict[str, str]:
    """PUT body from form values; every editable field is sent, trimmed."""
    return {field: (values.get(field) or "").strip() for field, _ in EDITABLE_FIELDS}


def page_label(page: int, total_pages: int) -> str:
    return f"Page {page} of {total_pages}"


def build_access_url(address: dict, port: int) -> str:
    return f"http://{address['address']}:{port}"


def format_bytes(value: Optional[float]) -> str:
    """Human readable byte size (KB/MB/GB)."""
    try:
        if value is None:
            return "-"
        size = float(value)
        for unit in ["B", "KB", "MB", "GB"]:
            if abs(size) < 1024 or unit == "GB":
                return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
            size /= 1024
    except (TypeError, ValueError):
        return "-"


def format_uptime(seconds: Optional[float]) -> str:
    """Uptime as '3d 4h 12m' / '4h 12m' / '12m 5s'."""
    try:
        if seconds is None:
            return "-"
        total = int(seconds)
    except (TypeError, ValueError):
        return "-"
    days, rem = divmod(total, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, secs = divmod(rem, 60)
    if days:
        return f"{days}d {hours}h {minutes}m"
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m {secs}s"
