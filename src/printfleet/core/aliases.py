from __future__ import annotations

CANONICAL_FIELDS = ("name", "model", "ip", "accessCode", "serial")

# Ordered: the first non-empty alias wins during normalization.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "Name", "printer_name", "printerName", "printername"),
    "model": ("model", "Model", "printer_model", "printerModel", "printermodel"),
    "ip": ("ip", "IP", "ip_address", "ipAddress", "address", "ipaddress"),
    "accessCode": ("accessCode", "access_code", "accesscode", "AccessCode"),
    "serial": ("serial", "Serial", "serial_number", "serialNumber", "serialnumber"),
}


def _build_header_lookup() -> dict[str, str]:
    lookup: dict[str, str] = {}
    for canonical, aliases in FIELD_ALIASES.items():
        for alias in aliases:
            lowered = alias.lower()
            lookup.setdefault(lowered, canonical)
            lookup.setdefault(lowered.replace("_", "-"), canonical)
    return lookup


_HEADER_LOOKUP = _build_header_lookup()


def resolve_header(column: str) -> str:
    """Map a CSV column title to its canonical field name.

    Unknown columns are returned lower-cased so they still zip with their values.
    """
    lowered = column.strip().lower()
    return _HEADER_LOOKUP.get(lowered, lowered)
