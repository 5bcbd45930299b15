"""Identifier Generation — next employee id and next suffix-numbered animal tag.

Invariants:
    - Pure functions: callers pass the ids already in use, no IO here
    - Serial = max(existing numeric serial for the prefix) + 1, starting at 1
    - Ids whose serial part is not all digits are ignored, never fatal
    - Serials are zero-padded to the width but never truncated (NDF-20261000)

Design Decisions:
    - Employee ids are year-scoped (NDF-2026001): the serial restarts each year
    - Generation happens on the server at create time so two open forms
      cannot both be handed the same id; the unique key still backstops races
"""

from collections.abc import Iterable


def _max_serial(existing_ids: Iterable[str], prefix: str) -> int:
    highest = 0
    for existing in existing_ids:
        if not existing or not existing.startswith(prefix):
            continue
        serial = existing[len(prefix):]
        if serial.isdigit():
            highest = max(highest, int(serial))
    return highest


def next_serial_id(existing_ids: Iterable[str], prefix: str, width: int = 3) -> str:
    """Next id of the form {prefix}{serial} with serial zero-padded to width."""
    serial = _max_serial(existing_ids, prefix) + 1
    return f"{prefix}{serial:0{width}d}"


def employee_id_prefix(farm_code: str, year: int) -> str:
    return f"{farm_code}-{year}"


def next_employee_id(existing_ids: Iterable[str], year: int, farm_code: str = "NDF") -> str:
    """Next employee id for the given year, e.g. NDF-2026004."""
    return next_serial_id(existing_ids, employee_id_prefix(farm_code, year), width=3)
