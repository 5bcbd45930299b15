"""Domain Types — enums for every closed vocabulary the record screens offer.

Invariants:
    - All valid states encoded as Enums — no raw string matching in routes
    - Enum values are the exact strings stored in the database and sent over JSON

Design Decisions:
    - str Enums: serialize to JSON without custom encoders and compare equal to
      the stored column value
    - Y/N flags kept as YesNo instead of bool where the paper registers use Y/N
"""

from enum import Enum


class YesNo(str, Enum):
    """Paper-register style flag."""
    YES = "Y"
    NO = "N"


class ApprovalStatus(str, Enum):
    """Purchase request lifecycle — Pending is the only mutable state."""
    PENDING = "P"
    APPROVED = "A"
    REJECTED = "R"


class ApprovalDecision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"


class ItemType(str, Enum):
    """Purchase request categories."""
    FEED = "FEED"
    CALF_FEED = "CALF_FEED"
    VACCINATION = "VACCINATION"
    MEDICINE = "MEDICINE"
    SPAREPARTS = "SPAREPARTS"
    EQUIPMENT = "EQUIPMENT"


class FeedType(str, Enum):
    """Adult feed categories inspected for quality."""
    GREEN_FODDER = "Green Fodder"
    DRY_FODDER = "Dry Fodder"
    SILAGE = "Silage"
    CONCENTRATE = "Concentrate"
    MINERALS = "Minerals"


class CalfFeedType(str, Enum):
    MILK_REPLACER = "Milk Replacer"
    CALF_STARTER = "Calf Starter"
    GROWER_RATION = "Grower Ration"
    HEIFER = "Heifer"


class RecordFrequency(str, Enum):
    """How often a record category is written."""
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"


class AnimalType(str, Enum):
    COW = "cow"
    CALF = "calf"


class VaccinationStatus(str, Enum):
    """Derived from next_due_date relative to today — never stored."""
    SCHEDULED = "Scheduled"
    DUE_SOON = "Due Soon"
    OVERDUE = "Overdue"


class ExportFormat(str, Enum):
    XLSX = "xlsx"
    CSV = "csv"
