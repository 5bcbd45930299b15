"""ORM Models — SQLAlchemy declarative models for every farm register.

Invariants:
    - All models inherit from Base and RecordMixin (db/base.py)
    - Registers are independent tables; only yield records reference animals

Design Decisions:
    - One file per register for locality
    - All models imported here so Base.metadata is complete for create_all and Alembic
"""

from herdbook.models.animal import Animal  # noqa: F401
from herdbook.models.employee import Employee  # noqa: F401
from herdbook.models.purchase_approval import PurchaseApproval  # noqa: F401
from herdbook.models.feed_inspection import FeedInspection  # noqa: F401
from herdbook.models.milk_rejection import MilkRejection  # noqa: F401
from herdbook.models.yield_record import YieldRecord  # noqa: F401
from herdbook.models.record_category import RecordCategory  # noqa: F401
from herdbook.models.repair_log import RepairLog  # noqa: F401
from herdbook.models.vaccination import VaccinationRecord  # noqa: F401
from herdbook.models.calf_feeding import CalfFeedingRecord, CalfFeedRegister  # noqa: F401
