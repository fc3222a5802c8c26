"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all / autogenerate
"""

from nurse_registry.models.nurse import Nurse  # noqa: F401
