"""ORM Models - SQLAlchemy declarative models for all administered entities.

Invariants:
    - All models inherit from Base (db/base.py) and carry AuditMixin columns
    - Every unique field in the rule tables has a matching unique constraint here

Design Decisions:
    - One file per entity; User and Role share a file with their association table
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from masterdata.models.country import Country  # noqa: F401
from masterdata.models.gender import Gender  # noqa: F401
from masterdata.models.title import Title  # noqa: F401
from masterdata.models.id_type import IdType  # noqa: F401
from masterdata.models.person import Person  # noqa: F401
from masterdata.models.user import Role, User, user_role  # noqa: F401
