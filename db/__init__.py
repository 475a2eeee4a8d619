"""
db - Database layer.

Public API:
    init_db()       → create engine + tables
    dispose_db()    → close the engine
    get_session()   → new Session
    EavAttribute, EavAttributeLabel,
    EavAttributeOption, EavAttributeOptionValue → ORM models
"""

from db.engine import init_db, get_session, dispose_db   # noqa: F401
from db.models import (                             # noqa: F401
    Base,
    EavAttribute,
    EavAttributeLabel,
    EavAttributeOption,
    EavAttributeOptionValue,
)
