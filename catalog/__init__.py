"""
catalog - Product attribute catalog (EAV) read side.

Public API:
    AttributeDefinition                → store-scoped attribute snapshot
    SqlAttributeStore.load(id, store)  → AttributeDefinition
    AttributeCollectionFactory.create  → list[AttributeDefinition]
    OptionSource / register_source_model
    loader.seed_catalog / read_seed
"""

from catalog.definition import AttributeDefinition                    # noqa: F401
from catalog.sources import (                                         # noqa: F401
    OptionSource,
    TableOptionSource,
    BooleanOptionSource,
    BOOLEAN_SOURCE_MODEL,
    TABLE_SOURCE_MODEL,
    register_source_model,
    create_source,
)
from catalog.store import (                                           # noqa: F401
    SqlAttributeStore,
    AttributeCollectionFactory,
    AttributeNotFoundError,
)
from catalog.loader import seed_catalog, read_seed                    # noqa: F401
