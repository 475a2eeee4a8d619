from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

import pytest

from catalog.definition import AttributeDefinition
from catalog.loader import read_seed, seed_catalog
from catalog.sources import OptionSource
from db import init_db, get_session, dispose_db
from main import create_app

SEED_PATH = Path(__file__).resolve().parents[1] / "catalog_seed.json"

COLOR_LABELS = {3: "Red", 7: "Blue"}


@pytest.fixture
def session():
    """Session on a fresh in-memory database."""
    init_db("sqlite://")
    s = get_session()
    yield s
    s.close()
    dispose_db()


@pytest.fixture
def seeded_session(session):
    """Session on an in-memory database holding catalog_seed.json."""
    seed_catalog(session, read_seed(SEED_PATH))
    session.commit()
    return session


@pytest.fixture
def client():
    """Flask test client over a seeded in-memory database."""
    app = create_app("sqlite://")
    app.config["TESTING"] = True
    s = get_session()
    try:
        seed_catalog(s, read_seed(SEED_PATH))
        s.commit()
    finally:
        s.close()
    yield app.test_client()
    dispose_db()


@pytest.fixture
def make_attribute():
    """Factory for plain attribute definitions."""
    def _make(**kwargs) -> AttributeDefinition:
        kwargs.setdefault("attribute_id", 10)
        kwargs.setdefault("attribute_code", "attr")
        return AttributeDefinition(**kwargs)
    return _make


@pytest.fixture
def option_source():
    """Option source double: 3 → Red, 7 → Blue, anything else → None."""
    source = Mock(spec=OptionSource)
    source.get_index_option_text.side_effect = lambda option_id: COLOR_LABELS.get(int(option_id))
    return source


@pytest.fixture
def attribute_store(option_source):
    """Attribute store double returning a select "color" attribute bound to option_source."""
    store = Mock()

    def _load(attribute_id, store_id):
        return AttributeDefinition(
            attribute_id=attribute_id,
            attribute_code="color",
            backend_type="int",
            frontend_input="select",
            store_id=store_id,
            source=option_source,
        )

    store.load.side_effect = _load
    return store


@pytest.fixture
def color(make_attribute):
    return make_attribute(attribute_id=3, attribute_code="color",
                          backend_type="int", frontend_input="select")
