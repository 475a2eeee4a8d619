#!/usr/bin/env python3
"""
ATTRMAP - Catalog attribute → search field mapping service
===========================================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

import logging
from typing import Optional

from flask import Flask, jsonify

import config
from db import init_db, get_session, EavAttribute
from api import api_bp

logger = logging.getLogger(__name__)


def create_app(db_url: Optional[str] = None) -> Flask:
    """Flask application factory."""

    app = Flask(__name__)

    # ── Initialise database ─────────────────────────────────────────
    db_url = db_url or config.DB_URL
    init_db(db_url)
    logger.info(f"Database: {db_url}")

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)

    # ── Error handlers ──────────────────────────────────────────────
    @app.errorhandler(404)
    def _404(e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(500)
    def _500(e):
        return jsonify({"error": "internal server error"}), 500

    return app


def _seed_if_empty():
    """Seed the attribute catalog from JSON when the database is empty."""
    session = get_session()
    try:
        count = session.query(EavAttribute).count()
        if count > 0:
            logger.info(f"Catalog has {count} attributes.")
            return

        if not config.SEED_PATH.exists():
            logger.info(f"No seed file at {config.SEED_PATH} - starting empty.")
            return

        logger.info(f"Catalog empty → seeding from {config.SEED_PATH.name} …")
        from catalog.loader import read_seed, seed_catalog

        stats = seed_catalog(session, read_seed(config.SEED_PATH))
        session.commit()
        logger.info(f"Done: {stats['attributes']} attributes, {stats['options']} options")
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 56)
    print("  ATTRMAP - Attribute mapping")
    print("=" * 56)

    app = create_app()
    _seed_if_empty()

    print(f"\n  http://{config.HOST}:{config.PORT}/api/v1/attributes")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
