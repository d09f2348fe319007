"""Seed rows loaded into the ``weather`` table at startup.

The statements are plain INSERTs, so running them twice against the same
table fails on the primary key. ``seed_if_empty`` is what the application
factory calls; ``seed_database`` always inserts.
"""
import logging

from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError

from models import db, WeatherRecord

log = logging.getLogger(__name__)

SEED_STATEMENTS = [
    "INSERT INTO weather (city, description, icon) VALUES ('Paris, France', 'Very cloudy!', 'weather-fog')",
    "INSERT INTO weather (city, description, icon) VALUES ('London, UK', 'Quite cloudy', 'weather-pouring')",
]

# Runs every seed statement in one transaction; returns the number of rows inserted.
def seed_database(session=None):
    session = session or db.session
    inserted = 0
    try:
        for statement in SEED_STATEMENTS:
            result = session.execute(text(statement))
            inserted += result.rowcount
        session.commit()
    except Exception:
        session.rollback()
        raise
    log.info("Seeded %d weather records", inserted)
    return inserted

# Seeds only when the table holds no rows yet; losing a race to another process is not an error.
def seed_if_empty(session=None):
    session = session or db.session
    existing = session.execute(select(func.count()).select_from(WeatherRecord)).scalar_one()
    if existing:
        log.info("Weather table already has %d records; skipping seed", existing)
        return 0
    try:
        return seed_database(session)
    except IntegrityError:
        # another process inserted the rows between the count and the insert
        log.info("Weather table was seeded concurrently; skipping seed")
        return 0
