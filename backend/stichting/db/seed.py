"""
Database seed script: settings row, initial users and a sample uitje.

Run with ``python -m stichting.db.seed``.
"""
import logging
import sys
from datetime import date, datetime, timedelta, timezone
from typing import Optional
from sqlalchemy.orm import Session
from stichting.core.config import Settings, settings as default_settings
from stichting.core.security import get_password_hash
from stichting.core.utils import configure_logging
from stichting.db.session import Database
from stichting.models import Event, Meal, Role, Setting, SETTING_ID, Travel, Uitje, User

logger = logging.getLogger(__name__)

SEED_USERS = [
    {"username": "Marcel", "first_name": "Marcel", "last_name": "Admin", "role": Role.ADMIN},
    {"username": "Dennis", "first_name": "Dennis", "last_name": "Admin", "role": Role.ADMIN},
    {"username": "Roelie", "first_name": "Roelie", "last_name": "Gebruiker", "role": Role.USER},
    {"username": "Sandra", "first_name": "Sandra", "last_name": "Gebruiker", "role": Role.USER},
]


def seed_settings(db: Session) -> Setting:
    setting = db.get(Setting, SETTING_ID)
    if not setting:
        setting = Setting(id=SETTING_ID, site_title="de Stichting")
        db.add(setting)
    return setting


def seed_users(db: Session, password: str) -> None:
    """Create the initial accounts; existing usernames are left untouched."""
    password_hash = get_password_hash(password)
    for data in SEED_USERS:
        if db.query(User).filter(User.username == data["username"]).first():
            continue
        db.add(User(**data, hashed_password=password_hash, must_change_password=True))


def seed_sample_uitje(db: Session) -> Uitje:
    now = datetime.now(timezone.utc)
    uitje = Uitje(
        title="Stranddag Scheveningen",
        date=date.today() + timedelta(days=21),
        description="Dagje strand met lunch en wandeling over de boulevard.",
        collect_point="P+R Den Haag",
        collect_time="09:15",
        registration_until=now + timedelta(days=14),
        cancel_until=now + timedelta(days=12),
        published=True,
        show_on_frontend=True,
        maps_url="https://maps.google.com",
        terms_url="https://example.org/algemene-voorwaarden",
    )
    uitje.events = [
        Event(title="Museum Bezoek", start_time="10:30", end_time="12:00", price_pp=12.5, sort_order=1),
        Event(title="Rondvaart Haven", start_time="14:00", end_time="15:30", price_pp=16.0, sort_order=3),
    ]
    uitje.meals = [
        Meal(title="Lunch bij 't Strandhuis", start_time="12:30", end_time="13:30", sort_order=2),
        Meal(title="Diner Pizza", start_time="18:00", end_time="19:00", sort_order=5),
    ]
    uitje.travels = [
        Travel(title="Reis naar Scheveningen", start_time="09:30", end_time="10:15", mode="car",
               from_location="P+R", to_location="Scheveningen", sort_order=0),
        Travel(title="Terugreis", start_time="21:00", end_time="22:00", mode="car",
               from_location="Scheveningen", to_location="P+R", sort_order=6),
    ]
    db.add(uitje)
    return uitje


def seed(database: Database, config: Settings = default_settings) -> Uitje:
    """Create tables and load the fixtures in one transaction."""
    database.create_all()
    db = database.session()
    try:
        seed_settings(db)
        seed_users(db, config.DEFAULT_PASSWORD)
        uitje = seed_sample_uitje(db)
        db.commit()
        db.refresh(uitje)
        return uitje
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def main(config: Optional[Settings] = None) -> int:
    config = config or default_settings
    configure_logging(config.LOG_LEVEL)
    database = Database(config.DATABASE_URL, echo=config.DB_ECHO)
    try:
        seed(database, config)
        logger.info("Seed complete.")
        return 0
    except Exception:
        logger.exception("Seed failed")
        return 1
    finally:
        database.dispose()


if __name__ == "__main__":
    sys.exit(main())
