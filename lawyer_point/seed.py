# lawyer_point/seed.py

import logging

from sqlmodel import Session, select

from .config import get_settings
from .data import APPOINTMENT_OPTIONS, DEFAULT_TIMES
from .db import init_db, make_engine
from .models import AppointmentOption

logger = logging.getLogger(__name__)


def seed_appointment_options(session: Session) -> int:
    """Insert the default appointment options that are missing. Returns how many were added."""
    existing = set(session.exec(select(AppointmentOption.name)).all())
    added = 0
    for name, price in APPOINTMENT_OPTIONS.items():
        if name in existing:
            continue
        session.add(AppointmentOption(name=name, times=list(DEFAULT_TIMES), price=price))
        added += 1
    session.commit()
    return added


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    engine = make_engine(settings.database_url)
    init_db(engine)
    with Session(engine) as session:
        added = seed_appointment_options(session)
    logger.info("Seeded %d appointment options", added)


if __name__ == "__main__":
    main()
