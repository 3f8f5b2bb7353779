# scripts/seed_doctors.py
#  to run the script, run the following command:
#  python scripts/seed_doctors.py

"""
Doctor Seeding Script
Creates missing tables and loads a starter doctor roster when the table is empty.
Doctors are reference data: the API only lists them.
"""
import sys
import asyncio
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import Database
from app.system_models.doctor_model.doctor_model import Doctor
from config.appconfig import settings

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

STARTER_DOCTORS = [
    {"first_name": "Sarah", "last_name": "Johnson", "specialization": "Cardiology", "experience": 15,
     "contact_number": "555-0101", "email": "sarah.johnson@hospital.example", "status": "Active"},
    {"first_name": "Michael", "last_name": "Chen", "specialization": "Neurology", "experience": 12,
     "contact_number": "555-0102", "email": "michael.chen@hospital.example", "status": "Active"},
    {"first_name": "Emily", "last_name": "Rodriguez", "specialization": "Pediatrics", "experience": 8,
     "contact_number": "555-0103", "email": "emily.rodriguez@hospital.example", "status": "Active"},
    {"first_name": "David", "last_name": "Williams", "specialization": "Orthopedics", "experience": 20,
     "contact_number": "555-0104", "email": "david.williams@hospital.example", "status": "Active"},
    {"first_name": "Lisa", "last_name": "Patel", "specialization": "Dermatology", "experience": 10,
     "contact_number": "555-0105", "email": "lisa.patel@hospital.example", "status": "Inactive"},
]


async def seed_doctors(db: AsyncSession, doctors: list[dict] = STARTER_DOCTORS) -> int:
    """Insert the roster if no doctors exist yet. Returns how many rows were added."""
    existing = await db.scalar(select(func.count()).select_from(Doctor))
    if existing:
        logger.info(f"Doctors table already has {existing} rows, skipping")
        return 0

    db.add_all(Doctor(**doctor) for doctor in doctors)
    await db.commit()
    logger.info(f"✓ Seeded {len(doctors)} doctors")
    return len(doctors)


async def main():
    database = Database.from_settings(settings)
    database.connect()
    try:
        await database.create_all()
        async with database.session() as db:
            await seed_doctors(db)
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
