"""
Database seed data - runs on app startup if the services table is empty.
"""
import logging

from hospital.extensions import db
from hospital.models import Service

logger = logging.getLogger(__name__)

DEFAULT_SERVICES = [
    {
        "name": "General Physician",
        "description": "General consultation for common illnesses and routine check-ups",
        "price": 50.00,
    },
    {
        "name": "Pediatrics",
        "description": "Medical care for infants, children and adolescents",
        "price": 60.00,
    },
    {
        "name": "Neurology",
        "description": "Diagnosis and treatment of disorders of the nervous system",
        "price": 120.00,
    },
    {
        "name": "Cardiology",
        "description": "Heart and blood vessel consultations, ECG review",
        "price": 150.00,
    },
    {
        "name": "Emergency",
        "description": "Urgent care for acute illness and injury",
        "price": 200.00,
    },
    {
        "name": "Immunization",
        "description": "Vaccinations for children and adults",
        "price": 30.00,
    },
]


def seed_services():
    """Create default services if none exist."""
    try:
        if Service.query.count() == 0:
            for item in DEFAULT_SERVICES:
                db.session.add(Service(
                    name=item["name"],
                    description=item["description"],
                    price=item["price"],
                ))
            db.session.commit()
            logger.info("Seeded %d default services", len(DEFAULT_SERVICES))
    except Exception as e:
        db.session.rollback()
        logger.warning("Service seeding skipped: %s", e)
