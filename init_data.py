#!/usr/bin/env python3
"""
Initialize default doctors and services.
Run with: python3 init_data.py
Doctor passwords can be overridden with DEFAULT_DOCTOR_PASSWORD.
"""
import os
from hospital import create_app
from hospital.extensions import db
from hospital.models import Doctor
from hospital.seeds import seed_services

DEFAULT_DOCTOR_PASSWORD = os.getenv('DEFAULT_DOCTOR_PASSWORD', 'ChangeMe!2024')

# Default doctors, one per specialization in the booking table
DEFAULT_DOCTORS = [
    {'name': 'Sarah Johnson', 'email': 'sarah.johnson@hospital.com', 'specialization': 'Cardiologist'},
    {'name': 'Michael Chen', 'email': 'michael.chen@hospital.com', 'specialization': 'Neurologist'},
    {'name': 'Emily Davis', 'email': 'emily.davis@hospital.com', 'specialization': 'Pediatrician'},
    {'name': 'Robert Wilson', 'email': 'robert.wilson@hospital.com', 'specialization': 'General Physician'},
    {'name': 'Lisa Brown', 'email': 'lisa.brown@hospital.com', 'specialization': 'Emergency Medicine'},
]


def create_doctors():
    """Create default doctors and services"""
    app = create_app()

    with app.app_context():
        print("=" * 60)
        print("Initializing Doctors and Services")
        print("=" * 60)
        print()

        seed_services()

        created_count = 0

        for doctor_data in DEFAULT_DOCTORS:
            email = doctor_data['email'].strip().lower()

            existing = Doctor.query.filter_by(email=email).first()
            if existing:
                print(f"  - Doctor '{email}' already exists (skipping)")
                continue

            doctor = Doctor(
                name=doctor_data['name'],
                email=email,
                specialization=doctor_data['specialization'],
            )
            doctor.set_password(DEFAULT_DOCTOR_PASSWORD)

            db.session.add(doctor)
            created_count += 1
            print(f"  ✓ Created: {doctor.name} ({doctor.specialization})")

        db.session.commit()

        print()
        print("=" * 60)
        print(f"✅ Created {created_count} new doctor(s)")
        print("=" * 60)
        print("\n⚠️  IMPORTANT: Change doctor passwords after first login!")


if __name__ == '__main__':
    create_doctors()
