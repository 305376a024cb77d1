"""Reference and demo data, loaded with ``flask --app donorhub seed``."""
from datetime import datetime

import click
from flask import current_app
from flask.cli import with_appcontext

from donorhub import storage
from donorhub.extensions import db
from donorhub.models.blood_inventory_model import BloodInventory
from donorhub.models.blood_request_model import BloodRequest
from donorhub.models.donor_model import Donor
from donorhub.models.hospital_model import Hospital
from donorhub.models.statistics_model import SINGLETON_ID, Statistics

INVENTORY = [
    ('A+', 32, 'Available'),
    ('A-', 10, 'Low'),
    ('B+', 32, 'Available'),
    ('B-', 32, 'Available'),
    ('AB+', 32, 'Available'),
    ('AB-', 32, 'Available'),
    ('O+', 32, 'Available'),
    ('O-', 2, 'Critical'),
]

DONORS = [
    ('Ahmed Benali', 28, 'Male', 'O+', 'Algiers', '+213555100001', 'ahmed.benali@email.dz', True),
    ('Fatima Hadj', 35, 'Female', 'A+', 'Oran', '+213555100002', 'fatima.hadj@email.dz', True),
    ('Karim Meziane', 42, 'Male', 'B+', 'Constantine', '+213555100003', 'karim.meziane@email.dz', True),
    ('Leila Boumediene', 25, 'Female', 'AB-', 'Annaba', '+213555100004', 'leila.boumediene@email.dz', True),
    ('Youssef Ammari', 31, 'Male', 'O-', 'Blida', '+213555100005', 'youssef.ammari@email.dz', True),
    ('Nadia Khelif', 29, 'Female', 'A-', 'Tlemcen', '+213555100006', 'nadia.khelif@email.dz', True),
    ('Mohamed Cherif', 38, 'Male', 'B-', 'Setif', '+213555100007', 'mohamed.cherif@email.dz', True),
    ('Amina Larbi', 26, 'Female', 'AB+', 'Batna', '+213555100008', 'amina.larbi@email.dz', True),
    ('Rachid Bouzid', 33, 'Male', 'O+', 'Bejaia', '+213555100009', 'rachid.bouzid@email.dz', False),
    ('Sara Mansouri', 27, 'Female', 'A+', 'Mostaganem', '+213555100010', 'sara.mansouri@email.dz', True),
]

HOSPITALS = [
    ('City General Hospital', 'Downtown Algiers', '+213555123456', 'contact@cityhospital.dz',
     '123 Main Street, Downtown, Algiers', 'Dr. Ahmed Benali', 'approved'),
    ('Regional Medical Center', 'North District', '+213555234567', 'info@regionalmed.dz',
     '456 Healthcare Ave, North District', 'Dr. Fatima Hadj', 'approved'),
    ('University Hospital', 'University Campus', '+213555345678', 'contact@unihospital.dz',
     'University of Algiers, Campus Medical Center', 'Prof. Karim Meziane', 'pending'),
    ('Emergency Care Center', 'Central Avenue', '+213555456789', 'emergency@carecentr.dz',
     '789 Central Avenue, Algiers', 'Dr. Leila Boumediene', 'pending'),
    ('Community Health Clinic', 'West Side', '+213555567890', 'info@communityclinic.dz',
     '321 West Side Blvd', 'Dr. Youssef Ammari', 'pending'),
    ('Mustapha Pacha Hospital', 'Central Algiers', '+213555678901', 'contact@mustapha.dz',
     'Place du 1er Mai, Central Algiers', 'Dr. Nadia Khelif', 'rejected'),
]

BLOOD_REQUESTS = [
    ('City General Hospital', 'O-', 5, 'critical', 'Downtown Algiers', '+213555123456', 'blood@cityhospital.dz', 'pending'),
    ('Regional Medical Center', 'A+', 3, 'urgent', 'North District', '+213555234567', 'blood@regionalmed.dz', 'approved'),
    ('University Hospital', 'B+', 2, 'normal', 'University Campus', '+213555345678', 'blood@unihospital.dz', 'pending'),
    ('Emergency Care Center', 'AB-', 4, 'critical', 'Central Avenue', '+213555456789', 'blood@carecentr.dz', 'pending'),
    ('Community Health Clinic', 'O+', 6, 'urgent', 'West Side', '+213555567890', 'blood@communityclinic.dz', 'rejected'),
]

INITIAL_STATISTICS = {'active_donors': 10, 'total_blood_units': 204, 'partner_hospitals': 2}


def seed_inventory():
    for blood_type, units, status in INVENTORY:
        item = BloodInventory.query.filter_by(blood_type=blood_type).first()
        if item:
            item.units_available = units
            item.status = status
            item.last_updated = datetime.utcnow()
        else:
            db.session.add(BloodInventory(blood_type=blood_type, units_available=units, status=status))


def seed_donors():
    if Donor.query.first():
        return 0
    for full_name, age, gender, blood_type, location, phone, email, is_active in DONORS:
        db.session.add(Donor(
            full_name=full_name, age=age, gender=gender, blood_type=blood_type,
            location=location, phone=phone, email=email, is_active=is_active
        ))
    return len(DONORS)


def seed_hospitals():
    if Hospital.query.first():
        return 0
    for name, location, phone, email, address, contact_person, status in HOSPITALS:
        db.session.add(Hospital(
            name=name, location=location, phone=phone, email=email,
            address=address, contact_person=contact_person, status=status
        ))
    return len(HOSPITALS)


def seed_blood_requests():
    if BloodRequest.query.first():
        return 0
    for hospital_name, blood_type, units, urgency, location, phone, email, status in BLOOD_REQUESTS:
        db.session.add(BloodRequest(
            hospital_name=hospital_name, blood_type=blood_type, units_needed=units,
            urgency_level=urgency, location=location, phone=phone, email=email, status=status
        ))
    return len(BLOOD_REQUESTS)


def seed_statistics():
    if Statistics.query.first():
        return False
    db.session.add(Statistics(id=SINGLETON_ID, **INITIAL_STATISTICS))
    return True


def seed_database():
    """Create tables and load seed data. Safe to run repeatedly."""
    logger = current_app.logger
    if not storage.is_configured():
        logger.info('Skipping seed: DATABASE_URL not configured')
        return False

    db.create_all()
    seed_inventory()
    donors = seed_donors()
    hospitals = seed_hospitals()
    requests = seed_blood_requests()
    stats = seed_statistics()
    db.session.commit()

    logger.info('Seeded %d donors, %d hospitals, %d blood requests', donors, hospitals, requests)
    if stats:
        logger.info('Seeded statistics')
    return True


@click.command('seed')
@with_appcontext
def seed_command():
    """Create tables and load reference data."""
    if seed_database():
        click.echo('Database seeding completed successfully!')
    else:
        click.echo('Skipping seed: DATABASE_URL not configured')
