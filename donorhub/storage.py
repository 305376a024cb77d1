"""
Entity store: data access for every record kind.

No business rules live here beyond what the schema enforces (unique usernames,
unique inventory blood types). Functions add and flush but never commit; the
calling service owns the transaction boundary.
"""
from datetime import datetime

from flask import current_app
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from donorhub.errors import StoreError
from donorhub.extensions import db
from donorhub.models.blood_inventory_model import BloodInventory
from donorhub.models.blood_request_model import BloodRequest
from donorhub.models.donor_model import Donor
from donorhub.models.hospital_model import Hospital
from donorhub.models.statistics_model import SINGLETON_ID, Statistics
from donorhub.models.user_model import User

NOT_CONFIGURED = 'Database not configured. Please set DATABASE_URL environment variable.'


def is_configured():
    return 'sqlalchemy' in current_app.extensions


def ensure_db():
    if not is_configured():
        raise StoreError(NOT_CONFIGURED)
    return db.session


def commit():
    ensure_db().commit()


def rollback():
    if is_configured():
        db.session.rollback()


# ---------------- Users -----------------

def get_user(user_id):
    return ensure_db().get(User, user_id)


def get_user_by_username(username):
    ensure_db()
    return User.query.filter_by(username=username).first()


def add_user(username, password):
    session = ensure_db()
    user = User(username=username, password=password)
    session.add(user)
    session.flush()
    return user


# ---------------- Donors -----------------

def add_donor(**fields):
    session = ensure_db()
    donor = Donor(**fields)
    session.add(donor)
    session.flush()
    return donor


def get_all_donors():
    ensure_db()
    return Donor.query.order_by(Donor.created_at).all()


# ---------------- Hospitals -----------------

def add_hospital(**fields):
    session = ensure_db()
    hospital = Hospital(**fields)
    session.add(hospital)
    session.flush()
    return hospital


def get_hospital(hospital_id):
    return ensure_db().get(Hospital, hospital_id)


def get_all_hospitals():
    ensure_db()
    return Hospital.query.order_by(Hospital.created_at).all()


# ---------------- Blood requests -----------------

def add_blood_request(**fields):
    session = ensure_db()
    blood_request = BloodRequest(**fields)
    session.add(blood_request)
    session.flush()
    return blood_request


def get_blood_request(request_id):
    return ensure_db().get(BloodRequest, request_id)


def get_blood_requests():
    ensure_db()
    return BloodRequest.query.order_by(BloodRequest.created_at).all()


# ---------------- Inventory & statistics -----------------

def get_blood_inventory():
    ensure_db()
    return BloodInventory.query.all()


def get_statistics():
    ensure_db()
    return Statistics.query.first()


def increment_statistic(field):
    """Add one to a Statistics counter with a single ``SET x = x + 1`` statement.

    Creates the singleton row (with the counter at 1) when none exists yet. If
    another writer creates it first, the insert hits the fixed primary key and
    the increment falls through to the update on that row.
    """
    session = ensure_db()
    column = getattr(Statistics, field)
    stats = get_statistics()
    if stats is None:
        try:
            with session.begin_nested():
                session.add(Statistics(id=SINGLETON_ID, **{field: 1}))
                session.flush()
            return
        except IntegrityError:
            stats = session.get(Statistics, SINGLETON_ID)
    session.execute(
        update(Statistics)
        .where(Statistics.id == stats.id)
        .values({column: column + 1, Statistics.last_updated: datetime.utcnow()})
        .execution_options(synchronize_session=False)
    )
    session.expire(stats)
