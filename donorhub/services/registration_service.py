from flask import current_app

from donorhub import storage
from donorhub.services import statistics_service


def register_donor(payload):
    """Create a donor and count it towards ``activeDonors`` in the same commit."""
    donor = storage.add_donor(**payload.model_dump())
    statistics_service.increment_active_donors()
    storage.commit()
    current_app.logger.info('Donor %s registered (%s)', donor.id, donor.blood_type)
    return donor


def register_hospital(payload):
    hospital = storage.add_hospital(**payload.model_dump())
    storage.commit()
    current_app.logger.info('Hospital %s submitted for approval', hospital.id)
    return hospital


def submit_blood_request(payload):
    blood_request = storage.add_blood_request(**payload.model_dump())
    storage.commit()
    current_app.logger.info(
        'Blood request %s: %s x%s (%s)',
        blood_request.id, blood_request.blood_type,
        blood_request.units_needed, blood_request.urgency_level
    )
    return blood_request
