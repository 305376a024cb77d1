"""
Status transitions for hospitals and blood requests.

Both record kinds share one state machine: ``pending``, ``approved`` and
``rejected``, with every state reachable from every other (including
self-transitions). Approving a hospital bumps ``partnerHospitals`` each time
it happens, even when the hospital was already approved. The status write and
the counter bump are committed together.
"""
from flask import current_app

from donorhub import storage
from donorhub.constants import RECORD_STATUSES
from donorhub.errors import NotFoundError, ValidationError
from donorhub.services import statistics_service


def validate_status(new_status):
    if new_status not in RECORD_STATUSES:
        raise ValidationError(
            f"Invalid status '{new_status}'. Allowed: {', '.join(RECORD_STATUSES)}"
        )


def update_hospital_status(hospital_id, new_status):
    validate_status(new_status)
    hospital = storage.get_hospital(hospital_id)
    if not hospital:
        raise NotFoundError('Hospital not found')

    previous_status = hospital.status
    hospital.status = new_status
    if new_status == 'approved':
        statistics_service.increment_partner_hospitals()
    storage.commit()

    current_app.logger.info(
        'Hospital %s status %s -> %s', hospital_id, previous_status, new_status
    )
    return hospital


def update_blood_request_status(request_id, new_status):
    validate_status(new_status)
    blood_request = storage.get_blood_request(request_id)
    if not blood_request:
        raise NotFoundError('Blood request not found')

    previous_status = blood_request.status
    blood_request.status = new_status
    storage.commit()

    current_app.logger.info(
        'Blood request %s status %s -> %s', request_id, previous_status, new_status
    )
    return blood_request


UPDATERS = {
    'hospital': update_hospital_status,
    'blood_request': update_blood_request_status,
}


def update_status(kind, entity_id, new_status):
    """Dispatch a status change by record kind (``hospital`` or ``blood_request``)."""
    return UPDATERS[kind](entity_id, new_status)
