from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from donorhub import storage
from donorhub.errors import ValidationError, NotFoundError, StoreError
from donorhub.schemas import BloodRequestCreate, StatusUpdate, parse
from donorhub.services import registration_service, status_service

blood_request_bp = Blueprint('blood_request_bp', __name__)

# GET all blood requests
@blood_request_bp.route('', methods=['GET'])
def get_blood_requests():
    try:
        blood_requests = storage.get_blood_requests()
        return jsonify([blood_request.to_dict() for blood_request in blood_requests]), 200
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        current_app.logger.exception('Listing blood requests failed')
        return jsonify({'error': str(e)}), 500

# POST a new blood request
@blood_request_bp.route('', methods=['POST'])
def create_blood_request():
    try:
        payload = parse(BloodRequestCreate, request.get_json(silent=True))
        blood_request = registration_service.submit_blood_request(payload)
        return jsonify(blood_request.to_dict()), 201
    except ValidationError as e:
        return jsonify({'error': e.description}), 400
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        storage.rollback()
        current_app.logger.exception('Blood request submission failed')
        return jsonify({'error': str(e)}), 500

# PATCH the review status of a blood request
@blood_request_bp.route('/<id>/status', methods=['PATCH'])
def update_blood_request_status(id):
    try:
        payload = parse(StatusUpdate, request.get_json(silent=True))
        blood_request = status_service.update_blood_request_status(id, payload.status)
        return jsonify(blood_request.to_dict()), 200
    except ValidationError as e:
        return jsonify({'error': e.description}), 400
    except NotFoundError as e:
        return jsonify({'error': e.description}), 404
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        storage.rollback()
        current_app.logger.exception('Blood request %s status update failed', id)
        return jsonify({'error': str(e)}), 500
