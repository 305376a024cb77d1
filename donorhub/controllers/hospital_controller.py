from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from donorhub import storage
from donorhub.errors import ValidationError, NotFoundError, StoreError
from donorhub.schemas import HospitalCreate, StatusUpdate, parse
from donorhub.services import registration_service, status_service

hospital_bp = Blueprint('hospital_bp', __name__)

# GET all hospitals
@hospital_bp.route('', methods=['GET'])
def get_hospitals():
    try:
        hospitals = storage.get_all_hospitals()
        return jsonify([hospital.to_dict() for hospital in hospitals]), 200
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        current_app.logger.exception('Listing hospitals failed')
        return jsonify({'error': str(e)}), 500

# POST a hospital registration request (starts as pending)
@hospital_bp.route('', methods=['POST'])
def create_hospital():
    try:
        payload = parse(HospitalCreate, request.get_json(silent=True))
        hospital = registration_service.register_hospital(payload)
        return jsonify(hospital.to_dict()), 201
    except ValidationError as e:
        return jsonify({'error': e.description}), 400
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        storage.rollback()
        current_app.logger.exception('Hospital registration failed')
        return jsonify({'error': str(e)}), 500

# GET a specific hospital by ID
@hospital_bp.route('/<id>', methods=['GET'])
def get_hospital(id):
    try:
        hospital = storage.get_hospital(id)
        if not hospital:
            raise NotFoundError('Hospital not found')
        return jsonify(hospital.to_dict()), 200
    except NotFoundError as e:
        return jsonify({'error': e.description}), 404
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        current_app.logger.exception('Loading hospital %s failed', id)
        return jsonify({'error': str(e)}), 500

# PATCH the review status of a hospital
@hospital_bp.route('/<id>/status', methods=['PATCH'])
def update_hospital_status(id):
    try:
        payload = parse(StatusUpdate, request.get_json(silent=True))
        hospital = status_service.update_hospital_status(id, payload.status)
        return jsonify(hospital.to_dict()), 200
    except ValidationError as e:
        return jsonify({'error': e.description}), 400
    except NotFoundError as e:
        return jsonify({'error': e.description}), 404
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        storage.rollback()
        current_app.logger.exception('Hospital %s status update failed', id)
        return jsonify({'error': str(e)}), 500
