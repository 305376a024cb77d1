from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from donorhub import storage
from donorhub.errors import ValidationError, StoreError
from donorhub.schemas import DonorCreate, parse
from donorhub.services import registration_service

donor_bp = Blueprint('donor_bp', __name__)

# GET all donors
@donor_bp.route('', methods=['GET'])
def get_donors():
    try:
        donors = storage.get_all_donors()
        return jsonify([donor.to_dict() for donor in donors]), 200
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        current_app.logger.exception('Listing donors failed')
        return jsonify({'error': str(e)}), 500

# POST a new donor (counts towards activeDonors)
@donor_bp.route('', methods=['POST'])
def create_donor():
    try:
        payload = parse(DonorCreate, request.get_json(silent=True))
        donor = registration_service.register_donor(payload)
        return jsonify(donor.to_dict()), 201
    except ValidationError as e:
        return jsonify({'error': e.description}), 400
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        storage.rollback()
        current_app.logger.exception('Donor registration failed')
        return jsonify({'error': str(e)}), 500
