from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from donorhub import storage
from donorhub.errors import StoreError
from donorhub.services import statistics_service

statistics_bp = Blueprint('statistics_bp', __name__)

# GET landing page counters
@statistics_bp.route('/statistics', methods=['GET'])
def get_statistics():
    try:
        return jsonify(statistics_service.get_statistics()), 200
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        current_app.logger.exception('Loading statistics failed')
        return jsonify({'error': str(e)}), 500

# GET admin dashboard aggregates
@statistics_bp.route('/dashboard-stats', methods=['GET'])
def get_dashboard_stats():
    try:
        return jsonify(statistics_service.get_dashboard_stats()), 200
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        current_app.logger.exception('Computing dashboard stats failed')
        return jsonify({'error': str(e)}), 500

# GET blood stock per type
@statistics_bp.route('/blood-inventory', methods=['GET'])
def get_blood_inventory():
    try:
        inventory = storage.get_blood_inventory()
        return jsonify([item.to_dict() for item in inventory]), 200
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        current_app.logger.exception('Loading blood inventory failed')
        return jsonify({'error': str(e)}), 500
