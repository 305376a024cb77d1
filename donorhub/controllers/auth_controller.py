from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import (
    create_access_token, get_jwt_identity, set_access_cookies,
    unset_jwt_cookies, verify_jwt_in_request
)
from sqlalchemy.exc import SQLAlchemyError
from donorhub import storage
from donorhub.errors import ValidationError, DuplicateError, AuthError, StoreError
from donorhub.schemas import Credentials, parse
from donorhub.services import auth_service

auth_bp = Blueprint('auth_bp', __name__)


def _session_response(user, status):
    response = jsonify({'user': user.to_dict()})
    set_access_cookies(response, create_access_token(identity=user.id))
    return response, status

# POST sign up and open a session
@auth_bp.route('/signup', methods=['POST'])
def signup():
    try:
        credentials = parse(Credentials, request.get_json(silent=True))
        user = auth_service.register_user(credentials.username, credentials.password)
        return _session_response(user, 201)
    except (ValidationError, DuplicateError) as e:
        return jsonify({'error': e.description}), 400
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        storage.rollback()
        current_app.logger.exception('Sign up failed')
        return jsonify({'error': str(e)}), 500

# POST log in and open a session
@auth_bp.route('/login', methods=['POST'])
def login():
    try:
        credentials = parse(Credentials, request.get_json(silent=True))
        user = auth_service.authenticate(credentials.username, credentials.password)
        current_app.logger.info('User %s logged in', user.username)
        return _session_response(user, 200)
    except ValidationError as e:
        return jsonify({'error': e.description}), 400
    except AuthError as e:
        return jsonify({'error': e.description}), 401
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        storage.rollback()
        current_app.logger.exception('Login failed')
        return jsonify({'error': str(e)}), 500

# POST log out (clears the session cookies)
@auth_bp.route('/logout', methods=['POST'])
def logout():
    response = jsonify({'ok': True})
    unset_jwt_cookies(response)
    return response, 200

# GET the user behind the current session
@auth_bp.route('/me', methods=['GET'])
def me():
    try:
        verify_jwt_in_request(optional=True)
        user_id = get_jwt_identity()
        if not user_id:
            raise AuthError('Not authenticated')
        user = storage.get_user(user_id)
        if not user:
            raise AuthError('Not authenticated')
        return jsonify({'user': user.to_dict()}), 200
    except AuthError as e:
        return jsonify({'error': e.description}), 401
    except StoreError as e:
        return jsonify({'error': e.description}), 500
    except SQLAlchemyError as e:
        current_app.logger.exception('Loading current user failed')
        return jsonify({'error': str(e)}), 500
