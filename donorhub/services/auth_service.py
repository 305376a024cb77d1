"""
Credential verification.

Passwords are stored as ``salt:hash`` where ``salt`` is 16 random bytes in hex
and ``hash`` is the hex scrypt digest of the password keyed with that salt
string. Any failure during login surfaces as the same ``Invalid credentials``
error.
"""
import hashlib
import hmac
import secrets

from flask import current_app

from donorhub import storage
from donorhub.errors import AuthError, DuplicateError

SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
KEY_LENGTH = 64

INVALID_CREDENTIALS = 'Invalid credentials'


def _derive(password, salt):
    return hashlib.scrypt(
        password.encode('utf-8'),
        salt=salt.encode('utf-8'),
        n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P,
        dklen=KEY_LENGTH,
    )


def hash_password(password):
    salt = secrets.token_hex(16)
    return f'{salt}:{_derive(password, salt).hex()}'


def verify_password(password, stored):
    if not isinstance(password, str) or not isinstance(stored, str):
        return False
    salt, _, digest = stored.partition(':')
    if not salt or not digest:
        return False
    try:
        expected = bytes.fromhex(digest)
        derived = _derive(password, salt)
    except (ValueError, UnicodeEncodeError):
        return False
    return hmac.compare_digest(derived, expected)


def register_user(username, password):
    if storage.get_user_by_username(username):
        raise DuplicateError('Username already taken')
    user = storage.add_user(username, hash_password(password))
    storage.commit()
    current_app.logger.info('User %s signed up', username)
    return user


def authenticate(username, password):
    user = storage.get_user_by_username(username)
    if not user or not verify_password(password, user.password):
        current_app.logger.info('Failed login for %s', username)
        raise AuthError(INVALID_CREDENTIALS)
    return user
