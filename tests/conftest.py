import pytest

from donorhub import create_app
from donorhub.config import TestingConfig
from donorhub.extensions import db
from donorhub.models.statistics_model import Statistics


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def stats_row(app):
    stats = Statistics(active_donors=0, total_blood_units=0, partner_hospitals=0)
    db.session.add(stats)
    db.session.commit()
    return stats
