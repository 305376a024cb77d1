from donorhub.models.blood_inventory_model import BloodInventory
from donorhub.models.blood_request_model import BloodRequest
from donorhub.models.donor_model import Donor
from donorhub.models.hospital_model import Hospital
from donorhub.seed import seed_command, seed_database
from donorhub.services import statistics_service

from tests.helpers import current_stats


def test_seed_loads_reference_data(app):
    assert seed_database() is True

    assert BloodInventory.query.count() == 8
    assert BloodInventory.query.filter_by(blood_type='O-').first().status == 'Critical'
    assert Donor.query.count() == 10
    assert Hospital.query.filter_by(status='approved').count() == 2
    assert BloodRequest.query.filter_by(status='pending').count() == 3

    stats = current_stats()
    assert (stats.active_donors, stats.total_blood_units, stats.partner_hospitals) == (10, 204, 2)

    dashboard = statistics_service.get_dashboard_stats()
    assert dashboard['totalHospitals'] == 2
    assert dashboard['totalPending'] == 6


def test_seed_is_repeatable(app):
    seed_database()
    seed_database()
    assert BloodInventory.query.count() == 8
    assert Donor.query.count() == 10
    assert Hospital.query.count() == 6


def test_seed_cli_command(app):
    result = app.test_cli_runner().invoke(seed_command)
    assert result.exit_code == 0
    assert 'completed' in result.output
