from donorhub.extensions import db
from donorhub.models.statistics_model import Statistics


def current_stats():
    db.session.expire_all()
    return Statistics.query.first()


DONOR_PAYLOAD = {
    'fullName': 'Ahmed Benali',
    'age': 28,
    'gender': 'Male',
    'bloodType': 'O+',
    'location': 'Algiers',
    'phone': '+213555100001',
    'email': 'ahmed.benali@email.dz',
}

HOSPITAL_PAYLOAD = {
    'name': 'University Hospital',
    'location': 'University Campus',
    'phone': '+213555345678',
    'email': 'contact@unihospital.dz',
    'address': 'University of Algiers, Campus Medical Center',
    'contactPerson': 'Prof. Karim Meziane',
}

BLOOD_REQUEST_PAYLOAD = {
    'hospitalName': 'City General Hospital',
    'bloodType': 'O-',
    'unitsNeeded': 5,
    'urgencyLevel': 'critical',
    'location': 'Downtown Algiers',
    'phone': '+213555123456',
    'email': 'blood@cityhospital.dz',
}
