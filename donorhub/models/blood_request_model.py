from datetime import datetime
from donorhub.extensions import db
from donorhub.models import generate_id

class BloodRequest(db.Model):
    __tablename__ = 'blood_requests'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    # Plain text on purpose: requests may name hospitals that never registered
    hospital_name = db.Column(db.String(150), nullable=False)
    blood_type = db.Column(db.String(5), nullable=False)
    units_needed = db.Column(db.Integer, nullable=False)
    urgency_level = db.Column(db.String(20), nullable=False)  # critical, urgent, normal
    location = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(30), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='pending')
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'hospitalName': self.hospital_name,
            'bloodType': self.blood_type,
            'unitsNeeded': self.units_needed,
            'urgencyLevel': self.urgency_level,
            'location': self.location,
            'phone': self.phone,
            'email': self.email,
            'status': self.status,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<BloodRequest {self.hospital_name} {self.blood_type}>'
