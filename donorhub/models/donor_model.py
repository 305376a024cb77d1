from datetime import datetime
from donorhub.extensions import db
from donorhub.models import generate_id

class Donor(db.Model):
    __tablename__ = 'donors'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    full_name = db.Column(db.String(150), nullable=False)
    age = db.Column(db.Integer, nullable=False)  # 18-65 by policy, not enforced here
    gender = db.Column(db.String(20), nullable=False)
    blood_type = db.Column(db.String(5), nullable=False)
    location = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(30), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'fullName': self.full_name,
            'age': self.age,
            'gender': self.gender,
            'bloodType': self.blood_type,
            'location': self.location,
            'phone': self.phone,
            'email': self.email,
            'isActive': self.is_active,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<Donor {self.full_name}>'
