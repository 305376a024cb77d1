from datetime import datetime
from donorhub.extensions import db
from donorhub.models import generate_id

class Hospital(db.Model):
    __tablename__ = 'hospitals'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(150), nullable=False)
    location = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(30), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    address = db.Column(db.String(255))
    contact_person = db.Column(db.String(150))
    status = db.Column(db.String(20), nullable=False, default='pending')  # pending, approved, rejected
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'location': self.location,
            'phone': self.phone,
            'email': self.email,
            'address': self.address,
            'contactPerson': self.contact_person,
            'status': self.status,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<Hospital {self.name}>'
