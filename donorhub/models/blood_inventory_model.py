from datetime import datetime
from donorhub.extensions import db
from donorhub.models import generate_id

class BloodInventory(db.Model):
    __tablename__ = 'blood_inventory'
    __table_args__ = (
        db.CheckConstraint('units_available >= 0', name='ck_inventory_units_non_negative'),
    )

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    blood_type = db.Column(db.String(5), nullable=False, unique=True)
    units_available = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default='Available')  # Available, Low, Critical
    last_updated = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'bloodType': self.blood_type,
            'unitsAvailable': self.units_available,
            'status': self.status,
            'lastUpdated': self.last_updated.isoformat() if self.last_updated else None
        }
