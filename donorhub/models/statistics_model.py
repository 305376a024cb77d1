from datetime import datetime
from donorhub.extensions import db
from donorhub.models import generate_id

# Fixed key for the counters row so concurrent first inserts collide
SINGLETON_ID = 'global'

class Statistics(db.Model):
    """Singleton row of counters shown on the public landing page."""
    __tablename__ = 'statistics'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    active_donors = db.Column(db.Integer, nullable=False, default=0)
    total_blood_units = db.Column(db.Integer, nullable=False, default=0)
    partner_hospitals = db.Column(db.Integer, nullable=False, default=0)
    last_updated = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'activeDonors': self.active_donors,
            'totalBloodUnits': self.total_blood_units,
            'partnerHospitals': self.partner_hospitals,
            'lastUpdated': self.last_updated.isoformat() if self.last_updated else None
        }
