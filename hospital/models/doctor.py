from hospital.extensions import db
from .base import TimestampMixin, PasswordMixin


class Doctor(db.Model, TimestampMixin, PasswordMixin):
    __tablename__ = 'doctors'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    # Free text, e.g. "Cardiologist" or "Senior Cardiologist"; matched by substring
    specialization = db.Column(db.String(100), nullable=False, index=True)

    appointments = db.relationship('Appointment', backref='doctor', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'specialization': self.specialization,
        }

    def __repr__(self):
        return f"<Doctor {self.name} - {self.specialization}>"
