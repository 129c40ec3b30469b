from hospital.extensions import db
from .base import TimestampMixin


STATUS_SCHEDULED = 'scheduled'
STATUS_COMPLETED = 'completed'
STATUS_CANCELLED = 'cancelled'
STATUS_NO_SHOW = 'no-show'

# Closed state machine for doctor-driven status updates.
# Terminal states have no outgoing transitions.
ALLOWED_TRANSITIONS = {
    STATUS_SCHEDULED: {STATUS_COMPLETED, STATUS_CANCELLED, STATUS_NO_SHOW},
    STATUS_COMPLETED: set(),
    STATUS_CANCELLED: set(),
    STATUS_NO_SHOW: set(),
}

VALID_STATUSES = tuple(ALLOWED_TRANSITIONS)


class Appointment(db.Model, TimestampMixin):
    __tablename__ = 'appointments'

    id = db.Column(db.Integer, primary_key=True)
    patient_id = db.Column(db.Integer, db.ForeignKey('patients.id'), nullable=False, index=True)
    # Null means unassigned: no doctor matched the specialization at booking time
    doctor_id = db.Column(db.Integer, db.ForeignKey('doctors.id'), nullable=True, index=True)
    service_id = db.Column(db.Integer, db.ForeignKey('services.id'), nullable=False)

    appointment_date = db.Column(db.Date, nullable=False, index=True)
    appointment_time = db.Column(db.String(5), nullable=False)  # e.g. "10:45"
    notes = db.Column(db.Text)

    status = db.Column(db.String(20), nullable=False, default=STATUS_SCHEDULED, index=True)

    def can_transition_to(self, new_status):
        """Check whether the state machine allows moving to new_status"""
        return new_status in ALLOWED_TRANSITIONS.get(self.status, set())

    def __repr__(self):
        return f"<Appointment {self.id} patient={self.patient_id} {self.appointment_date} {self.appointment_time} ({self.status})>"
