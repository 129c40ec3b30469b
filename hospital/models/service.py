from hospital.extensions import db


class Service(db.Model):
    """Bookable hospital service (reference data)"""
    __tablename__ = 'services'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2))

    appointments = db.relationship('Appointment', backref='service', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'price': float(self.price) if self.price is not None else None,
        }

    def __repr__(self):
        return f"<Service {self.name}>"
