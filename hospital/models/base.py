from datetime import datetime
from hospital.extensions import db, bcrypt


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class PasswordMixin:
    """bcrypt password handling shared by patients and doctors"""
    password_hash = db.Column(db.String(255), nullable=False)

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        """Check if provided password matches hash"""
        if not self.password_hash or password is None:
            return False
        return bcrypt.check_password_hash(self.password_hash, password)
