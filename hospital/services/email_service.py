"""
Email Service for appointment notifications
"""
import smtplib
import logging
from datetime import datetime
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app
from markupsafe import escape

logger = logging.getLogger(__name__)

KIND_CONFIRMATION = 'confirmation'
KIND_CANCELLATION = 'cancellation'
KIND_REMINDER = 'reminder'

NOTIFICATION_KINDS = (KIND_CONFIRMATION, KIND_CANCELLATION, KIND_REMINDER)

_STYLE = """
        body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
        .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
        .header {{ background: {color}; color: white; padding: 20px; text-align: center; border-radius: 5px 5px 0 0; }}
        .content {{ background: #f9f9f9; padding: 20px; border: 1px solid #ddd; }}
        .details {{ background: white; padding: 15px; border-radius: 5px; margin: 15px 0; border-left: 4px solid {color}; }}
        .reminder {{ background: #fff3cd; border: 1px solid #ffeaa7; padding: 15px; border-radius: 5px; }}
        .footer {{ background: #f1f1f1; padding: 10px; text-align: center; font-size: 12px; color: #666; }}
"""


def _format_date(value):
    """Render an ISO date for humans; fall back to the raw value"""
    try:
        return datetime.strptime(str(value), '%Y-%m-%d').strftime('%d %B %Y')
    except (TypeError, ValueError):
        return str(value)


def _page(color, title, body, hospital_name):
    return f"""
<!DOCTYPE html>
<html>
<head>
    <style>{_STYLE.format(color=color)}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>🏥 {escape(hospital_name)}</h1>
            <h2>{title}</h2>
        </div>
        <div class="content">
{body}
        </div>
        <div class="footer">
            <p>© {datetime.utcnow().year} {escape(hospital_name)}. All rights reserved.</p>
        </div>
    </div>
</body>
</html>
"""


def _details_rows(data, include_doctor=True, include_notes=False, date_label='Date', time_label='Time', date_suffix=''):
    rows = [
        f"<p><strong>Service:</strong> {escape(data.get('service_name') or '')}</p>",
        f"<p><strong>{date_label}:</strong> {_format_date(data.get('date'))}{date_suffix}</p>",
        f"<p><strong>{time_label}:</strong> {escape(data.get('time') or '')}</p>",
        f"<p><strong>Appointment ID:</strong> {escape(str(data.get('id')))}</p>",
    ]
    if include_doctor and data.get('doctor_name'):
        rows.append(f"<p><strong>Doctor:</strong> Dr. {escape(data['doctor_name'])}</p>")
    if include_notes and data.get('notes'):
        rows.append(f"<p><strong>Notes:</strong> {escape(data['notes'])}</p>")
    return '\n'.join(rows)


def render_confirmation(data, hospital_name):
    subject = f"Appointment Confirmed - {data.get('service_name')} on {_format_date(data.get('date'))}"
    text = f"""
Dear {data.get('patient_name')},

Your appointment has been successfully booked.

Service: {data.get('service_name')}
Date: {_format_date(data.get('date'))}
Time: {data.get('time')}
Appointment ID: {data.get('id')}
{f"Doctor: Dr. {data['doctor_name']}" if data.get('doctor_name') else ''}

Please arrive 15 minutes before your scheduled time.

{hospital_name}
"""
    body = f"""
            <p>Dear <strong>{escape(data.get('patient_name') or '')}</strong>,</p>
            <p>Your appointment has been successfully booked. Here are your appointment details:</p>
            <div class="details">
                <h3>Appointment Details</h3>
                {_details_rows(data, include_notes=True)}
            </div>
            <p><strong>Important Reminders:</strong></p>
            <ul>
                <li>Please arrive 15 minutes before your scheduled time</li>
                <li>Bring your ID and insurance card</li>
                <li>Cancel at least 24 hours in advance if you cannot make it</li>
            </ul>
            <p>If you need to reschedule or cancel, please visit your patient dashboard.</p>
"""
    return subject, text, _page('#007bff', 'Appointment Confirmed', body, hospital_name)


def render_cancellation(data, hospital_name):
    subject = f"Appointment Cancelled - {data.get('service_name')} on {_format_date(data.get('date'))}"
    text = f"""
Dear {data.get('patient_name')},

Your appointment has been cancelled as requested.

Service: {data.get('service_name')}
Original Date: {_format_date(data.get('date'))}
Original Time: {data.get('time')}
Appointment ID: {data.get('id')}

If this was a mistake or you'd like to reschedule, please book a new appointment.

{hospital_name}
"""
    body = f"""
            <p>Dear <strong>{escape(data.get('patient_name') or '')}</strong>,</p>
            <p>Your appointment has been cancelled as requested.</p>
            <div class="details">
                <h3>Cancelled Appointment Details</h3>
                {_details_rows(data, include_doctor=False, date_label='Original Date', time_label='Original Time')}
            </div>
            <p>If this was a mistake or you'd like to reschedule, please visit our appointment system.</p>
            <p>We hope to serve you in the future.</p>
"""
    return subject, text, _page('#dc3545', 'Appointment Cancelled', body, hospital_name)


def render_reminder(data, hospital_name):
    subject = f"Appointment Reminder - {data.get('service_name')} tomorrow at {data.get('time')}"
    text = f"""
Dear {data.get('patient_name')},

This is a reminder that you have an appointment tomorrow.

Service: {data.get('service_name')}
Date: {_format_date(data.get('date'))}
Time: {data.get('time')}
Appointment ID: {data.get('id')}
{f"Doctor: Dr. {data['doctor_name']}" if data.get('doctor_name') else ''}

{hospital_name}
"""
    body = f"""
            <p>Dear <strong>{escape(data.get('patient_name') or '')}</strong>,</p>
            <div class="reminder">
                <h3>📅 You have an appointment tomorrow!</h3>
            </div>
            <div class="details">
                <h3>Appointment Details</h3>
                {_details_rows(data, date_suffix=' (Tomorrow)')}
            </div>
            <p><strong>Please remember to:</strong></p>
            <ul>
                <li>Arrive 15 minutes early</li>
                <li>Bring your ID and insurance card</li>
                <li>Bring any relevant medical records</li>
            </ul>
"""
    return subject, text, _page('#28a745', 'Appointment Reminder', body, hospital_name)


RENDERERS = {
    KIND_CONFIRMATION: render_confirmation,
    KIND_CANCELLATION: render_cancellation,
    KIND_REMINDER: render_reminder,
}


def send_email(to_email, subject, body_text, body_html=None):
    """
    Generic email sending function

    Returns:
        dict: {'success': bool, 'error': str (on failure)}
    """
    try:
        mail_server = current_app.config.get('MAIL_SERVER')
        mail_port = current_app.config.get('MAIL_PORT')
        mail_use_tls = current_app.config.get('MAIL_USE_TLS')
        mail_username = current_app.config.get('MAIL_USERNAME')
        mail_password = current_app.config.get('MAIL_PASSWORD')
        mail_sender = current_app.config.get('MAIL_DEFAULT_SENDER')

        if not mail_username or not mail_password:
            logger.warning("Email not configured. Skipping email to %s", to_email)
            return {'success': False, 'error': 'Email not configured'}

        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = mail_sender
        msg['To'] = to_email

        msg.attach(MIMEText(body_text, 'plain'))
        if body_html:
            msg.attach(MIMEText(body_html, 'html'))

        with smtplib.SMTP(mail_server, mail_port) as server:
            if mail_use_tls:
                server.starttls()
            server.login(mail_username, mail_password)
            server.sendmail(mail_sender, to_email, msg.as_string())

        logger.info(f"Email sent to {to_email}")
        return {'success': True}

    except Exception as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return {'success': False, 'error': str(e)}


def send_appointment_email(kind, recipient, appointment_data):
    """
    Render one of the appointment templates and send it.

    Args:
        kind: 'confirmation', 'cancellation' or 'reminder'
        recipient: Patient email address
        appointment_data: dict with id, patient_name, service_name, date, time, doctor_name, notes

    Returns:
        dict: {'success': bool, 'error': str (on failure)}
    """
    renderer = RENDERERS.get(kind)
    if renderer is None:
        raise ValueError(f"Unknown notification kind: {kind}")

    hospital_name = current_app.config.get('HOSPITAL_NAME', 'Hospital Appointment System')
    subject, text, html = renderer(appointment_data, hospital_name)
    return send_email(recipient, subject, text, html)
