"""
Celery tasks for appointment emails
"""
import logging
from datetime import date, timedelta
from hospital.extensions import celery
from hospital.services.email_service import send_appointment_email, KIND_REMINDER

logger = logging.getLogger(__name__)


@celery.task(name='tasks.send_appointment_notification')
def send_appointment_notification(kind, recipient, appointment_data):
    """
    Deliver one appointment email. Best effort: the outcome is logged and
    returned, never retried.

    Args:
        kind: 'confirmation', 'cancellation' or 'reminder'
        recipient: Patient email address
        appointment_data: JSON-safe appointment details

    Returns:
        dict: {'success': bool, 'error': str (on failure)}
    """
    try:
        result = send_appointment_email(kind, recipient, appointment_data)
    except Exception as e:
        logger.error(f"Error sending {kind} email to {recipient}: {e}", exc_info=True)
        return {'success': False, 'error': str(e)}

    if result.get('success'):
        logger.info(f"{kind.capitalize()} email sent to {recipient}")
    else:
        logger.error(f"Failed to send {kind} email to {recipient}: {result.get('error')}")
    return result


@celery.task(name='tasks.send_appointment_reminders')
def send_appointment_reminders(target_date=None):
    """
    Queue reminder emails for scheduled appointments on target_date
    (ISO string, default: tomorrow). Not scheduled by default; add it to
    celery beat to enable reminders.

    Returns:
        dict: Queued reminder count
    """
    from hospital.services.appointment_service import collect_reminders

    if target_date:
        day = date.fromisoformat(target_date)
    else:
        day = date.today() + timedelta(days=1)

    queued = 0
    for recipient, payload in collect_reminders(day):
        send_appointment_notification.delay(KIND_REMINDER, recipient, payload)
        queued += 1

    logger.info(f"Queued {queued} reminder email(s) for {day.isoformat()}")
    return {'success': True, 'date': day.isoformat(), 'queued': queued}
