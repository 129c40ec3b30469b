"""
Notification dispatcher: hands appointment emails to the Celery queue.

Delivery happens in the worker. The request path only enqueues, so a crash
between the database commit and the enqueue drops the email.
"""
import logging

logger = logging.getLogger(__name__)


def dispatch_notification(kind, recipient, appointment_data):
    """
    Queue an appointment email without waiting for its outcome.

    Returns:
        bool: True if the task was handed to the broker, False otherwise
    """
    from tasks.notification_tasks import send_appointment_notification

    try:
        result = send_appointment_notification.delay(kind, recipient, appointment_data)
        logger.info("Queued %s email for %s (task %s)", kind, recipient, result.id)
        return True
    except Exception as e:
        logger.error("Failed to queue %s email for %s: %s", kind, recipient, e, exc_info=True)
        return False
