"""External notification channels"""

from .log_notifier import LoggingNotifier
from .slack_notifier import SlackWebhookNotifier, format_slack_message

__all__ = [
    "LoggingNotifier",
    "SlackWebhookNotifier",
    "format_slack_message",
]
