from .notifier import RecordingInviteNotifier, WebhookInviteNotifier

__all__ = ["RecordingInviteNotifier", "WebhookInviteNotifier"]
