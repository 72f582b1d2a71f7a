"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class NotificationDeliveryError(AdapterError):
    """The mail transport rejected or failed to deliver a message."""

    pass
