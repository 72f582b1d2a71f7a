"""Infrastructure providers."""

# Import bases
from .clock import ClockProvider
from .notifications import NotificationsProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .clock import ProdClockProvider  # noqa: F401
from .notifications import ProdNotificationsProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ClockProvider",
    "NotificationsProvider",
    "PersistenceProvider",
    "ProdClockProvider",
    "ProdNotificationsProvider",
    "ProdPersistenceProvider",
]
