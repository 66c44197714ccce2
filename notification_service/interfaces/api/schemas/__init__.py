from .notification import NotificationRead
from .response import ApiResponse

__all__ = [
    "ApiResponse",
    "NotificationRead",
]
