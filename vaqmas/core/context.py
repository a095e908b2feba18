"""Application context shared by request handlers.

Built once at startup and kept on ``app.state.context``; services take the
pieces they need as arguments instead of reading process globals.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from firebase_admin import auth

from vaqmas.core.config import Settings, get_settings
from vaqmas.core.firebase import get_bucket, get_db, init_firebase
from vaqmas.services.notifications import NotificationCenter
from vaqmas.services.product_service import ProductCatalog


@dataclass
class AppContext:
    settings: Settings
    db: Any
    # firebase_admin.auth module or anything with the same functions
    auth: Any
    bucket: Optional[Any] = None
    catalog: ProductCatalog = field(init=False)
    notifications: NotificationCenter = field(default_factory=NotificationCenter)

    def __post_init__(self):
        self.catalog = ProductCatalog(self.db, self.bucket, self.settings.SIGNED_URL_TTL_MINUTES)


def build_context(settings: Optional[Settings] = None) -> AppContext:
    settings = settings or get_settings()
    init_firebase(settings)
    return AppContext(
        settings=settings,
        db=get_db(),
        auth=auth,
        bucket=get_bucket(settings),
    )
