"""
Firebase admin initialization and helpers.

The web client authenticates users with Firebase Authentication and
passes Firebase ID tokens to this service. The service verifies those
tokens with the Firebase Admin SDK and reads/writes Firestore and
Storage with service-account privileges.
"""

import os

import firebase_admin
from firebase_admin import credentials, firestore, storage

from vaqmas.core.config import Settings
from vaqmas.core.logger import get_logger

logger = get_logger("firebase")


def init_firebase(settings: Settings):
    """
    Initialize Firebase Admin SDK if not already initialized.

    Uses the FIREBASE_CREDENTIALS service-account path and the project's
    storage bucket from settings.
    """
    # Prevent re-initialization (important for Uvicorn reload)
    if firebase_admin._apps:
        return firebase_admin.get_app()

    cred_path = settings.FIREBASE_CREDENTIALS
    if not os.path.exists(cred_path):
        raise RuntimeError(
            f"Firebase credentials not found at: {cred_path}\n"
            "Set FIREBASE_CREDENTIALS env var or place firebase_key.json correctly."
        )

    options = {}
    if settings.FIREBASE_PROJECT_ID:
        options["projectId"] = settings.FIREBASE_PROJECT_ID
    if settings.FIREBASE_STORAGE_BUCKET:
        options["storageBucket"] = settings.FIREBASE_STORAGE_BUCKET

    cred = credentials.Certificate(cred_path)
    app = firebase_admin.initialize_app(cred, options or None)

    logger.info("Firebase Admin initialized for project %s", settings.FIREBASE_PROJECT_ID or "<default>")
    return app


def get_db():
    return firestore.client()


def get_bucket(settings: Settings):
    """Default storage bucket, or None when the project has none configured."""
    if not settings.FIREBASE_STORAGE_BUCKET:
        logger.warning("FIREBASE_STORAGE_BUCKET not set; product images will use fallbacks")
        return None
    return storage.bucket()
