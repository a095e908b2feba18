from datetime import datetime, timezone

from vaqmas.core.config import get_settings
from vaqmas.core.firebase import get_db, init_firebase

locations = [
    {"name": "Sede Principal", "address": "Por definir"},
    {"name": "Sede Norte", "address": "Por definir"},
]


def seed(db):
    collection = db.collection("locations")
    for loc in locations:
        # Check if exists to avoid dupes
        exists = collection.where("name", "==", loc["name"]).get()
        if not exists:
            collection.add({**loc, "createdAt": datetime.now(timezone.utc)})
            print(f"Added {loc['name']}")
        else:
            print(f"Skipped {loc['name']} (Exists)")


if __name__ == "__main__":
    init_firebase(get_settings())
    seed(get_db())
