"""Thin CRUD layer over one Firestore collection.

Admin forms write straight through this; there is no other validation
layer between the API models and the documents.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from vaqmas.core.errors import NotFoundError


def _with_id(doc) -> dict[str, Any]:
    data = doc.to_dict() or {}
    data["id"] = doc.id
    return data


class FirestoreCollection:
    def __init__(self, db, name: str):
        self.db = db
        self.name = name

    @property
    def ref(self):
        return self.db.collection(self.name)

    def list(
        self,
        order_by: Optional[str] = None,
        descending: bool = True,
        limit: Optional[int] = None,
        filters: Optional[list[tuple[str, str, Any]]] = None,
    ) -> list[dict[str, Any]]:
        q = self.ref
        for field, op, value in filters or []:
            q = q.where(field, op, value)
        if order_by:
            q = q.order_by(order_by, direction="DESCENDING" if descending else "ASCENDING")
        if limit:
            q = q.limit(limit)
        return [_with_id(d) for d in q.stream()]

    def get(self, doc_id: str) -> dict[str, Any]:
        doc = self.ref.document(doc_id).get()
        if not doc.exists:
            raise NotFoundError(self.name, doc_id)
        return _with_id(doc)

    def create(self, data: dict[str, Any], doc_id: Optional[str] = None) -> dict[str, Any]:
        payload = {**data, "createdAt": datetime.now(timezone.utc)}
        if doc_id:
            doc_ref = self.ref.document(doc_id)
            doc_ref.set(payload)
        else:
            _, doc_ref = self.ref.add(payload)
        return {**payload, "id": doc_ref.id}

    def update(self, doc_id: str, data: dict[str, Any]) -> dict[str, Any]:
        doc_ref = self.ref.document(doc_id)
        if not doc_ref.get().exists:
            raise NotFoundError(self.name, doc_id)
        doc_ref.set(data, merge=True)
        return self.get(doc_id)

    def delete(self, doc_id: str) -> dict[str, Any]:
        """Deletes the document and returns what it held."""
        existing = self.get(doc_id)
        self.ref.document(doc_id).delete()
        return existing
