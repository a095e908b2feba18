"""In-memory stand-ins for the Firestore, Auth and Storage clients.

They implement only the calls the service makes, with the same
signatures and error types as firebase_admin / google-cloud.
"""
import copy
import itertools
import uuid
from datetime import datetime, timezone

from firebase_admin import auth
from google.api_core.exceptions import Forbidden, NotFound, ServiceUnavailable

_OPS = {
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
    "<": lambda a, b: a < b,
    "<=": lambda a, b: a <= b,
    ">": lambda a, b: a > b,
    ">=": lambda a, b: a >= b,
    "in": lambda a, b: a in b,
    "array-contains": lambda a, b: isinstance(a, list) and b in a,
}

_MISSING = object()


# -------------------------
# Firestore
# -------------------------
class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeAggregationResult:
    def __init__(self, value):
        self.alias = "field_1"
        self.value = value


class FakeAggregationQuery:
    def __init__(self, query):
        self._query = query

    def get(self):
        self._query._db._check("count", self._query._collection)
        return [[FakeAggregationResult(len(self._query._matching()))]]


class FakeQuery:
    def __init__(self, db, collection, filters=(), orders=(), limit=None):
        self._db = db
        self._collection = collection
        self._filters = tuple(filters)
        self._orders = tuple(orders)
        self._limit = limit

    def where(self, field, op, value):
        return FakeQuery(self._db, self._collection, self._filters + ((field, op, value),), self._orders, self._limit)

    def order_by(self, field, direction="ASCENDING"):
        return FakeQuery(self._db, self._collection, self._filters, self._orders + ((field, direction),), self._limit)

    def limit(self, count):
        return FakeQuery(self._db, self._collection, self._filters, self._orders, count)

    def count(self, alias=None):
        return FakeAggregationQuery(self)

    def _matching(self):
        docs = list(self._db.data.get(self._collection, {}).items())
        for field, op, value in self._filters:
            docs = [
                (i, d) for i, d in docs
                if d.get(field, _MISSING) is not _MISSING and _OPS[op](d[field], value)
            ]
        for field, direction in reversed(self._orders):
            # Firestore leaves out documents without the ordered field
            docs = [(i, d) for i, d in docs if field in d]
            docs.sort(key=lambda item: item[1][field], reverse=direction == "DESCENDING")
        if self._limit is not None:
            docs = docs[: self._limit]
        return docs

    def stream(self):
        self._db._check("read", self._collection)
        for doc_id, data in self._matching():
            yield FakeSnapshot(doc_id, copy.deepcopy(data))

    def get(self):
        return list(self.stream())


class FakeDocumentReference:
    def __init__(self, db, collection, doc_id):
        self._db = db
        self._collection = collection
        self.id = doc_id

    def _docs(self):
        return self._db.data.setdefault(self._collection, {})

    def get(self):
        self._db._check("read", self._collection)
        data = self._docs().get(self.id)
        return FakeSnapshot(self.id, copy.deepcopy(data) if data is not None else None)

    def set(self, data, merge=False):
        self._db._check("write", self._collection)
        docs = self._docs()
        if merge and self.id in docs:
            docs[self.id].update(copy.deepcopy(data))
        else:
            docs[self.id] = copy.deepcopy(data)

    def update(self, data):
        self._db._check("write", self._collection)
        if self.id not in self._docs():
            raise NotFound(f"No document to update: {self._collection}/{self.id}")
        self._docs()[self.id].update(copy.deepcopy(data))

    def delete(self):
        self._db._check("write", self._collection)
        self._docs().pop(self.id, None)


class FakeCollectionReference(FakeQuery):
    def __init__(self, db, name):
        super().__init__(db, name)

    def document(self, doc_id=None):
        return FakeDocumentReference(self._db, self._collection, doc_id or uuid.uuid4().hex[:20])

    def add(self, data):
        ref = self.document()
        ref.set(data)
        return datetime.now(timezone.utc), ref


class FakeFirestore:
    """`failing` maps an operation ("read", "write", "count") to the
    collection names on which it raises ServiceUnavailable."""

    def __init__(self, data=None):
        self.data = copy.deepcopy(data) if data else {}
        self.failing = {}

    def collection(self, name):
        return FakeCollectionReference(self, name)

    def fail(self, operation, collection):
        self.failing.setdefault(operation, set()).add(collection)

    def _check(self, operation, collection):
        if collection in self.failing.get(operation, ()):
            raise ServiceUnavailable(f"{operation} on {collection} unavailable")

    def doc(self, collection, doc_id):
        return self.data.get(collection, {}).get(doc_id)


# -------------------------
# Auth
# -------------------------
class FakeUserRecord:
    def __init__(self, uid, email=None, custom_claims=None):
        self.uid = uid
        self.email = email
        self.custom_claims = custom_claims


class FakeAuth:
    def __init__(self):
        self.users = {}
        self.tokens = {}
        self.claim_writes = []
        self._counter = itertools.count(1)

    def add_user(self, uid, email=None, claims=None):
        self.users[uid] = FakeUserRecord(uid, email, dict(claims) if claims else None)
        return self.users[uid]

    def issue_token(self, uid):
        """Mint a token carrying the user's claims as they are now."""
        user = self.users[uid]
        token = f"token-{uid}-{next(self._counter)}"
        self.tokens[token] = {"uid": uid, "email": user.email, **(user.custom_claims or {})}
        return token

    def verify_id_token(self, id_token):
        if id_token not in self.tokens:
            raise auth.InvalidIdTokenError("Token is not valid")
        return dict(self.tokens[id_token])

    def get_user(self, uid):
        if uid not in self.users:
            raise auth.UserNotFoundError(f"No user record found for the provided user ID: {uid}.")
        user = self.users[uid]
        return FakeUserRecord(user.uid, user.email, copy.deepcopy(user.custom_claims))

    def set_custom_user_claims(self, uid, custom_claims):
        if uid not in self.users:
            raise auth.UserNotFoundError(f"No user record found for the provided user ID: {uid}.")
        self.claim_writes.append((uid, copy.deepcopy(custom_claims)))
        self.users[uid].custom_claims = copy.deepcopy(custom_claims) if custom_claims else None

    def claims(self, uid):
        return self.users[uid].custom_claims or {}


# -------------------------
# Storage
# -------------------------
class FakeBlob:
    def __init__(self, bucket, name):
        self.bucket = bucket
        self.name = name
        self.metadata = None

    def reload(self):
        if self.name in self.bucket.forbidden:
            raise Forbidden(f"Permission denied on {self.name}")
        if self.name not in self.bucket.objects:
            raise NotFound(f"No such object: {self.bucket.name}/{self.name}")
        self.metadata = dict(self.bucket.objects[self.name])

    def generate_signed_url(self, expiration, version="v4"):
        return f"https://storage.googleapis.com/{self.bucket.name}/{self.name}?X-Goog-Expires={int(expiration.total_seconds())}"

    def delete(self):
        if self.name not in self.bucket.objects:
            raise NotFound(f"No such object: {self.bucket.name}/{self.name}")
        del self.bucket.objects[self.name]


class FakeBucket:
    def __init__(self, name="vaqmas-test.appspot.com"):
        self.name = name
        # path -> object metadata
        self.objects = {}
        self.forbidden = set()

    def put(self, path, token=None):
        self.objects[path] = {"firebaseStorageDownloadTokens": token} if token else {}

    def blob(self, name):
        return FakeBlob(self, name)
