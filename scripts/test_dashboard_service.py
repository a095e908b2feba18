import unittest
from datetime import datetime, timedelta, timezone

from firebase_fakes import FakeFirestore

from vaqmas.services.dashboard_service import build_activity_feed, build_dashboard

# Wednesday
NOW = datetime(2026, 10, 14, 15, 30, tzinfo=timezone.utc)


def _seed():
    data = {
        "users": {},
        "pediatricians": {"p1": {"email": "p1@example.com"}, "p2": {"email": "p2@example.com"}},
        "products": {f"prod{i}": {"type": "vaccine", "name": f"V{i}"} for i in range(4)},
        "appointments": {},
        "articles": {"a1": {"title": "Hola"}},
        "locations": {"l1": {"name": "Norte"}, "l2": {"name": "Sur"}, "l3": {"name": "Centro"}},
    }
    appointment_times = [
        NOW.replace(hour=9),                 # today
        NOW.replace(hour=23, minute=59),     # today
        NOW - timedelta(days=2),             # monday, this week
        NOW + timedelta(days=4),             # sunday, this week
        NOW - timedelta(days=3),             # last sunday
        NOW + timedelta(days=5),             # next monday
    ]
    for i, when in enumerate(appointment_times):
        data["appointments"][f"ap{i}"] = {
            "patientName": f"Paciente {i}",
            "locationName": "Norte",
            "dateTime": when,
            "status": "scheduled",
            "createdAt": NOW - timedelta(hours=2 * i + 1),
        }
    for i in range(5):
        data["users"][f"u{i}"] = {
            "email": f"u{i}@example.com",
            "displayName": f"Usuario {i}",
            "createdAt": NOW - timedelta(hours=2 * i),
        }
    return data


class TestBuildDashboard(unittest.TestCase):
    def setUp(self):
        self.db = FakeFirestore(_seed())

    def test_counts_match_collections(self):
        counts = build_dashboard(self.db, now=NOW).counts
        self.assertEqual(counts.users, 5)
        self.assertEqual(counts.pediatricians, 2)
        self.assertEqual(counts.products, 4)
        self.assertEqual(counts.appointments, 6)
        self.assertEqual(counts.articles, 1)
        self.assertEqual(counts.locations, 3)

    def test_range_counts(self):
        counts = build_dashboard(self.db, now=NOW).counts
        self.assertEqual(counts.appointments_today, 2)
        self.assertEqual(counts.appointments_this_week, 4)

    def test_recent_lists_are_newest_first_and_limited(self):
        summary = build_dashboard(self.db, now=NOW, recent_limit=3)
        self.assertEqual([a["id"] for a in summary.recent_appointments], ["ap0", "ap1", "ap2"])
        self.assertEqual([u["id"] for u in summary.recent_users], ["u0", "u1", "u2"])

    def test_activity_feed_interleaves_both_kinds(self):
        activity = build_dashboard(self.db, now=NOW).activity
        self.assertEqual(len(activity), 8)
        self.assertEqual([a.id for a in activity[:4]], ["u0", "ap0", "u1", "ap1"])
        self.assertEqual(activity[0].title, "Nuevo usuario: Usuario 0")
        self.assertEqual(activity[1].title, "Nueva cita: Paciente 0 en Norte")
        stamps = [a.timestamp for a in activity]
        self.assertEqual(stamps, sorted(stamps, reverse=True))

    def test_empty_store(self):
        summary = build_dashboard(FakeFirestore(), now=NOW)
        self.assertEqual(summary.counts.users, 0)
        self.assertEqual(summary.activity, [])

    def test_failed_query_propagates(self):
        self.db.fail("count", "articles")
        with self.assertRaises(Exception):
            build_dashboard(self.db, now=NOW)


class TestActivityFeed(unittest.TestCase):
    def _events(self, prefix, count, offset):
        return [
            {"id": f"{prefix}{i}", "createdAt": NOW - timedelta(minutes=offset + 10 * i)}
            for i in range(count)
        ]

    def test_size_is_capped(self):
        for n, m in [(0, 0), (3, 2), (5, 3), (10, 0), (6, 7)]:
            with self.subTest(n=n, m=m):
                feed = build_activity_feed(self._events("a", n, 0), self._events("u", m, 5))
                self.assertEqual(len(feed), min(n + m, 8))
                stamps = [f.timestamp for f in feed]
                self.assertEqual(stamps, sorted(stamps, reverse=True))

    def test_items_without_timestamp_are_dropped(self):
        feed = build_activity_feed([{"id": "a1"}], [{"id": "u1", "createdAt": None}, {"id": "u2", "createdAt": NOW}])
        self.assertEqual([f.id for f in feed], ["u2"])

    def test_naive_timestamps_are_treated_as_utc(self):
        naive = NOW.replace(tzinfo=None) + timedelta(minutes=1)
        feed = build_activity_feed([{"id": "a1", "createdAt": naive}], [{"id": "u1", "createdAt": NOW}])
        self.assertEqual([f.id for f in feed], ["a1", "u1"])

    def test_user_title_falls_back_to_email(self):
        feed = build_activity_feed([], [{"id": "u1", "email": "x@example.com", "createdAt": NOW}])
        self.assertEqual(feed[0].title, "Nuevo usuario: x@example.com")


if __name__ == "__main__":
    unittest.main()
