import unittest

from vaqmas.services.notifications import NotificationCenter


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestNotificationCenter(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.center = NotificationCenter(clock=self.clock)

    def test_add_and_expire(self):
        self.center.success("Guardado")
        self.center.error("Falló", duration=10000)
        self.assertEqual([n.type for n in self.center.active()], ["success", "error"])

        self.clock.now += 5
        self.assertEqual([n.message for n in self.center.active()], ["Falló"])

        self.clock.now += 5
        self.assertEqual(self.center.active(), [])

    def test_sticky(self):
        self.center.warning("Revisar", duration=0)
        self.clock.now += 3600
        self.assertEqual(len(self.center.active()), 1)

    def test_add_prunes_expired_without_polling(self):
        for i in range(10):
            self.center.info(f"msg {i}")
        self.clock.now += 6
        self.center.success("nuevo")
        self.assertEqual([n.message for n in self.center._items], ["nuevo"])

    def test_size_is_capped(self):
        center = NotificationCenter(clock=self.clock, max_items=3)
        ids = [center.warning(f"sticky {i}", duration=0) for i in range(5)]
        self.assertEqual([n.id for n in center._items], ids[-3:])

    def test_remove_and_clear(self):
        keep = self.center.info("uno")
        drop = self.center.info("dos")
        self.center.remove(drop)
        self.assertEqual([n.id for n in self.center.active()], [keep])
        self.center.clear()
        self.assertEqual(self.center.active(), [])


if __name__ == "__main__":
    unittest.main()
