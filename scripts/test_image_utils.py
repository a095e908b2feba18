import unittest
from types import SimpleNamespace
from unittest import mock

import requests
from firebase_fakes import FakeBucket

from vaqmas.services.image_utils import (
    delete_product_image,
    get_fallback_image,
    get_image_url,
    get_storage_bucket,
    is_image_accessible,
    resolve_folder,
)


class TestResolveFolder(unittest.TestCase):
    def test_known_types(self):
        cases = {
            "vaccine": "products",
            "vaccines": "products",
            " Vaccine ": "products",
            "bundle": "bundles",
            "BUNDLES": "bundles",
            "package": "packages",
            "packages": "packages",
        }
        for type_, folder in cases.items():
            with self.subTest(type=type_):
                self.assertEqual(resolve_folder(type_), folder)

    def test_unknown_type_is_used_as_folder(self):
        self.assertEqual(resolve_folder("foo"), "foo")
        self.assertEqual(resolve_folder("Promos"), "promos")

    def test_absent_type(self):
        self.assertEqual(resolve_folder(None), "general")
        self.assertEqual(resolve_folder(""), "general")
        self.assertEqual(resolve_folder("   "), "general")


class TestFallbackImage(unittest.TestCase):
    def test_by_type(self):
        self.assertEqual(get_fallback_image("vaccine"), "💉")
        self.assertEqual(get_fallback_image("bundle"), "📦")
        self.assertEqual(get_fallback_image("package"), "📦")

    def test_default(self):
        self.assertEqual(get_fallback_image(), "💊")
        self.assertEqual(get_fallback_image(None), "💊")
        self.assertEqual(get_fallback_image("foo"), "💊")


class TestGetImageUrl(unittest.TestCase):
    def setUp(self):
        self.bucket = FakeBucket("vaqmas-test.appspot.com")

    def test_download_token_url(self):
        self.bucket.put("products/12 meses.jpg", token="tok-1,tok-2")
        url = get_image_url(self.bucket, "12 meses.jpg", "vaccine")
        self.assertEqual(
            url,
            "https://firebasestorage.googleapis.com/v0/b/vaqmas-test.appspot.com/o/"
            "products%2F12%20meses.jpg?alt=media&token=tok-1",
        )

    def test_signed_url_without_token(self):
        self.bucket.put("bundles/kit.png")
        url = get_image_url(self.bucket, "kit.png", "bundle", ttl_minutes=15)
        self.assertTrue(url.startswith("https://storage.googleapis.com/vaqmas-test.appspot.com/bundles/kit.png"))
        self.assertIn("X-Goog-Expires=900", url)

    def test_path_components_are_stripped(self):
        self.bucket.put("packages/plan.jpg", token="t")
        url = get_image_url(self.bucket, "old/folder/plan.jpg ", "package")
        self.assertIn("packages%2Fplan.jpg", url)

    def test_unknown_and_absent_types(self):
        self.bucket.put("foo/a.jpg", token="t")
        self.bucket.put("general/b.jpg", token="t")
        self.assertIn("foo%2Fa.jpg", get_image_url(self.bucket, "a.jpg", "foo"))
        self.assertIn("general%2Fb.jpg", get_image_url(self.bucket, "b.jpg"))

    def test_fallbacks_never_raise(self):
        self.bucket.put("products/secret.jpg", token="t")
        self.bucket.forbidden.add("products/secret.jpg")
        cases = [
            (self.bucket, None, "vaccine", "💉"),
            (self.bucket, "", "bundle", "📦"),
            (self.bucket, 42, "package", "📦"),
            (self.bucket, "dir/", "vaccine", "💉"),
            (self.bucket, "missing.jpg", "vaccine", "💉"),
            (self.bucket, "secret.jpg", "vaccine", "💉"),
            (self.bucket, "missing.jpg", None, "💊"),
            (None, "a.jpg", "bundle", "📦"),
        ]
        for bucket, name, type_, expected in cases:
            with self.subTest(name=name, type=type_):
                self.assertEqual(get_image_url(bucket, name, type_), expected)

    def test_malformed_type_does_not_raise(self):
        self.bucket.put("5/a.jpg", token="t")
        self.assertIn("5%2Fa.jpg", get_image_url(self.bucket, "a.jpg", 5))
        self.assertEqual(get_image_url(self.bucket, "missing.jpg", ["vaccine"]), "💊")
        self.assertEqual(get_image_url(self.bucket, None, {"type": "bundle"}), "💊")


class TestImageAccessible(unittest.TestCase):
    @mock.patch("vaqmas.services.image_utils.requests.head")
    def test_ok(self, head):
        head.return_value = mock.Mock(ok=True)
        self.assertTrue(is_image_accessible("https://cdn.example.com/a.jpg"))
        head.assert_called_once_with("https://cdn.example.com/a.jpg", timeout=5.0, allow_redirects=True)

    @mock.patch("vaqmas.services.image_utils.requests.head")
    def test_not_found(self, head):
        head.return_value = mock.Mock(ok=False)
        self.assertFalse(is_image_accessible("https://cdn.example.com/a.jpg"))

    @mock.patch("vaqmas.services.image_utils.requests.head")
    def test_network_error(self, head):
        head.side_effect = requests.ConnectionError("boom")
        self.assertFalse(is_image_accessible("https://cdn.example.com/a.jpg"))

    def test_empty_url(self):
        self.assertFalse(is_image_accessible(""))


class TestDeleteProductImage(unittest.TestCase):
    def setUp(self):
        self.bucket = FakeBucket()
        self.bucket.put("bundles/kit.png")

    def test_deletes_from_type_folder(self):
        self.assertTrue(delete_product_image(self.bucket, "kit.png", "bundle"))
        self.assertNotIn("bundles/kit.png", self.bucket.objects)

    def test_skips_inline_and_empty(self):
        self.assertFalse(delete_product_image(self.bucket, "data:image/png;base64,AAAA", "bundle"))
        self.assertFalse(delete_product_image(self.bucket, "", "bundle"))
        self.assertFalse(delete_product_image(self.bucket, None, "bundle"))
        self.assertIn("bundles/kit.png", self.bucket.objects)

    def test_missing_object_is_not_an_error(self):
        self.assertFalse(delete_product_image(self.bucket, "gone.png", "vaccine"))


class TestStorageBucket(unittest.TestCase):
    def test_prefers_initialized_bucket(self):
        context = SimpleNamespace(bucket=FakeBucket("live.appspot.com"), settings=SimpleNamespace(FIREBASE_STORAGE_BUCKET="cfg.appspot.com"))
        self.assertEqual(get_storage_bucket(context), "live.appspot.com")

    def test_falls_back_to_settings(self):
        context = SimpleNamespace(bucket=None, settings=SimpleNamespace(FIREBASE_STORAGE_BUCKET="cfg.appspot.com"))
        self.assertEqual(get_storage_bucket(context), "cfg.appspot.com")
        context.settings.FIREBASE_STORAGE_BUCKET = ""
        self.assertEqual(get_storage_bucket(context), "")


if __name__ == "__main__":
    unittest.main()
