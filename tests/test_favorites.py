import unittest

from citytemp import favorites
from citytemp.errors import ValidationError


class TestFavorites(unittest.TestCase):
    def setUp(self):
        favorites.use_in_memory_store_for_tests()

    def test_add_validates_and_trims(self):
        self.assertEqual(favorites.add_favorite("  Groß-Gerau "), ["Groß-Gerau"])
        with self.assertRaises(ValidationError):
            favorites.add_favorite("<b>")
        self.assertEqual(favorites.list_favorites(), ["Groß-Gerau"])

    def test_remove_and_clear(self):
        favorites.add_favorite("Berlin")
        favorites.add_favorite("Bremen")
        self.assertEqual(favorites.remove_favorite(" Berlin "), ["Bremen"])
        favorites.clear_favorites()
        self.assertEqual(favorites.list_favorites(), [])


if __name__ == "__main__":
    unittest.main()
