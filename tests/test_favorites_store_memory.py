import unittest

from citytemp.favorites_store.memory import InMemoryFavoritesStore


class TestInMemoryFavoritesStore(unittest.TestCase):
    def test_add_keeps_insertion_order_and_dedupes(self):
        store = InMemoryFavoritesStore()
        store.add("Berlin")
        store.add("Hamburg")
        self.assertEqual(store.add("Berlin"), ["Berlin", "Hamburg"])
        self.assertEqual(store.list(), ["Berlin", "Hamburg"])

    def test_remove_missing_is_noop(self):
        store = InMemoryFavoritesStore()
        store.add("Berlin")
        self.assertEqual(store.remove("Köln"), ["Berlin"])
        self.assertEqual(store.remove("Berlin"), [])

    def test_list_returns_copy(self):
        store = InMemoryFavoritesStore()
        store.add("Berlin")
        store.list().append("Mutated")
        self.assertEqual(store.list(), ["Berlin"])

    def test_clear(self):
        store = InMemoryFavoritesStore()
        store.add("Berlin")
        store.clear()
        self.assertEqual(store.list(), [])


if __name__ == "__main__":
    unittest.main()
