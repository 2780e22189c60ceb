import unittest

from songbook.ids import IdGenerator
from songbook.models import Track, compare, sort_tracks


class TestOrdering(unittest.TestCase):
    def setUp(self) -> None:
        self.ids = IdGenerator()

    def _track(self, title: str, rating: int) -> Track:
        return Track.create(title, "Artist", 100, rating, ids=self.ids)

    def test_rating_descending_then_title(self) -> None:
        low = self._track("Alpha", 3)
        b = self._track("Beta", 5)
        a = self._track("Alpha", 5)
        ordered = sort_tracks([low, b, a])
        self.assertEqual(ordered, [a, b, low])
        self.assertEqual(sorted([low, b, a]), [a, b, low])

    def test_equal_title_falls_back_to_id(self) -> None:
        first = self._track("Same", 4)
        second = self._track("Same", 4)
        self.assertLess(compare(first, second), 0)
        self.assertGreater(compare(second, first), 0)
        self.assertEqual(sort_tracks([second, first]), [first, second])

    def test_compare_is_irreflexive(self) -> None:
        track = self._track("Solo", 2)
        self.assertEqual(compare(track, track), 0)
        self.assertFalse(track < track)

    def test_title_comparison_is_case_sensitive(self) -> None:
        upper = self._track("Zebra", 3)
        lower = self._track("apple", 3)
        self.assertLess(compare(upper, lower), 0)

    def test_sort_key_agrees_with_compare(self) -> None:
        tracks = [
            self._track("C", 2),
            self._track("A", 2),
            self._track("B", 5),
            self._track("A", 1),
            self._track("A", 2),
        ]
        for x in tracks:
            for y in tracks:
                with self.subTest(x=x.id, y=y.id):
                    by_key = (x.sort_key() > y.sort_key()) - (x.sort_key() < y.sort_key())
                    self.assertEqual(by_key, (compare(x, y) > 0) - (compare(x, y) < 0))

    def test_lt_with_other_types(self) -> None:
        track = self._track("X", 3)
        with self.assertRaises(TypeError):
            track < 5  # noqa: B015

    def test_sort_tracks_returns_new_list(self) -> None:
        tracks = [self._track("B", 1), self._track("A", 1)]
        ordered = sort_tracks(tracks)
        self.assertIsNot(ordered, tracks)
        self.assertEqual([t.title for t in tracks], ["B", "A"])
        self.assertEqual([t.title for t in ordered], ["A", "B"])


if __name__ == "__main__":
    unittest.main()
