from __future__ import annotations

import unittest

from sitesearch.core.exceptions import OutOfRange
from sitesearch.query.cursor import CursorState, SiteResultCursor, needs_switch
from sitesearch.query.models import ResultHit
from tests.fakes import make_hits


class SiteResultCursorTestCase(unittest.TestCase):
    def test_empty_cursor(self) -> None:
        cursor = SiteResultCursor([])
        self.assertEqual(cursor.state, CursorState.before_start)
        self.assertFalse(cursor.has_more())
        self.assertEqual(cursor.state, CursorState.exhausted)
        with self.assertRaises(OutOfRange):
            cursor.advance()

    def test_three_hits(self) -> None:
        hits = make_hits((1, 10), (1, 11), (2, 12))
        cursor = SiteResultCursor(hits)

        seen = []
        for _ in range(3):
            self.assertTrue(cursor.has_more())
            seen.append(cursor.advance())
            self.assertTrue(cursor.in_the_loop)
            self.assertEqual(cursor.state, CursorState.iterating)

        self.assertEqual(seen, hits)
        self.assertEqual(cursor.current, hits[2])
        self.assertFalse(cursor.has_more())
        self.assertFalse(cursor.in_the_loop)
        self.assertEqual(cursor.state, CursorState.exhausted)
        with self.assertRaises(OutOfRange):
            cursor.advance()

    def test_has_more_is_idempotent(self) -> None:
        cursor = SiteResultCursor(make_hits((1, 1)))
        self.assertTrue(cursor.has_more())
        self.assertTrue(cursor.has_more())
        self.assertEqual(cursor.position, -1)

        cursor.advance()
        self.assertFalse(cursor.has_more())
        self.assertFalse(cursor.has_more())
        self.assertEqual(cursor.position, 0)

    def test_position_never_exceeds_hits(self) -> None:
        cursor = SiteResultCursor(make_hits((1, 1), (1, 2)))
        cursor.advance()
        cursor.advance()
        for _ in range(3):
            with self.assertRaises(OutOfRange):
                cursor.advance()
        self.assertEqual(cursor.position, 1)
        self.assertLessEqual(cursor.position, len(cursor))

    def test_current_before_start(self) -> None:
        self.assertIsNone(SiteResultCursor(make_hits((1, 1))).current)

    def test_position_never_decreases(self) -> None:
        cursor = SiteResultCursor(make_hits((1, 1), (2, 2), (3, 3)))
        positions = [cursor.position]
        while cursor.has_more():
            cursor.advance()
            positions.append(cursor.position)

        self.assertFalse(cursor.has_more())
        with self.assertRaises(OutOfRange):
            cursor.advance()
        positions.append(cursor.position)

        self.assertEqual(positions, [-1, 0, 1, 2, 2])
        self.assertEqual(positions, sorted(positions))


class NeedsSwitchTestCase(unittest.TestCase):
    def test_only_cross_site_with_different_site(self) -> None:
        hit = ResultHit(site_id=3, post_id=1)
        self.assertTrue(needs_switch(hit, 1, cross_site=True))
        self.assertFalse(needs_switch(hit, 3, cross_site=True))
        self.assertFalse(needs_switch(hit, 1, cross_site=False))


if __name__ == "__main__":
    unittest.main()
