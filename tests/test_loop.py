from __future__ import annotations

import unittest

from sitesearch.core.site_context import SiteSwitcher
from sitesearch.query.loop import iter_documents, site_scope
from sitesearch.query.models import ResultHit, SearchArgs
from sitesearch.query.session import SiteSearchQuery
from tests.fakes import FakeResolver, FakeTransport, make_hits


def _query(hits, *, cross_site: bool = True) -> SiteSearchQuery:
    args = SearchArgs(page_size=10, cross_site=cross_site, current_site_id=None if cross_site else 1)
    return SiteSearchQuery(args, FakeTransport(hits))


class SiteSwitcherTestCase(unittest.TestCase):
    def test_switch_and_restore(self) -> None:
        ctx = SiteSwitcher(1)
        ctx.switch_to(2)
        ctx.switch_to(3)
        self.assertEqual(ctx.current_site_id, 3)
        self.assertEqual(ctx.depth, 2)

        ctx.restore_previous()
        self.assertEqual(ctx.current_site_id, 2)
        ctx.restore_previous()
        self.assertEqual(ctx.current_site_id, 1)

    def test_restore_without_switch_is_noop(self) -> None:
        ctx = SiteSwitcher(5)
        ctx.restore_previous()
        self.assertEqual(ctx.current_site_id, 5)
        self.assertEqual(ctx.depth, 0)


class SiteScopeTestCase(unittest.TestCase):
    def test_switches_only_for_other_site(self) -> None:
        ctx = SiteSwitcher(1)
        with site_scope(ctx, ResultHit(site_id=1, post_id=1), cross_site=True) as active:
            self.assertEqual(active, 1)
            self.assertEqual(ctx.depth, 0)

        with site_scope(ctx, ResultHit(site_id=2, post_id=1), cross_site=True) as active:
            self.assertEqual(active, 2)
        self.assertEqual(ctx.current_site_id, 1)

    def test_restores_on_exception(self) -> None:
        ctx = SiteSwitcher(1)
        with self.assertRaises(RuntimeError):
            with site_scope(ctx, ResultHit(site_id=7, post_id=1), cross_site=True):
                raise RuntimeError("render failed")
        self.assertEqual(ctx.current_site_id, 1)
        self.assertEqual(ctx.depth, 0)

    def test_no_switch_when_scoped_to_one_site(self) -> None:
        ctx = SiteSwitcher(1)
        with site_scope(ctx, ResultHit(site_id=2, post_id=1), cross_site=False) as active:
            self.assertEqual(active, 1)


class IterDocumentsTestCase(unittest.TestCase):
    def test_resolves_each_hit_in_its_site(self) -> None:
        ctx = SiteSwitcher(1)
        resolver = FakeResolver(ctx)
        query = _query(make_hits((1, 10), (2, 20), (3, 30), (1, 40)))

        pairs = list(iter_documents(query, resolver, ctx))

        self.assertEqual([hit.post_id for hit, _ in pairs], [10, 20, 30, 40])
        self.assertEqual([doc.title for _, doc in pairs], ["post 1/10", "post 2/20", "post 3/30", "post 1/40"])
        self.assertEqual(resolver.calls, [(1, 10, 1), (2, 20, 2), (3, 30, 3), (1, 40, 1)])
        self.assertEqual(ctx.current_site_id, 1)
        self.assertEqual(ctx.depth, 0)
        self.assertFalse(query.in_the_loop)

    def test_early_break_leaves_site_restored(self) -> None:
        ctx = SiteSwitcher(1)
        query = _query(make_hits((2, 20), (3, 30)))

        for hit, _ in iter_documents(query, FakeResolver(ctx), ctx):
            self.assertEqual(hit.site_id, 2)
            break

        self.assertEqual(ctx.current_site_id, 1)
        self.assertEqual(ctx.depth, 0)
        self.assertTrue(query.has_more())

    def test_resolver_error_propagates_and_restores(self) -> None:
        ctx = SiteSwitcher(1)
        query = _query(make_hits((1, 10), (2, 20)))

        with self.assertRaises(LookupError):
            list(iter_documents(query, FakeResolver(ctx, fail_on=20), ctx))

        self.assertEqual(ctx.current_site_id, 1)
        self.assertEqual(ctx.depth, 0)

    def test_deleted_document_is_skipped(self) -> None:
        ctx = SiteSwitcher(1)
        resolver = FakeResolver(ctx, missing={20})
        query = _query(make_hits((1, 10), (2, 20), (3, 30)))

        pairs = list(iter_documents(query, resolver, ctx))

        self.assertEqual([hit.post_id for hit, _ in pairs], [10, 30])
        self.assertEqual(len(resolver.calls), 3)
        self.assertEqual(ctx.current_site_id, 1)
        self.assertEqual(ctx.depth, 0)

    def test_single_site_never_switches(self) -> None:
        ctx = SiteSwitcher(1)
        resolver = FakeResolver(ctx)
        query = _query(make_hits((1, 10), (1, 11)), cross_site=False)

        list(iter_documents(query, resolver, ctx))
        self.assertEqual(resolver.calls, [(1, 10, 1), (1, 11, 1)])

    def test_empty_result_yields_nothing(self) -> None:
        ctx = SiteSwitcher(1)
        self.assertEqual(list(iter_documents(_query([]), FakeResolver(ctx), ctx)), [])


if __name__ == "__main__":
    unittest.main()
