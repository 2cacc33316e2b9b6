"""Tests for browse/search navigation transitions.

Every transition must reset the revealed-row limit; search is cleared by
folder navigation and root selection.
"""

from __future__ import annotations

import unittest

from archivenav.runtime import MODE_BROWSE, MODE_SEARCH, NavigationState, RootRegistry
from archivenav.search import SCOPE_GLOBAL, SCOPE_LOCAL


def _state() -> NavigationState:
    return NavigationState(RootRegistry(custom=["Entrevistas"]), page_size=10)


class NavigationStateTests(unittest.TestCase):
    def test_starts_browsing_first_fixed_root(self) -> None:
        state = _state()
        self.assertEqual(state.active_root, "Música 1")
        self.assertEqual(state.current_path, "")
        self.assertEqual(state.mode, MODE_BROWSE)
        self.assertEqual(state.target_path, "Música 1")
        self.assertEqual(state.render_limit, 10)

    def test_set_query_enters_search_and_blank_returns_to_browse(self) -> None:
        state = _state()
        state.set_query("trova")
        self.assertEqual(state.mode, MODE_SEARCH)
        self.assertEqual(state.scope, SCOPE_LOCAL)

        state.set_scope(SCOPE_GLOBAL)
        state.set_query("son")
        self.assertEqual(state.scope, SCOPE_GLOBAL)

        state.set_query("   ")
        self.assertEqual(state.mode, MODE_BROWSE)
        self.assertEqual(state.query, "")
        self.assertEqual(state.scope, SCOPE_LOCAL)

    def test_set_scope_is_ignored_while_browsing(self) -> None:
        state = _state()
        self.assertFalse(state.set_scope(SCOPE_GLOBAL))
        self.assertEqual(state.scope, SCOPE_LOCAL)
        with self.assertRaises(ValueError):
            state.set_scope("galaxy")

    def test_navigate_into_clears_search_and_rederives_root(self) -> None:
        state = _state()
        state.set_query("trova")
        state.set_scope(SCOPE_GLOBAL)

        state.navigate_into("musica 2/Trova Nueva")

        self.assertEqual(state.mode, MODE_BROWSE)
        self.assertEqual(state.scope, SCOPE_LOCAL)
        self.assertEqual(state.active_root, "Música 2")
        self.assertEqual(state.current_path, "musica 2/Trova Nueva")

    def test_navigate_into_custom_root_folder(self) -> None:
        state = _state()
        state.navigate_into("Entrevistas/2024")
        self.assertEqual(state.active_root, "Entrevistas")

    def test_navigate_into_unregistered_root_uses_first_segment(self) -> None:
        state = _state()
        state.navigate_into("Archivo Viejo/Cintas")
        self.assertEqual(state.active_root, "Archivo Viejo")
        self.assertTrue(state.current_path.startswith(state.active_root))

    def test_navigate_up_drops_segments_then_clears(self) -> None:
        state = _state()
        state.navigate_into("Música 1/Trova/Clasicos")

        self.assertTrue(state.navigate_up())
        self.assertEqual(state.current_path, "Música 1/Trova")
        self.assertTrue(state.navigate_up())
        self.assertEqual(state.current_path, "Música 1")
        self.assertTrue(state.navigate_up())
        self.assertEqual(state.current_path, "")
        self.assertFalse(state.navigate_up())

    def test_navigate_up_is_invalid_while_searching(self) -> None:
        state = _state()
        state.navigate_into("Música 1/Trova")
        state.set_query("x")
        self.assertFalse(state.navigate_up())
        self.assertEqual(state.current_path, "Música 1/Trova")

    def test_select_root_always_resets(self) -> None:
        state = _state()
        state.navigate_into("Música 1/Trova")
        state.set_query("x")
        state.pagination.render_limit = 30

        state.select_root("Música 1")

        self.assertEqual(state.active_root, "Música 1")
        self.assertEqual(state.current_path, "")
        self.assertEqual(state.query, "")
        self.assertEqual(state.render_limit, 10)

    def test_every_transition_resets_render_limit(self) -> None:
        state = _state()
        transitions = [
            lambda: state.navigate_into("Música 1/Trova"),
            lambda: state.set_query("son"),
            lambda: state.set_scope(SCOPE_GLOBAL),
            lambda: state.set_query(""),
            lambda: state.navigate_up(),
            lambda: state.select_root("Música 3"),
        ]
        for transition in transitions:
            state.pagination.render_limit = 40
            transition()
            self.assertEqual(state.render_limit, 10)

    def test_rename_root_follows_active_root(self) -> None:
        state = _state()
        state.navigate_into("Entrevistas/2024")
        state.rename_root("Entrevistas", "Charlas")
        self.assertEqual(state.active_root, "Charlas")
        self.assertEqual(state.current_path, "Charlas/2024")

        state.rename_root("Música 4", "Otra")
        self.assertEqual(state.active_root, "Charlas")

    def test_sync_roots_falls_back_when_active_root_removed(self) -> None:
        state = _state()
        state.select_root("Entrevistas")
        state.roots.remove_custom("Entrevistas")
        state.sync_roots()
        self.assertEqual(state.active_root, "Música 1")


if __name__ == "__main__":
    unittest.main()
