import pytest

from web_automation.browser.errors import NoActivePageError, TabExistsError, TabNotFoundError
from web_automation.browser.tabs import TabRegistry


class TestTabRegistry:
    def test_empty_registry_has_no_active_page(self):
        registry = TabRegistry()
        assert len(registry) == 0
        assert registry.active_id is None
        with pytest.raises(NoActivePageError) as exc:
            registry.active_page
        assert str(exc.value) == "No browser is running. Please launch a browser first."

    def test_first_tab_becomes_active(self):
        registry = TabRegistry()
        page = object()
        registry.add("main", page)
        assert registry.active_id == "main"
        assert registry.active_page is page

    def test_adding_tab_keeps_active_pointer(self):
        registry = TabRegistry()
        registry.add("main", "page-main")
        registry.add("t2", "page-t2")
        assert registry.active_id == "main"
        assert registry.ids() == ["main", "t2"]

    def test_duplicate_id_rejected(self):
        registry = TabRegistry()
        registry.add("main", "first")
        with pytest.raises(TabExistsError):
            registry.add("main", "second")
        assert registry.active_page == "first"

    def test_new_ids_do_not_collide(self):
        registry = TabRegistry()
        first = registry.new_id()
        second = registry.new_id()
        assert first != second
        assert first.startswith("tab_")
        assert second.startswith("tab_")

    def test_activate(self):
        registry = TabRegistry()
        registry.add("main", "page-main")
        registry.add("t2", "page-t2")
        registry.activate("t2")
        assert registry.active_id == "t2"
        assert registry.active_page == "page-t2"

    def test_activate_missing_keeps_pointer(self):
        registry = TabRegistry()
        registry.add("main", "page-main")
        with pytest.raises(TabNotFoundError) as exc:
            registry.activate("missing")
        assert str(exc.value) == "Tab missing not found"
        assert registry.active_id == "main"

    def test_remove_active_falls_back_to_remaining(self):
        registry = TabRegistry()
        registry.add("main", "page-main")
        registry.add("t2", "page-t2")
        registry.activate("t2")
        registry.remove("t2")
        assert registry.active_id == "main"

    def test_remove_inactive_keeps_pointer(self):
        registry = TabRegistry()
        registry.add("main", "page-main")
        registry.add("t2", "page-t2")
        registry.remove("t2")
        assert registry.active_id == "main"
        assert "t2" not in registry

    def test_remove_last_clears_pointer(self):
        registry = TabRegistry()
        registry.add("main", "page-main")
        registry.remove("main")
        assert registry.active_id is None
        with pytest.raises(NoActivePageError):
            registry.active_page

    def test_remove_missing(self):
        registry = TabRegistry()
        with pytest.raises(TabNotFoundError):
            registry.remove("nope")

    def test_pointer_refers_to_registered_tab(self):
        registry = TabRegistry()
        for tab_id in ("a", "b", "c"):
            registry.add(tab_id, tab_id)
        registry.activate("b")
        for tab_id in ("b", "a"):
            registry.remove(tab_id)
            assert registry.active_id in registry

    def test_clear(self):
        registry = TabRegistry()
        registry.add("main", "page-main")
        registry.add("t2", "page-t2")
        removed = registry.clear()
        assert [tab.id for tab in removed] == ["main", "t2"]
        assert len(registry) == 0
        assert registry.active_id is None

    def test_to_dict(self):
        registry = TabRegistry()
        registry.add("main", "page-main")
        d = registry.to_dict()
        assert d["active"] == "main"
        assert d["tabs"][0]["id"] == "main"
