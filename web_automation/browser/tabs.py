"""
Tab registry: tab ids mapped to page handles, plus the active tab pointer.

Pure state with no engine calls. The registry never holds an active id that
is not registered, and never leaves the pointer empty while tabs remain.
"""
import itertools
from typing import Any, Dict, List, Optional

from .errors import NoActivePageError, TabExistsError, TabNotFoundError
from .models import Tab, generate_tab_id


class TabRegistry:
    """Tracks the open tabs of one browser session."""

    def __init__(self):
        self._tabs: Dict[str, Tab] = {}
        self._active_id: Optional[str] = None
        self._sequence = itertools.count(1)

    def __len__(self) -> int:
        return len(self._tabs)

    def __contains__(self, tab_id: str) -> bool:
        return tab_id in self._tabs

    @property
    def active_id(self) -> Optional[str]:
        return self._active_id

    @property
    def active_page(self) -> Any:
        """Page handle of the active tab.

        Raises:
            NoActivePageError: If no tab is active.
        """
        if self._active_id is None:
            raise NoActivePageError()
        return self._tabs[self._active_id].page

    def ids(self) -> List[str]:
        return list(self._tabs.keys())

    def new_id(self) -> str:
        """Return a tab id that is not registered and was never issued before."""
        while True:
            tab_id = generate_tab_id(next(self._sequence))
            if tab_id not in self._tabs:
                return tab_id

    def add(self, tab_id: str, page: Any) -> Tab:
        """Register a page. The first tab added to an empty pointer becomes active."""
        if tab_id in self._tabs:
            raise TabExistsError(tab_id)
        tab = Tab(id=tab_id, page=page, order=next(self._sequence))
        self._tabs[tab_id] = tab
        if self._active_id is None:
            self._active_id = tab_id
        return tab

    def get(self, tab_id: str) -> Tab:
        tab = self._tabs.get(tab_id)
        if tab is None:
            raise TabNotFoundError(tab_id)
        return tab

    def activate(self, tab_id: str) -> Tab:
        tab = self.get(tab_id)
        self._active_id = tab_id
        return tab

    def remove(self, tab_id: str) -> Tab:
        """Unregister a tab, moving the pointer to a remaining tab if it was active.

        Which remaining tab becomes active is arbitrary.
        """
        tab = self._tabs.pop(tab_id, None)
        if tab is None:
            raise TabNotFoundError(tab_id)
        if self._active_id == tab_id:
            self._active_id = next(iter(self._tabs), None)
        return tab

    def clear(self) -> List[Tab]:
        tabs = list(self._tabs.values())
        self._tabs.clear()
        self._active_id = None
        return tabs

    def to_dict(self) -> Dict[str, Any]:
        return {
            "active": self._active_id,
            "tabs": [tab.to_dict() for tab in self._tabs.values()],
        }
