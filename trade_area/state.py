"""
View state for the dashboard: which view is showing and which location is
selected for drill-down.

`ViewController` is plain Python so it can be driven directly in tests;
`get_controller` binds one instance to each Streamlit session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

import streamlit as st

from trade_area.config import DETAILS_TAB, OVERVIEW_TAB, STATE_PREFIX
from trade_area.data.catalog import Catalog, InvalidLocation, LocationRecord

logger = logging.getLogger(__name__)

CONTROLLER_STATE_KEY = f"{STATE_PREFIX}view_controller"


class View(str, Enum):
    OVERVIEW = OVERVIEW_TAB
    DETAIL = DETAILS_TAB


@dataclass(frozen=True)
class ViewState:
    active_view: View = View.OVERVIEW
    selected_location_id: Optional[str] = None


class ViewController:
    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._state = ViewState()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def active_view(self) -> View:
        return self._state.active_view

    @property
    def selected_location_id(self) -> Optional[str]:
        return self._state.selected_location_id

    def _transition(self, new_state: ViewState) -> None:
        if new_state != self._state:
            logger.debug("View transition %s -> %s", self._state, new_state)
        self._state = new_state

    def select_overview(self) -> None:
        self._transition(ViewState(active_view=View.OVERVIEW, selected_location_id=None))

    def select_detail_tab(self) -> None:
        selected = self._state.selected_location_id
        if selected is None and self._catalog.first is not None:
            selected = self._catalog.first.id
        self._transition(ViewState(active_view=View.DETAIL, selected_location_id=selected))

    def select_location(self, location_id: str) -> bool:
        """Select a location and switch to the detail view.

        Unknown ids leave the state untouched and return False.
        """
        try:
            record = self._catalog.get(location_id)
        except InvalidLocation as exc:
            logger.warning("Ignoring selection: %s", exc)
            return False
        self._transition(replace(self._state, active_view=View.DETAIL, selected_location_id=record.id))
        return True

    def navigate(self, tab_key: str) -> None:
        if tab_key == View.OVERVIEW.value:
            self.select_overview()
        elif tab_key == View.DETAIL.value:
            self.select_detail_tab()
        else:
            logger.warning("Ignoring navigation to unknown tab %r", tab_key)

    def current_detail_location(self) -> Optional[LocationRecord]:
        """Selected record, or the first catalog entry when nothing is selected."""
        selected = self._state.selected_location_id
        if selected is not None and selected in self._catalog:
            return self._catalog.get(selected)
        return self._catalog.first


def get_controller(catalog: Catalog) -> ViewController:
    """Return this session's controller, creating it on first use.

    A controller built against a different catalog (e.g. after the catalog
    path changed) is replaced rather than reused.
    """
    controller = st.session_state.get(CONTROLLER_STATE_KEY)
    if not isinstance(controller, ViewController) or controller.catalog is not catalog:
        controller = ViewController(catalog)
        st.session_state[CONTROLLER_STATE_KEY] = controller
    return controller
