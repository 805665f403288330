import trade_area.bootstrap_env  # must be first to set env/secrets and logging
import logging

import streamlit as st

from trade_area.data.catalog import CatalogError
from trade_area.data.loader import load_catalog, resolve_catalog_path
from trade_area.state import View, get_controller
from trade_area.ui.layout import render_capability_reference, render_navigation, setup_page
from trade_area.ui.pages import location_detail, overview
from trade_area.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

PAGE_RENDERERS = {
    View.OVERVIEW: overview.render,
    View.DETAIL: location_detail.render,
}


def main() -> None:
    setup_page()

    try:
        catalog = load_catalog()
    except (CatalogError, FileNotFoundError) as exc:
        logger.exception("Catalog load failed")
        st.error(f"Could not load the location catalog from {resolve_catalog_path()}: {exc}")
        st.stop()
        return

    controller = get_controller(catalog)
    render_navigation(controller, market=catalog.market)

    context = PageContext(catalog=catalog, controller=controller)
    renderer = PAGE_RENDERERS[controller.active_view]
    renderer(context)

    render_capability_reference(catalog)


if __name__ == "__main__":
    main()
