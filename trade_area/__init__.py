"""
Core package for the trade area dashboard application.

Submodules provide the location catalog, comparison and detail projections,
the view controller, and user interface rendering helpers that are
orchestrated by the top-level `app.py`.
"""
