"""
Top-level package for the catalog browser.

A searchable, filterable, sortable table over a fixed catalog of records.
Most code should import from submodules such as:
    catalog_browser.core
    catalog_browser.services
    catalog_browser.ui
"""

__all__: list[str] = []
