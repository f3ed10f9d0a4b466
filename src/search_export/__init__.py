"""
search_export – "Download as Excel" action for saved-search dashboard panels.

Import path convention::

    from search_export.application.actions import ExcelReportPanelAction
    from search_export.plugin import SavedSearchExcelExportPlugin, build_core
    from search_export.kernel.errors import IncompatibleActionError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
