"""Widgets module for the KubeDeploy TUI.

- feedback: Confirmation and message dialogs
"""

from kubedeploy.widgets.feedback import ConfirmDialog, MessageDialog

__all__ = [
    "ConfirmDialog",
    "MessageDialog",
]
