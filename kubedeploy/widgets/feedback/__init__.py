"""Feedback widgets: modal dialogs."""

from kubedeploy.widgets.feedback.dialogs import ConfirmDialog, MessageDialog

__all__ = ["ConfirmDialog", "MessageDialog"]
