"""Endpoints screen module exports."""

from kubedeploy.screens.endpoints.endpoints_screen import EndpointsScreen
from kubedeploy.screens.endpoints.presenter import EndpointsPresenter

__all__ = ["EndpointsPresenter", "EndpointsScreen"]
