"""Reusable screen mixins."""

from kubedeploy.screens.mixins.worker_mixin import WorkerMixin

__all__ = ["WorkerMixin"]
