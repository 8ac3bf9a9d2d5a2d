"""Utility functions and classes for KubeDeploy TUI.

The synchronization layer is imported from
:mod:`kubedeploy.utils.sync_manager` directly; it depends on the controllers
package, which in turn uses the clocks exported here.
"""

from kubedeploy.utils.clock import Clock, ManualClock, MonotonicClock

__all__ = [
    # Clocks
    "Clock",
    "ManualClock",
    "MonotonicClock",
]
