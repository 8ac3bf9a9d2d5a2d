"""Exception hierarchy for KubeDeploy TUI.

Remote calls never raise for HTTP or transport failures; they return a
failed :class:`~kubedeploy.controllers.base.ApiResult`. Exceptions are kept
for programming errors and local state problems.
"""


class KubeDeployError(Exception):
    """Base exception for KubeDeploy errors."""


class FormValidationError(KubeDeployError):
    """Raised when form input cannot be turned into a request.

    ``messages`` holds one line per offending field.
    """

    def __init__(self, messages: list[str]) -> None:
        super().__init__("; ".join(messages))
        self.messages = messages
