"""Quick pod screen - create a single pod from a handful of fields."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Input, Label, Static

from kubedeploy.constants.values import PLACEHOLDER_ENV, PLACEHOLDER_IMAGE, PLACEHOLDER_NAME
from kubedeploy.errors import FormValidationError
from kubedeploy.keyboard import DEPLOY_SCREEN_BINDINGS
from kubedeploy.models.forms.deploy_form import QuickPodForm
from kubedeploy.screens.base_screen import BaseScreen
from kubedeploy.screens.deploy.config import QUICK_POD_ERRORS_ID, QUICK_POD_SUBMIT_ID
from kubedeploy.screens.deploy.presenter import DeployPresenter
from kubedeploy.utils.sync_manager import CachedView

_FIELDS: list[tuple[str, str]] = [
    ("quick-pod-name", "Name"),
    ("quick-pod-namespace", "Namespace"),
    ("quick-pod-image", "Image"),
    ("quick-pod-cpu", "CPU"),
    ("quick-pod-memory", "Memory"),
    ("quick-pod-ports", "Ports"),
    ("quick-pod-env", "Environment"),
]


class QuickPodScreen(BaseScreen):
    """Single-pod form; opens the pods list after a successful create."""

    BINDINGS = DEPLOY_SCREEN_BINDINGS

    def __init__(self) -> None:
        super().__init__()
        self.presenter = DeployPresenter()

    @property
    def screen_title(self) -> str:
        return "New Pod"

    def _defaults(self) -> dict[str, str]:
        form = QuickPodForm(namespace=self.state.settings.default_namespace)
        return {
            "quick-pod-name": "",
            "quick-pod-namespace": form.namespace,
            "quick-pod-image": "",
            "quick-pod-cpu": form.cpu,
            "quick-pod-memory": form.memory,
            "quick-pod-ports": "",
            "quick-pod-env": "",
        }

    def compose_content(self) -> ComposeResult:
        placeholders = {
            "quick-pod-name": PLACEHOLDER_NAME,
            "quick-pod-image": PLACEHOLDER_IMAGE,
            "quick-pod-ports": "80, 443",
            "quick-pod-env": PLACEHOLDER_ENV,
        }
        defaults = self._defaults()
        with VerticalScroll(id="base-content", classes="deploy-form"):
            yield Static("New pod", classes="screen-title")
            for widget_id, label in _FIELDS:
                with Vertical(classes="form-field"):
                    yield Label(label)
                    yield Input(
                        defaults[widget_id],
                        placeholder=placeholders.get(widget_id, ""),
                        id=widget_id,
                    )
            yield Static("", id=QUICK_POD_ERRORS_ID, classes="form-errors")
            with Horizontal(classes="form-buttons"):
                yield Button("Create", id=QUICK_POD_SUBMIT_ID, variant="primary")
                yield Button("Reset", id="quick-pod-reset")

    def render_view(self, view: CachedView) -> None:
        """The form observes no collections."""

    def _value(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}", Input).value

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == QUICK_POD_SUBMIT_ID:
            self.action_submit()
        elif event.button.id == "quick-pod-reset":
            self.action_reset_form()

    def action_submit(self) -> None:
        submit = self.query_one(f"#{QUICK_POD_SUBMIT_ID}", Button)
        if submit.disabled:
            return
        try:
            form = self.presenter.build_quick_pod_form(
                name=self._value("quick-pod-name"),
                namespace=self._value("quick-pod-namespace"),
                image=self._value("quick-pod-image"),
                cpu=self._value("quick-pod-cpu"),
                memory=self._value("quick-pod-memory"),
                ports=self._value("quick-pod-ports"),
                env=self._value("quick-pod-env"),
            )
        except FormValidationError as exc:
            self.set_status(
                QUICK_POD_ERRORS_ID,
                "\n".join(f"[red]{escape(message)}[/red]" for message in exc.messages),
            )
            return

        self.set_status(QUICK_POD_ERRORS_ID, "")
        submit.disabled = True
        self.run_mutation(
            self.state.workflow.submit_quick_pod(form),
            success_message=f"Created pod {form.name}",
            on_success=self.app.action_nav_pods,
            on_finished=lambda: setattr(submit, "disabled", False),
            name="submit-quick-pod",
        )

    def action_reset_form(self) -> None:
        for widget_id, value in self._defaults().items():
            self.query_one(f"#{widget_id}", Input).value = value
        self.set_status(QUICK_POD_ERRORS_ID, "")


__all__ = ["QuickPodScreen"]
