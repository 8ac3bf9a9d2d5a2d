"""Deploy screen - the advanced deployment form.

Submitting runs the deployment workflow: the workload first, then its
service when "Create service" is on. Any failure is shown in a blocking
dialog; on success the deployments list is opened.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Input, Label, Select, Static, Switch

from kubedeploy.constants.enums import DeploymentMode, ExposureType
from kubedeploy.constants.values import (
    PLACEHOLDER_CPU_LIMIT,
    PLACEHOLDER_CPU_REQUEST,
    PLACEHOLDER_ENDPOINT_PORTS,
    PLACEHOLDER_ENV,
    PLACEHOLDER_IMAGE,
    PLACEHOLDER_MEMORY_LIMIT,
    PLACEHOLDER_MEMORY_REQUEST,
    PLACEHOLDER_NAME,
    PLACEHOLDER_PORTS,
)
from kubedeploy.errors import FormValidationError
from kubedeploy.keyboard import DEPLOY_SCREEN_BINDINGS
from kubedeploy.models.forms.deploy_form import DeploymentForm
from kubedeploy.screens.base_screen import BaseScreen
from kubedeploy.screens.deploy.config import (
    DEPLOY_ERRORS_ID,
    DEPLOY_SUBMIT_ID,
    EXPOSURE_OPTIONS,
    MODE_OPTIONS,
)
from kubedeploy.screens.deploy.presenter import (
    DeployPresenter,
    format_container_ports,
    format_endpoint_ports,
)
from kubedeploy.utils.sync_manager import CachedView

logger = logging.getLogger(__name__)

ChoiceT = TypeVar("ChoiceT", DeploymentMode, ExposureType)


def _field(label: str, widget: Input | Select | Switch) -> Vertical:
    return Vertical(Label(label), widget, classes="form-field")


class DeployScreen(BaseScreen):
    """Advanced deployment form."""

    BINDINGS = DEPLOY_SCREEN_BINDINGS

    def __init__(self) -> None:
        super().__init__()
        self.presenter = DeployPresenter()

    @property
    def screen_title(self) -> str:
        return "Deploy"

    def compose_content(self) -> ComposeResult:
        defaults = DeploymentForm(namespace=self.state.settings.default_namespace)
        with VerticalScroll(id="base-content", classes="deploy-form"):
            yield Static("New deployment", classes="screen-title")
            yield _field(
                "Mode",
                Select(
                    MODE_OPTIONS,
                    value=defaults.deployment_mode,
                    allow_blank=False,
                    id="deploy-mode",
                ),
            )
            with Horizontal(classes="form-row"):
                yield _field("Name", Input(placeholder=PLACEHOLDER_NAME, id="deploy-name"))
                yield _field("Namespace", Input(defaults.namespace, id="deploy-namespace"))
            with Horizontal(classes="form-row"):
                yield _field("Image", Input(placeholder=PLACEHOLDER_IMAGE, id="deploy-image"))
                yield _field("Replicas", Input(str(defaults.replicas), id="deploy-replicas"))
            with Horizontal(classes="form-row"):
                yield _field(
                    "CPU request",
                    Input(defaults.cpu_request, placeholder=PLACEHOLDER_CPU_REQUEST, id="deploy-cpu-request"),
                )
                yield _field(
                    "Memory request",
                    Input(defaults.memory_request, placeholder=PLACEHOLDER_MEMORY_REQUEST, id="deploy-memory-request"),
                )
            with Horizontal(classes="form-row"):
                yield _field(
                    "CPU limit",
                    Input(defaults.cpu_limit, placeholder=PLACEHOLDER_CPU_LIMIT, id="deploy-cpu-limit"),
                )
                yield _field(
                    "Memory limit",
                    Input(defaults.memory_limit, placeholder=PLACEHOLDER_MEMORY_LIMIT, id="deploy-memory-limit"),
                )
            yield _field(
                "Container ports",
                Input(
                    format_container_ports(defaults.ports),
                    placeholder=PLACEHOLDER_PORTS,
                    id="deploy-ports",
                ),
            )
            yield _field("Environment", Input(placeholder=PLACEHOLDER_ENV, id="deploy-env"))
            with Horizontal(classes="form-row"):
                yield _field("Create service", Switch(defaults.create_endpoint, id="deploy-create-endpoint"))
                yield _field(
                    "Service type",
                    Select(
                        EXPOSURE_OPTIONS,
                        value=defaults.exposure_type,
                        allow_blank=False,
                        id="deploy-exposure",
                    ),
                )
            yield _field(
                "Service ports",
                Input(
                    format_endpoint_ports(defaults.endpoint_ports),
                    placeholder=PLACEHOLDER_ENDPOINT_PORTS,
                    id="deploy-endpoint-ports",
                ),
            )
            yield Static("", id=DEPLOY_ERRORS_ID, classes="form-errors")
            with Horizontal(classes="form-buttons"):
                yield Button("Deploy", id=DEPLOY_SUBMIT_ID, variant="primary")
                yield Button("Reset", id="deploy-reset")

    def render_view(self, view: CachedView) -> None:
        """The form observes no collections."""

    def _value(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}", Input).value

    def _selected(self, widget_id: str, fallback: ChoiceT) -> ChoiceT:
        value = self.query_one(f"#{widget_id}", Select).value
        return value if isinstance(value, type(fallback)) else fallback

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == DEPLOY_SUBMIT_ID:
            self.action_submit()
        elif event.button.id == "deploy-reset":
            self.action_reset_form()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "deploy-mode":
            replicas = self.query_one("#deploy-replicas", Input)
            replicas.disabled = event.value is DeploymentMode.POD

    def action_submit(self) -> None:
        submit = self.query_one(f"#{DEPLOY_SUBMIT_ID}", Button)
        if submit.disabled:
            return
        try:
            form = self.presenter.build_deployment_form(
                mode=self._selected("deploy-mode", DeploymentMode.DEPLOYMENT),
                name=self._value("deploy-name"),
                namespace=self._value("deploy-namespace"),
                image=self._value("deploy-image"),
                replicas=self._value("deploy-replicas"),
                cpu_request=self._value("deploy-cpu-request"),
                memory_request=self._value("deploy-memory-request"),
                cpu_limit=self._value("deploy-cpu-limit"),
                memory_limit=self._value("deploy-memory-limit"),
                ports=self._value("deploy-ports"),
                env=self._value("deploy-env"),
                create_endpoint=self.query_one("#deploy-create-endpoint", Switch).value,
                exposure_type=self._selected("deploy-exposure", ExposureType.LOAD_BALANCER),
                endpoint_ports=self._value("deploy-endpoint-ports"),
            )
        except FormValidationError as exc:
            self.set_status(
                DEPLOY_ERRORS_ID,
                "\n".join(f"[red]{escape(message)}[/red]" for message in exc.messages),
            )
            return

        self.set_status(DEPLOY_ERRORS_ID, "")
        submit.disabled = True
        self.run_mutation(
            self.state.workflow.submit_deployment(form),
            success_message=f"Deployed {form.name}",
            on_success=self.app.action_nav_workloads,
            on_finished=lambda: setattr(submit, "disabled", False),
            name="submit-deployment",
        )

    def action_reset_form(self) -> None:
        defaults = DeploymentForm(namespace=self.state.settings.default_namespace)
        values = {
            "deploy-name": "",
            "deploy-namespace": defaults.namespace,
            "deploy-image": "",
            "deploy-replicas": str(defaults.replicas),
            "deploy-cpu-request": defaults.cpu_request,
            "deploy-memory-request": defaults.memory_request,
            "deploy-cpu-limit": defaults.cpu_limit,
            "deploy-memory-limit": defaults.memory_limit,
            "deploy-ports": format_container_ports(defaults.ports),
            "deploy-env": "",
            "deploy-endpoint-ports": format_endpoint_ports(defaults.endpoint_ports),
        }
        for widget_id, value in values.items():
            self.query_one(f"#{widget_id}", Input).value = value
        self.query_one("#deploy-mode", Select).value = defaults.deployment_mode
        self.query_one("#deploy-exposure", Select).value = defaults.exposure_type
        self.query_one("#deploy-create-endpoint", Switch).value = defaults.create_endpoint
        self.set_status(DEPLOY_ERRORS_ID, "")


__all__ = ["DeployScreen"]
