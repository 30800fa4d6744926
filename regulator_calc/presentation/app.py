"""Textual-based calculator front end."""

from __future__ import annotations

import logging
from typing import AbstractSet, Dict, Optional

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Header, Input, Label, Markdown, Static

from regulator_calc.application.services import (
    CalculationService,
    FieldPersistenceService,
    build_calculation_service,
)
from regulator_calc.domain.ports import FieldStore, FieldStoreError
from regulator_calc.domain.regulators import Topology
from regulator_calc.infrastructure import build_field_store
from regulator_calc.shared.config import AppConfig, configure_logging
from regulator_calc.shared.dto import FieldId, Results

from .form_schema import FIELDS, label_for
from .report import format_failure, format_report

logger = logging.getLogger(__name__)

DEFAULT_HEADING = "Regulator name"
SAVED_MESSAGE = "Fields have been saved!"

ABOUT_TITLE = "MC34063 calculator ©"
ABOUT_TEXT = """\
This application calculates the value of all the components required
to build a switching regulator based on the MC34063 chip.

The following configurations are supported:

- Step Down (buck)
- Step Up (boost)
- Inverter
"""


class AboutScreen(ModalScreen[None]):
    """Informational dialog shown at start-up and on F1."""

    DEFAULT_CSS = """
    AboutScreen {
        align: center middle;
    }
    #about-dialog {
        width: 70;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    BINDINGS = [("escape", "dismiss", "Close")]

    def compose(self) -> ComposeResult:
        with Container(id="about-dialog"):
            yield Label(ABOUT_TITLE, classes="title")
            yield Markdown(ABOUT_TEXT)
            yield Button("OK", id="about-ok", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss()


class RegulatorApp(App[None]):
    """Form with the five operating parameters and the sized parts."""

    TITLE = "MC34063 calculator"

    CSS = """
    #form-pane {
        width: 45%;
        border: solid $primary 30%;
        padding: 1;
    }
    #results-pane {
        width: 55%;
        border: solid $accent;
        padding: 1;
    }
    Label.title {
        margin-bottom: 1;
        text-style: bold;
    }
    .field-label {
        width: 100%;
    }
    .field-input {
        width: 100%;
        margin-bottom: 1;
    }
    Input.error {
        background: $error 40%;
    }
    #form-buttons {
        height: auto;
        align: center middle;
    }
    #form-buttons > Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("escape,q", "quit", "Quit"),
        ("ctrl+s,f5", "calculate", "Calculate"),
        ("f1", "about", "About"),
    ]

    def __init__(
        self,
        *,
        service: Optional[CalculationService] = None,
        store: Optional[FieldStore] = None,
        show_about: bool = True,
    ) -> None:
        super().__init__()
        self._service = service or build_calculation_service()
        if store is None:
            store = build_field_store(AppConfig.from_env().store)
        self._persistence = FieldPersistenceService(store)
        self._show_about = show_about
        self._inputs: Dict[FieldId, Input] = {}
        self.results_text = ""
        self.heading_text = DEFAULT_HEADING

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal():
            yield self._build_form_panel()
            yield self._build_results_panel()
        yield Footer()

    def _build_form_panel(self) -> Container:
        widgets = []
        for definition in FIELDS:
            widget = Input(
                placeholder=definition.placeholder,
                id=definition.key.value,
                classes="field-input",
            )
            self._inputs[definition.key] = widget
            widgets.extend([Label(label_for(definition), classes="field-label"), widget])
        self._calculate_button = Button("Calculate parts", id="calculate", variant="success")
        buttons = Horizontal(
            self._calculate_button,
            Button("Save fields", id="save", variant="primary"),
            id="form-buttons",
        )
        return Container(
            Label("Parameters", classes="title"),
            VerticalScroll(*widgets, id="form-scroll"),
            buttons,
            id="form-pane",
        )

    def _build_results_panel(self) -> Container:
        self._heading = Label(DEFAULT_HEADING, classes="title", id="regulator-name")
        self._results = Static("", id="results", markup=False)
        return Container(self._heading, self._results, id="results-pane")

    def on_mount(self) -> None:
        self._restore_fields()
        if self._show_about:
            self.push_screen(AboutScreen())

    def _restore_fields(self) -> None:
        try:
            restored = self._persistence.restore()
        except FieldStoreError as exc:
            logger.error(f"Could not restore fields: {exc}")
            self.notify(str(exc), title="Restore failed", severity="error")
            return
        for key, value in restored.items():
            self._inputs[FieldId(key)].value = value

    # FormSource
    def get_value(self, field_id: FieldId) -> Optional[str]:
        return self._inputs[field_id].value

    # ResultPresenter
    def present(self, topology: Topology, results: Results) -> None:
        info = self._service.factory.info(topology)
        self._set_heading(info.name)
        self._set_results(format_report(info, results))
        self._calculate_button.disabled = True

    def present_validation_failure(self, fields: AbstractSet[FieldId]) -> None:
        for field_id in fields:
            self._inputs[field_id].add_class("error")
        self._set_results(format_failure(fields))
        self.bell()

    def on_input_changed(self, event: Input.Changed) -> None:
        self._calculate_button.disabled = False
        self._clear_field_errors()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "calculate":
            self.action_calculate()
        elif event.button.id == "save":
            self.action_save()

    def action_calculate(self) -> None:
        self._clear_field_errors()
        self._service.run(self, self)

    def action_save(self) -> None:
        try:
            self._persistence.save(self)
        except FieldStoreError as exc:
            logger.error(f"Could not save fields: {exc}")
            self.notify(str(exc), title="Save failed", severity="error")
            return
        self.notify(SAVED_MESSAGE)

    def action_about(self) -> None:
        self.push_screen(AboutScreen())

    def _clear_field_errors(self) -> None:
        for widget in self._inputs.values():
            widget.remove_class("error")
        self._set_heading(DEFAULT_HEADING)
        self._set_results("")

    def _set_heading(self, text: str) -> None:
        self.heading_text = text
        self._heading.update(text)

    def _set_results(self, text: str) -> None:
        self.results_text = text
        self._results.update(text)


def run_app() -> None:
    config = AppConfig.from_env()
    configure_logging(config.logging)
    app = RegulatorApp(store=build_field_store(config.store))
    app.run()


APP = "regulator_calc.presentation.app:RegulatorApp"


if __name__ == "__main__":
    run_app()
