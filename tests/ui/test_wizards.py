# -*- coding: utf-8 -*-
"""
Widget tests for the contract and vehicle wizards and the launcher window.

Fetches go through the deferred dispatcher so each test decides when
lookups and the submission complete.
"""
import pytest
from PyQt5.QtCore import Qt

from app.main_window import MainWindow
from services.translation_manager import tr
from ui.error_handler import ErrorHandler
from ui.wizards.contract import ContractWizard
from ui.wizards.framework.step_navigator import WizardState
from ui.wizards.vehicle import VehicleWizard

from conftest import TODAY


@pytest.fixture
def dialogs(monkeypatch):
    """Record dialogs instead of opening message boxes."""
    shown = {"error": [], "warning": [], "confirm": []}
    answers = {"confirm": True}

    monkeypatch.setattr(ErrorHandler, "show_error",
                        staticmethod(lambda parent, message, title=None: shown["error"].append(message)))
    monkeypatch.setattr(ErrorHandler, "show_warning",
                        staticmethod(lambda parent, message, title=None: shown["warning"].append(message)))

    def confirm(parent, message, title=None):
        shown["confirm"].append(message)
        return answers["confirm"]

    monkeypatch.setattr(ErrorHandler, "confirm", staticmethod(confirm))
    shown["answers"] = answers
    return shown


@pytest.fixture
def make_contract_wizard(qtbot, lookups, client, dispatcher, dialogs):
    def build(**kwargs):
        kwargs.setdefault("branch_id", "br-1")
        wizard = ContractWizard(lookups=lookups, client=client, dispatcher=dispatcher,
                                clock=lambda: TODAY, **kwargs)
        qtbot.addWidget(wizard)
        dispatcher.run_all()
        return wizard
    return build


def pick(picker, query, dispatcher):
    """Search with ``query`` and click the first result."""
    picker.search_requested.emit(query)
    dispatcher.run_all()
    item = picker.results.item(0)
    picker.results.itemClicked.emit(item)


def type_into(qtbot, field, text):
    field.input.clear()
    qtbot.keyClicks(field.input, text)


def choose(field, option_id):
    index = field.input.findData(option_id)
    field.input.setCurrentIndex(index)
    field.input.activated.emit(index)


class TestContractWizard:
    """Driving the contract wizard through its widgets."""

    def test_opens_on_first_step(self, make_contract_wizard):
        wizard = make_contract_wizard()
        assert wizard.windowTitle() == tr("contract.wizard.title")
        assert wizard.step_container.currentIndex() == 0
        assert not wizard.btn_previous.isEnabled()
        assert wizard.btn_next.text() == tr("button.next")

    def test_next_shows_inline_errors(self, make_contract_wizard, qtbot):
        wizard = make_contract_wizard()
        qtbot.mouseClick(wizard.btn_next, Qt.LeftButton)

        picker = wizard.steps[0].picker
        assert picker.error() == tr("validation.contract.customer_required")
        assert wizard.status_label.text() == tr("validation.check_data", count=1)
        assert wizard.step_container.currentIndex() == 0

    def test_picking_a_customer_fills_details(self, make_contract_wizard, dispatcher, qtbot):
        wizard = make_contract_wizard()
        page = wizard.steps[0]
        pick(page.picker, "Sara", dispatcher)

        assert page.fields["customerName"].value() == "Sara Ahmed"
        assert page.fields["customerMobile"].value() == "0550000001"
        qtbot.mouseClick(wizard.btn_next, Qt.LeftButton)
        assert wizard.step_container.currentIndex() == 1
        assert wizard.btn_previous.isEnabled()

    def test_blacklisted_customer_warns(self, make_contract_wizard, dispatcher, dialogs):
        wizard = make_contract_wizard()
        pick(wizard.steps[0].picker, "Omar", dispatcher)

        assert dialogs["warning"] == [tr("contract.customer.blacklisted", name="Omar Black")]
        assert wizard.navigator.value("selectedCustomerId") == ""

    def test_full_contract_flow(self, make_contract_wizard, dispatcher, client, qtbot):
        wizard = make_contract_wizard()
        next_button = wizard.btn_next

        pick(wizard.steps[0].picker, "Sara", dispatcher)
        qtbot.mouseClick(next_button, Qt.LeftButton)

        pick(wizard.steps[1].picker, "ABC", dispatcher)
        assert wizard.steps[1].fields["vehiclePlate"].value() == "ABC 123"
        qtbot.mouseClick(next_button, Qt.LeftButton)

        type_into(qtbot, wizard.steps[2].fields["durationInDays"], "5")
        assert wizard.steps[2].fields["endDate"].value() == "2026-03-15"
        qtbot.mouseClick(next_button, Qt.LeftButton)

        pricing = wizard.steps[3]
        assert pricing.fields["totalAmount"].value() == "750"
        type_into(qtbot, pricing.fields["depositAmount"], "750")
        qtbot.mouseClick(next_button, Qt.LeftButton)

        choose(wizard.steps[4].fields["selectedInspector"], "in-1")
        assert wizard.steps[4].fields["inspectorName"].value() == "Khalid Inspector"
        qtbot.mouseClick(next_button, Qt.LeftButton)

        assert wizard.step_container.currentIndex() == 5
        assert next_button.text() == tr("contract.wizard.submit")

        with qtbot.waitSignal(wizard.contract_saved) as blocker:
            qtbot.mouseClick(next_button, Qt.LeftButton)
            assert not next_button.isEnabled()
            dispatcher.resolve(dispatcher.pending("submit")[0])

        assert blocker.args[0]["status"] == "completed"
        assert [call[0] for call in client.calls] == ["create_contract"]
        assert wizard.navigator.state == WizardState.CLOSED

    def test_submission_failure_is_shown(self, make_contract_wizard, dispatcher, client,
                                         dialogs, lookups):
        from conftest import fill_contract

        client.success, client.error = False, "Vehicle already rented"
        wizard = make_contract_wizard()
        fill_contract(wizard.navigator, lookups)
        for _ in range(5):
            wizard.navigator.next_step()

        wizard.navigator.next_step()
        dispatcher.resolve(dispatcher.pending("submit")[0])

        assert dialogs["error"] == ["Vehicle already rented"]
        assert wizard.status_label.text() == "Vehicle already rented"
        assert wizard.btn_next.isEnabled()
        assert wizard.navigator.state == WizardState.EDITING

    def test_step_indicator_jumps_back(self, make_contract_wizard, dispatcher, qtbot):
        wizard = make_contract_wizard()
        wizard.show()
        pick(wizard.steps[0].picker, "Sara", dispatcher)
        qtbot.mouseClick(wizard.btn_next, Qt.LeftButton)

        buttons = wizard.step_indicator.buttons
        assert buttons[0].isEnabled()
        assert not buttons[2].isEnabled()
        qtbot.mouseClick(buttons[0], Qt.LeftButton)
        assert wizard.step_container.currentIndex() == 0

    def test_clean_close_needs_no_confirmation(self, make_contract_wizard, dialogs, qtbot):
        wizard = make_contract_wizard()
        with qtbot.waitSignal(wizard.contract_cancelled):
            wizard.close()
        assert dialogs["confirm"] == []
        assert wizard.navigator.state == WizardState.CLOSED

    def test_dirty_close_asks_first(self, make_contract_wizard, dispatcher, dialogs):
        wizard = make_contract_wizard()
        wizard.show()
        pick(wizard.steps[0].picker, "Sara", dispatcher)

        dialogs["answers"]["confirm"] = False
        wizard.close()
        assert dialogs["confirm"] == [tr("wizard.discard_changes")]
        assert wizard.navigator.state == WizardState.EDITING

        dialogs["answers"]["confirm"] = True
        wizard.close()
        assert wizard.navigator.state == WizardState.CLOSED

    def test_edit_mode_titles(self, make_contract_wizard):
        from test_step_navigator import EDIT_RECORD

        wizard = make_contract_wizard(record=EDIT_RECORD, entity_id="ct-9")
        assert wizard.windowTitle() == tr("contract.wizard.edit_title")
        assert wizard.steps[0].picker.selection_label.text() == "Sara Ahmed"


class TestVehicleWizard:
    """Vehicle wizard option lists and cascades."""

    @pytest.fixture
    def wizard(self, qtbot, lookups, client, dispatcher, dialogs):
        wizard = VehicleWizard(lookups=lookups, client=client, dispatcher=dispatcher,
                               clock=lambda: TODAY, branch_id="br-1")
        qtbot.addWidget(wizard)
        dispatcher.run_all()
        return wizard

    def test_opens_with_reference_lists(self, wizard):
        page = wizard.steps[0]
        assert wizard.windowTitle() == tr("vehicle.wizard.title")
        assert len(wizard.steps) == 5
        assert page.fields["make"].option_ids() == ["mk-1", "mk-2"]
        assert page.fields["color"].option_ids() == ["co-1"]
        assert page.fields["branchId"].option_ids() == ["br-1"]
        assert page.fields["model"].option_ids() == []

    def test_model_list_follows_make(self, wizard, dispatcher):
        page = wizard.steps[0]
        choose(page.fields["make"], "mk-1")
        dispatcher.run_all()
        assert page.fields["model"].option_ids() == ["md-1", "md-2"]

        choose(page.fields["model"], "md-2")
        choose(page.fields["make"], "mk-2")
        assert page.fields["model"].value() == ""
        dispatcher.run_all()
        assert page.fields["model"].option_ids() == ["md-3"]

    def test_submit_button_on_last_step(self, wizard):
        for index in range(1, 5):
            wizard.context.mark_step_completed(index)
            wizard.navigator.goto_step(index)
        assert wizard.btn_next.text() == tr("vehicle.wizard.submit")


class TestMainWindow:
    """Launcher window."""

    def test_buttons_and_language_toggle(self, qtbot, client, lookups):
        window = MainWindow(client=client, lookups=lookups)
        qtbot.addWidget(window)
        assert window.btn_add_contract.text() == tr("main.add_contract")

        with qtbot.waitSignal(window.language_changed) as blocker:
            window.toggle_language()
        assert blocker.args == [True]
        assert window.layoutDirection() == Qt.RightToLeft

        window.toggle_language()
        assert window.layoutDirection() == Qt.LeftToRight

    def test_open_and_close_contract_wizard(self, qtbot, client, lookups, dialogs):
        window = MainWindow(client=client, lookups=lookups)
        qtbot.addWidget(window)

        wizard = window.open_contract_wizard()
        assert window.open_wizards == [wizard]
        qtbot.waitUntil(lambda: not wizard.dispatcher._workers, timeout=5000)
        assert [i.id for i in wizard.navigator.options("inspectors")] == ["in-1"]

        wizard.close()
        assert window.open_wizards == []
