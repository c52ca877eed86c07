# -*- coding: utf-8 -*-
"""
Tests for the Add Property wizard.

Tests cover:
- Wizard initialization
- Step navigation gated by validation
- Units step editing
- Submission success and failure
- Cancellation
"""
import pytest
from PyQt5.QtWidgets import QLineEdit, QDoubleSpinBox

from services.exceptions import NetworkException, ValidationException
from services.mock_property_client import MockPropertyClient
from ui.error_handler import ErrorHandler
from ui.wizards.add_property import AddPropertyWizard, PropertyWizardContext
from ui.wizards.add_property.success_view import success_message


@pytest.fixture
def client():
    return MockPropertyClient()


@pytest.fixture
def wizard(qtbot, client):
    """Create wizard instance for testing."""
    wizard = AddPropertyWizard(client=client)
    qtbot.addWidget(wizard)
    yield wizard
    wizard.close()


def _fill_details(wizard):
    details = wizard.steps[0]
    details.title_input.setText("Sunset Apartments")
    details.address_input.setText("KG 123 St")
    details.city_input.setText("Kigali")


def _go_to_review(wizard):
    _fill_details(wizard)
    wizard.btn_next.click()
    wizard.btn_next.click()

    units = wizard.steps[2]
    units.findChild(QLineEdit, "unitName0").setText("Unit 1A")
    units.findChild(QDoubleSpinBox, "planPrice0_0").setValue(120)
    wizard.btn_next.click()


class TestWizardInitialization:

    def test_wizard_has_context(self, wizard):
        assert isinstance(wizard.context, PropertyWizardContext)

    def test_wizard_has_four_steps(self, wizard):
        assert len(wizard.steps) == 4
        assert [wizard.navigator.get_step_title(i) for i in range(4)] == [
            "Property Details", "Upload Images", "Add Units", "Review & Submit"
        ]

    def test_starts_on_details_with_next_disabled(self, wizard):
        assert wizard.navigator.current_index == 0
        assert not wizard.btn_next.isEnabled()
        assert not wizard.btn_previous.isEnabled()
        assert "Step 1 of 4" in wizard.progress_label.text()


class TestNavigation:

    def test_next_enabled_once_details_are_filled(self, wizard):
        _fill_details(wizard)
        assert wizard.btn_next.isEnabled()
        wizard.btn_next.click()
        assert wizard.navigator.current_index == 1
        assert wizard.current_step_name == "Upload Images"

    def test_details_edit_lands_in_draft(self, wizard):
        _fill_details(wizard)
        assert wizard.context.draft.title == "Sunset Apartments"
        assert wizard.context.draft.city == "Kigali"

    def test_back_keeps_entered_data(self, wizard):
        _fill_details(wizard)
        wizard.btn_next.click()
        wizard.btn_previous.click()
        assert wizard.navigator.current_index == 0
        assert wizard.steps[0].title_input.text() == "Sunset Apartments"

    def test_units_step_blocks_until_valid(self, wizard):
        _fill_details(wizard)
        wizard.btn_next.click()
        wizard.btn_next.click()
        assert wizard.navigator.current_index == 2
        assert not wizard.btn_next.isEnabled()

    def test_review_edit_link_jumps_back(self, wizard):
        _go_to_review(wizard)
        assert wizard.navigator.is_last_step()
        assert wizard.btn_next.text() == "Submit Property"

        wizard.review_step.edit_requested.emit(2)
        assert wizard.navigator.current_index == 2


class TestUnitsStep:

    def test_add_and_remove_units(self, wizard):
        _fill_details(wizard)
        wizard.btn_next.click()
        wizard.btn_next.click()
        units = wizard.steps[2]

        units.add_unit()
        assert len(wizard.context.draft.units) == 2
        assert units.cards_layout.count() == 2

        units.add_plan(1)
        assert len(wizard.context.draft.units[1].pricing_plans) == 2

        units.remove_unit(0)
        assert len(wizard.context.draft.units) == 1
        assert units.cards_layout.count() == 1

    def test_removing_last_unit_warns_and_keeps_it(self, wizard, monkeypatch):
        warnings = []
        monkeypatch.setattr(ErrorHandler, "show_warning",
                            staticmethod(lambda parent, message, title="Warning": warnings.append(message)))
        _fill_details(wizard)
        wizard.btn_next.click()
        wizard.btn_next.click()
        units = wizard.steps[2]

        units.remove_unit(0)
        units.remove_plan(0, 0)

        assert warnings == [
            "A property must keep at least one unit",
            "A unit must keep at least one pricing plan",
        ]
        assert len(wizard.context.draft.units) == 1
        assert units.cards_layout.count() == 1


class TestSubmission:

    def test_successful_submission_shows_completion(self, qtbot, wizard, client):
        _go_to_review(wizard)
        completed = []
        wizard.wizard_completed.connect(completed.append)

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.btn_next.click()

        outcome = blocker.args[0]
        assert outcome.success
        assert wizard.page_stack.currentIndex() == wizard.PAGE_COMPLETION
        assert wizard.completion_view.message_label.text() == \
            '"Sunset Apartments" has been successfully created with 1 unit.'
        assert completed[0]["property_id"] == outcome.property_id
        assert len(client.created) == 1

    def test_failure_stays_on_review_and_allows_retry(self, qtbot, wizard, client):
        client.fail_with = NetworkException("connection refused")
        _go_to_review(wizard)

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.btn_next.click()

        assert not blocker.args[0].success
        assert wizard.navigator.current_index == 3
        assert wizard.page_stack.currentIndex() == wizard.PAGE_STEPS
        assert not wizard.error_label.isHidden()
        assert wizard.btn_next.isEnabled()
        assert wizard.context.draft.title == "Sunset Apartments"

        client.fail_with = None
        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.btn_next.click()
        assert blocker.args[0].success

    def test_server_validation_errors_are_listed_once(self, qtbot, wizard, client):
        client.fail_with = ValidationException("bad", errors=["Price too high"])
        _go_to_review(wizard)

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.btn_next.click()

        assert blocker.args[0].errors == ["Price too high"]
        assert wizard.error_label.text() == "• Price too high"

    def test_discarded_draft_submission_is_refused(self, qtbot, wizard, client, monkeypatch):
        shown = []
        monkeypatch.setattr(ErrorHandler, "show_error",
                            staticmethod(lambda parent, message, title="Error": shown.append(message)))
        _go_to_review(wizard)
        wizard.context.discard()

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.on_submit()

        assert not blocker.args[0].success
        assert shown == [blocker.args[0].error_message]
        assert "discarded" in shown[0]
        assert not wizard.is_busy
        assert client.created == []


class TestCancel:

    def test_cancel_without_input_needs_no_confirmation(self, wizard, monkeypatch):
        monkeypatch.setattr(ErrorHandler, "confirm", staticmethod(lambda *a, **k: pytest.fail("asked")))
        assert wizard.on_cancel()
        assert wizard.context.status == wizard.context.STATUS_DISCARDED

    def test_cancel_can_be_declined(self, wizard, monkeypatch):
        _fill_details(wizard)
        monkeypatch.setattr(ErrorHandler, "confirm", staticmethod(lambda *a, **k: False))
        assert not wizard.on_cancel()
        assert wizard.context.is_editable


def test_success_message_pluralizes():
    assert success_message({"title": "Loft", "unit_count": 3}) == \
        '"Loft" has been successfully created with 3 units.'
