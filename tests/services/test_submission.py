# -*- coding: utf-8 -*-
"""
Tests for SubmissionHandler.
"""
import threading

import pytest

from services.error_mapper import CONNECTION_MESSAGE
from services.exceptions import ApiException, NetworkException, WizardStateException
from services.mock_property_client import MockPropertyClient
from services.wizard.image_manager import ImageUploadManager
from services.wizard.submission import SubmissionHandler, SubmissionState
from ui.wizards.add_property.property_context import PropertyWizardContext


@pytest.fixture
def context(qapp, preview_dir, complete_draft):
    ctx = PropertyWizardContext(image_manager=ImageUploadManager(preview_dir=preview_dir))
    ctx.draft = complete_draft
    yield ctx
    ctx.discard()


class BlockingClient:
    """Holds create_property() until released."""

    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()

    def create_property(self, draft):
        self.started.set()
        self.release.wait(timeout=5)
        return "prop-1"


def test_successful_submission_completes_context(context):
    client = MockPropertyClient()
    handler = SubmissionHandler(client)

    outcome = handler.submit(context)

    assert outcome.success
    assert outcome.property_id
    assert handler.state == SubmissionState.SUCCESS
    assert context.property_id == outcome.property_id
    assert context.status == context.STATUS_COMPLETED
    assert client.created == [context.draft]


def test_success_releases_previews(context, make_png):
    preview, = context.add_images([make_png("front.png")])
    SubmissionHandler(MockPropertyClient()).submit(context)
    assert not preview.thumbnail_path.exists()
    assert context.image_manager.is_closed


def test_invalid_draft_fails_without_calling_client(context):
    context.set_field("title", "")
    client = MockPropertyClient()
    handler = SubmissionHandler(client)

    outcome = handler.submit(context)

    assert not outcome.success
    assert outcome.errors == ["Property title is required"]
    assert handler.state == SubmissionState.FAILED
    assert client.created == []
    assert context.is_editable


def test_network_failure_keeps_draft(context):
    draft = context.draft
    handler = SubmissionHandler(MockPropertyClient(fail_with=NetworkException("refused")))

    outcome = handler.submit(context)

    assert not outcome.success
    assert outcome.error_message == CONNECTION_MESSAGE
    assert context.draft is draft
    assert context.is_editable


def test_api_rejection_shows_server_detail(context):
    error = ApiException("Bad request", status_code=400,
                         response_data={"detail": "City is not served"})
    outcome = SubmissionHandler(MockPropertyClient(fail_with=error)).submit(context)
    assert "City is not served" in outcome.error_message


def test_unexpected_error_is_mapped(context):
    outcome = SubmissionHandler(MockPropertyClient(fail_with=RuntimeError("boom"))).submit(context)
    assert not outcome.success
    assert "boom" not in outcome.error_message


def test_retry_after_failure(context):
    client = MockPropertyClient(fail_with=NetworkException("refused"))
    handler = SubmissionHandler(client)
    handler.submit(context)

    handler.retry()
    assert handler.state == SubmissionState.EDITING

    client.fail_with = None
    assert handler.submit(context).success


def test_retry_only_from_failed(context):
    with pytest.raises(WizardStateException):
        SubmissionHandler(MockPropertyClient()).retry()


def test_cannot_submit_twice_after_success(context):
    handler = SubmissionHandler(MockPropertyClient())
    handler.submit(context)
    with pytest.raises(WizardStateException):
        handler.submit(context)


def test_second_submit_while_in_flight_is_refused(context):
    client = BlockingClient()
    handler = SubmissionHandler(client)
    results = []
    worker = threading.Thread(target=lambda: results.append(handler.submit(context)))
    worker.start()
    assert client.started.wait(timeout=5)

    assert handler.is_submitting
    with pytest.raises(WizardStateException):
        handler.submit(context)

    client.release.set()
    worker.join(timeout=5)
    assert results[0].success
    assert results[0].property_id == "prop-1"


def test_resubmit_without_retry_is_refused(context):
    client = MockPropertyClient(fail_with=NetworkException("refused"))
    handler = SubmissionHandler(client)
    handler.submit(context)

    client.fail_with = None
    with pytest.raises(WizardStateException):
        handler.submit(context)
    assert handler.state == SubmissionState.FAILED
    assert client.created == []


def test_discarded_context_is_not_submitted(context):
    client = MockPropertyClient()
    handler = SubmissionHandler(client)
    context.discard()

    with pytest.raises(WizardStateException):
        handler.submit(context)
    assert handler.state == SubmissionState.EDITING
    assert client.created == []
    assert context.status == context.STATUS_DISCARDED
