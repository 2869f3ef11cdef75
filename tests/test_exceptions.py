"""
Tests for docsign/exceptions.py
"""

from docsign.exceptions import (
    MalformedResponseError,
    ScriveAPIError,
    ScriveError,
    SigningLinkError,
    WorkflowStateError,
)


class TestScriveError:
    """Tests for ScriveError"""

    def test_basic_error(self):
        assert str(ScriveError("Test error")) == "Test error"

    def test_with_document_id(self):
        assert str(ScriveError("Test error", document_id="doc123")) == "[document doc123] Test error"


class TestSubclasses:
    """Tests for the specific errors"""

    def test_api_error(self):
        error = ScriveAPIError("Failed", status_code=500, response_body="boom", document_id="doc1")
        assert isinstance(error, ScriveError)
        assert error.status_code == 500
        assert error.response_body == "boom"
        assert error.document_id == "doc1"

    def test_malformed_response(self):
        error = MalformedResponseError("Bad shape", payload={'a': 1})
        assert isinstance(error, ScriveError)
        assert error.payload == {'a': 1}

    def test_workflow_state_error(self):
        error = WorkflowStateError("Wrong state", expected='created', actual='started')
        assert isinstance(error, ScriveError)
        assert (error.expected, error.actual) == ('created', 'started')

    def test_signing_link_error_is_value_error(self):
        error = SigningLinkError(api_delivery_url='::')
        assert isinstance(error, ScriveError)
        assert isinstance(error, ValueError)
        assert error.api_delivery_url == '::'
        assert str(error) == "Invalid signing link"
