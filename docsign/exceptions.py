"""
Exceptions raised by the Scrive signing workflow.
"""


class ScriveError(Exception):
    """Base error for the signing workflow"""

    def __init__(self, message: str, document_id: str = None):
        self.message = message
        self.document_id = document_id
        super().__init__(self.message)

    def __str__(self):
        if self.document_id:
            return f"[document {self.document_id}] {self.message}"
        return self.message


class ScriveAPIError(ScriveError):
    """The remote service answered with a non-success status"""

    def __init__(self, message: str, status_code: int = None, response_body: str = None, document_id: str = None):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message, document_id)


class MalformedResponseError(ScriveError):
    """
    The response body does not have the expected shape.

    `payload` holds whatever was received (parsed JSON or raw text).
    """

    def __init__(self, message: str, payload=None, document_id: str = None):
        self.payload = payload
        super().__init__(message, document_id)


class WorkflowStateError(ScriveError):
    """A workflow step was called on a document in the wrong state"""

    def __init__(self, message: str, expected=None, actual=None, document_id: str = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message, document_id)


class SigningLinkError(ScriveError, ValueError):
    """The party's delivery URL is missing or cannot be parsed"""

    def __init__(self, message: str = "Invalid signing link", api_delivery_url: str = None):
        self.api_delivery_url = api_delivery_url
        super().__init__(message)
