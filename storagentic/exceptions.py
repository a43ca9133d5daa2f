"""
Assistant Exceptions

None of these ever reach the visitor: each one marks a point where the
assistant degrades to the next response tier or to mock storage.
"""

from typing import Optional


class AssistantError(Exception):
    """Base exception for assistant errors"""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.source = source


class ConfigurationAbsent(AssistantError):
    """Credentials for an external collaborator are not configured"""
    pass


class TransportFailure(AssistantError):
    """An external call failed (network, timeout, service error)"""
    pass


class MalformedResponse(TransportFailure):
    """An external call succeeded but returned unusable data"""
    pass
