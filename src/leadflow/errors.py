from typing import Optional


class LeadFlowError(Exception):
    """Base class for failures raised by the lead flow collaborators."""


class ConfigError(LeadFlowError):
    pass


class StoreError(LeadFlowError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MessagingError(LeadFlowError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
