"""
Retry engine exceptions.
"""


class RetryCancelled(Exception):
    """
    Raised when the cancellation signal fires while waiting between retries.

    Always terminal: the request is not attempted again.

    Attributes:
        delay_seconds: Length of the wait that was interrupted
    """

    def __init__(self, delay_seconds: float) -> None:
        self.delay_seconds = delay_seconds
        super().__init__("Request aborted while waiting between retries")
