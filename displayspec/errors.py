class DisplaySpecError(Exception):
    """Base class for lookup errors surfaced to callers."""
    status_code = 500
    public_message = 'Something went wrong. Please try again.'

    def __init__(self, message=None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class InvalidInput(DisplaySpecError):
    """A required parameter is missing or blank."""
    status_code = 400
    public_message = 'Missing required parameter'


class UpstreamUnavailable(DisplaySpecError):
    """GSMArena could not be reached or answered with a non-success status.

    The message carries the underlying cause for the logs; routes show
    their own retry message instead.
    """
    status_code = 502
    public_message = 'GSMArena is unavailable. Please try again.'
