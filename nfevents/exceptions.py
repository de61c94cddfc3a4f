
class EventError(Exception):
    """Base class for errors raised by the event dispatcher."""
    pass


class ResolutionError(EventError):
    """Indicates that a listener could not be turned into an invocable target."""
    def __init__(self, listener, reason):
        self.listener = listener        # The value passed in as the listener
        self.reason = reason            # A message describing why resolution failed
        super().__init__(listener, reason)

    def __str__(self):
        return f"Unable to resolve listener '{self.listener}': {self.reason}"
