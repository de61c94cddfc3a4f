
import logging

from .factory import ImportFactory
from .registry import ListenerRegistry
from .resolver import ListenerResolver, DEFAULT_METHOD


class Dispatcher:
    """Dispatches events to registered listeners with prioritization.

    A dispatcher holds its own registry. Create one for the application and pass it to
    whatever needs to publish or subscribe; there is no shared global instance.
    """
    def __init__(self, factory=None, *, default_method=DEFAULT_METHOD, logger=None, registry=None, resolver=None):
        self.debug_events = False           # Logs each fired event and its responses
        self.log = logger or logging.getLogger("Dispatcher")

        if factory is None:
            factory = ImportFactory()

        self.registry = ListenerRegistry(logger=logger) if registry is None else registry
        self.resolver = ListenerResolver(factory, default_method, logger=logger) if resolver is None else resolver

    def listen(self, events, listener, priority=0):
        """Registers a listener for one or more events.

        events: name of the event, or an iterable of names
        listener: callable, or a 'Type@method' reference to an instance method
        priority: order of execution - higher values go first (default 0)
        """
        names = [events] if isinstance(events, str) else list(events)
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"event names must be str, not {type(name).__name__}")

        # Resolve once so every event shares the same listener (and instance).
        resolved = self.make_listener(listener)
        for name in names:
            self.registry.register(name, priority, resolved)

    def fire(self, event, payload=None, halt=False):
        """Raises an event to listeners.

        event: name of the event to raise, or an event object (its type name is used as the event)
        payload: argument or list of arguments passed to each listener
        halt: return the first response that is not None, instead of a list of all responses

        A listener returning False stops the event from reaching any further listeners.
        """
        event, payload = self.parse_event_and_payload(event, payload)
        listeners = self.registry.listeners_for(event)

        if self.debug_events:
            self.log.debug(f"Firing '{event}' to {len(listeners)} listener(s) with payload {payload!r}")

        responses = []
        for listener in listeners:
            response = listener(event, payload)

            if self.debug_events:
                self.log.debug(f"{listener!r} responded to '{event}' with {response!r}")

            # Checked before the False test, so False is a valid halting response.
            if halt and response is not None:
                return response

            if response is False:
                if self.debug_events:
                    self.log.debug(f"Propagation of '{event}' stopped by {listener!r}")
                break

            responses.append(response)

        return None if halt else responses

    def until(self, event, payload=None):
        """Fires an event and returns the first response that is not None."""
        return self.fire(event, payload, halt=True)

    def has(self, event):
        """Returns True if the event has any listeners."""
        event, _ = self.parse_event_and_payload(event, None)
        return self.registry.has_listeners(event)

    def get_listeners(self, event):
        """Returns the resolved listeners for an event in the order they will be called."""
        event, _ = self.parse_event_and_payload(event, None)
        return self.registry.listeners_for(event)

    def make_listener(self, listener):
        """Resolves a listener value without registering it."""
        return self.resolver.resolve(listener)

    @staticmethod
    def parse_event_and_payload(event, payload):
        """Returns the event name and payload list for an event.

        If the event is an object rather than a name, the name of its type becomes the event
        and the object itself becomes the only item in the payload.
        """
        if not isinstance(event, str):
            return type(event).__name__, [event]

        if payload is None:
            return event, []
        elif isinstance(payload, (list, tuple)):
            return event, list(payload)
        else:
            return event, [payload]
