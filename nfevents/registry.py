
from bisect import bisect_right
import logging


class ListenerRegistry:
    """Stores listeners for each event name in the order they should be called.

    Listeners are kept sorted as they are added - higher priorities first, and listeners
    sharing a priority in the order they were registered - so lookups never need to sort.
    """
    def __init__(self, *, logger=None):
        self.log = logger or logging.getLogger("ListenerRegistry")

        self._listeners = {}            # event name -> [listener, ...] in firing order
        self._keys = {}                 # event name -> [-priority, ...] parallel to _listeners

    def __len__(self):
        return sum(len(listeners) for listeners in self._listeners.values())

    def __contains__(self, event):
        return self.has_listeners(event)

    def register(self, event, priority, listener):
        """Adds a listener for an event.

        event: name of the event to listen for
        priority: order of execution - higher values go first
        listener: invocable to store, called as listener(event, payload)
        """
        if not isinstance(priority, int) or isinstance(priority, bool):
            raise TypeError(f"priority must be an int, not {type(priority).__name__}")

        if event not in self._listeners:
            self._listeners[event] = []
            self._keys[event] = []

        # Negated so the list is ascending; bisect_right puts us after any equal priorities.
        keys = self._keys[event]
        index = bisect_right(keys, -priority)
        keys.insert(index, -priority)
        self._listeners[event].insert(index, listener)

        self.log.debug(f"Registered {listener!r} for '{event}' at priority {priority}")

    def listeners_for(self, event):
        """Returns a list of the listeners for an event in the order they should be called."""
        return list(self._listeners.get(event, ()))

    def has_listeners(self, event):
        """Returns True if at least one listener is registered for the exact event name."""
        return len(self._listeners.get(event, ())) > 0

    def events(self):
        """Returns the names of all events with registered listeners."""
        return [event for event, listeners in self._listeners.items() if listeners]
