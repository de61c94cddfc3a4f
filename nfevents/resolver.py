
import logging

from .exceptions import ResolutionError


DEFAULT_METHOD = "handle"


class Subscription:
    """A value a listener was registered with, before it has been resolved."""
    pass


class DirectSubscription(Subscription):
    """A plain callable, called with the event payload as positional arguments."""
    def __init__(self, callback):
        self.callback = callback

    def __eq__(self, other):
        return isinstance(other, DirectSubscription) and other.callback == self.callback

    def __hash__(self):
        return hash(self.callback)

    def __repr__(self):
        return f"DirectSubscription({getattr(self.callback, '__qualname__', self.callback)!r})"


class TypeSubscription(Subscription):
    """A method on a type that is instantiated once, when the listener is resolved."""
    def __init__(self, type_name, method=DEFAULT_METHOD):
        self.type_name = type_name
        self.method = method

    def __eq__(self, other):
        return isinstance(other, TypeSubscription) and \
            (other.type_name, other.method) == (self.type_name, self.method)

    def __hash__(self):
        return hash((self.type_name, self.method))

    def __str__(self):
        return f"{self.type_name}@{self.method}"

    def __repr__(self):
        return f"TypeSubscription({self.type_name!r}, {self.method!r})"


def parse_callback(reference, default_method=DEFAULT_METHOD):
    """Splits a 'Type@method' reference into (type, method).

    The method is optional and default_method is used when it is missing or empty.
    """
    type_name, _, method = reference.partition('@')
    return type_name, method or default_method


def parse_subscription(listener, default_method=DEFAULT_METHOD):
    """Returns the Subscription described by a listener value.

    listener: a Subscription, a 'Type@method' reference string, or a callable
    """
    if isinstance(listener, Subscription):
        return listener

    if isinstance(listener, str):
        type_name, method = parse_callback(listener, default_method)
        if not type_name.strip():
            raise ResolutionError(listener, "reference has no type identifier")
        return TypeSubscription(type_name, method)

    if callable(listener):
        return DirectSubscription(listener)

    raise ResolutionError(listener, f"expected a callable or 'Type@method' string, not {type(listener).__name__}")


class ResolvedListener:
    """A listener ready to be called by the dispatcher as listener(event, payload)."""
    def __init__(self, subscription, target):
        self.subscription = subscription        # Subscription this listener was resolved from
        self.target = target                    # Callable that receives the payload

    def __call__(self, event, payload):
        return self.target(*payload)

    def __repr__(self):
        return f"<ResolvedListener {self.subscription!r}>"


class ListenerResolver:
    """Turns listener values into ResolvedListener objects.

    factory: object providing instantiate(type_name), used for 'Type@method' listeners
    default_method: method bound when a reference does not name one
    """
    def __init__(self, factory, default_method=DEFAULT_METHOD, *, logger=None):
        self.factory = factory
        self.default_method = default_method
        self.log = logger or logging.getLogger("ListenerResolver")

    def resolve(self, listener):
        """Returns a ResolvedListener for a callable, reference string or Subscription."""
        try:
            subscription = parse_subscription(listener, self.default_method)
        except ResolutionError as rex:
            self.log.error(str(rex))
            raise

        if isinstance(subscription, DirectSubscription):
            return ResolvedListener(subscription, subscription.callback)
        elif isinstance(subscription, TypeSubscription):
            return ResolvedListener(subscription, self._bind(listener, subscription))

        raise ResolutionError(listener, f"unsupported subscription type {type(subscription).__name__}")

    def _bind(self, listener, subscription):
        """Creates the instance for a type subscription and returns its bound method."""
        if self.factory is None:
            self.log.error(f"No factory available to create listener type '{subscription.type_name}'")
            raise ResolutionError(listener, "no factory is available to create listener types")

        try:
            instance = self.factory.instantiate(subscription.type_name)
        except Exception as ex:
            self.log.error(f"Failed to create listener type '{subscription.type_name}': {ex}")
            raise ResolutionError(listener, f"type '{subscription.type_name}' could not be created: {ex}") from ex

        method = getattr(instance, subscription.method, None)
        if method is None or not callable(method):
            self.log.error(f"Listener type '{subscription.type_name}' has no method '{subscription.method}'")
            raise ResolutionError(listener, f"type '{subscription.type_name}' has no callable '{subscription.method}'")

        self.log.debug(f"Resolved {subscription} to {type(instance).__name__} instance")
        return method
