
from .dispatcher import Dispatcher
from .exceptions import EventError, ResolutionError
from .factory import TypeFactory, ImportFactory
from .registry import ListenerRegistry
from .resolver import ListenerResolver, ResolvedListener, Subscription, DirectSubscription, TypeSubscription
from .resolver import parse_callback, parse_subscription, DEFAULT_METHOD
