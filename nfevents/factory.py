
import importlib


class TypeFactory:
    """Creates listener instances from an explicit table of named types."""
    def __init__(self, types=None):
        self._types = dict(types or {})

    def __contains__(self, name):
        return name in self._types

    def register(self, cls, name=None):
        """Adds a type to the factory.

        cls: class (or any zero-argument callable) used to create instances
        name: identifier used in listener references (default uses the name of the class)

        Returns the class, so this can be used as a decorator.
        """
        self._types[name or cls.__name__] = cls
        return cls

    def instantiate(self, name):
        """Returns a new instance of the type registered under the given name."""
        if name not in self._types:
            raise LookupError(f"no type registered as '{name}'")
        return self._types[name]()


class ImportFactory:
    """Creates listener instances from dotted import paths, ie 'package.module.ClassName'."""

    def instantiate(self, name):
        module_name, _, attr = name.rpartition('.')
        if not module_name or not attr:
            raise LookupError(f"'{name}' is not a dotted path to a type")

        try:
            module = importlib.import_module(module_name)
        except ImportError as ie:
            raise LookupError(f"module '{module_name}' could not be imported") from ie

        cls = getattr(module, attr, None)
        if cls is None:
            raise LookupError(f"module '{module_name}' has no attribute '{attr}'")
        return cls()
