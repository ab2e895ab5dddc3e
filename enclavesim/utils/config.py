"""A string-to-string configuration store."""

from collections.abc import MutableMapping


class Config(MutableMapping):
    """Configuration values keyed by name."""

    def __init__(self, values=None):
        self._values = {}
        self.update(values or {})

    def __getitem__(self, key):
        return self._values[key]

    def __setitem__(self, key, value):
        self._values[str(key)] = str(value)

    def __delitem__(self, key):
        self._values.pop(key)

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)