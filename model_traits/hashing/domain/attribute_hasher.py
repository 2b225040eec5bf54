"""
Save-time hashing pass over a model's hashable attributes

For each configured name the pass:
1. skips it when hashing is disabled or the name is not hashable
2. skips it when the model has no such attribute (nothing is created)
3. reads the value through the model's accessor
4. skips empty values, clean (unmodified) values and values that already are hashes
5. writes strategy.hash(value) back through the model's mutator

Running the pass again on the same instance leaves hashed values untouched.
Strategy failures propagate so that the surrounding flush aborts.
"""

from typing import Any

from model_traits.hashing.domain.hashing_capable import HashingCapable
from model_traits.platform.logging.loguru_io import Logger


def _is_empty(value: Any) -> bool:
    return value is None or value == '' or value == b''


class AttributeHasher:
    def __init__(self, model: HashingCapable) -> None:
        self.model = model

    def is_hashable(self, name: str) -> bool:
        return bool(self.model.get_hashing()) and name in self.model.get_hashable()

    def is_hashed(self, name: str) -> bool:
        if not self.model.has_attribute(name):
            return False
        return self._looks_hashed(self.model.get_attribute(name))

    def _looks_hashed(self, value: Any) -> bool:
        if _is_empty(value) or not isinstance(value, str):
            return False
        return self.model.get_hasher().looks_hashed(value)

    def hash_attribute(self, name: str) -> bool:
        """Hash a single attribute in place; returns whether it was hashed"""
        if not self.is_hashable(name) or not self.model.has_attribute(name):
            return False

        value = self.model.get_attribute(name)
        if _is_empty(value) or not self.model.is_dirty(name) or self._looks_hashed(value):
            return False

        self.model.set_attribute(name, self.model.get_hasher().hash(value))
        return True

    @Logger.io
    def hash_attributes(self) -> list[str]:
        names = dict.fromkeys(self.model.get_hashable())  # each name once per pass
        return [name for name in names if self.hash_attribute(name)]
