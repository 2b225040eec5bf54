from typing import Any, Protocol, Sequence, runtime_checkable

from model_traits.hashing.domain.hash_strategy import HashStrategy


@runtime_checkable
class HashingCapable(Protocol):
    """What AttributeHasher needs from a model: configuration, accessors, dirty tracking"""

    def get_hashing(self) -> bool: ...

    def get_hashable(self) -> Sequence[str]: ...

    def get_hasher(self) -> HashStrategy: ...

    def has_attribute(self, name: str) -> bool: ...

    def get_attribute(self, name: str) -> Any: ...

    def set_attribute(self, name: str, value: Any) -> None: ...

    def is_dirty(self, name: str) -> bool: ...
