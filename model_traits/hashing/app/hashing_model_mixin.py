from typing import Any, ClassVar, Sequence

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.hybrid import HybridExtensionType, hybrid_property

from model_traits.hashing.domain.attribute_hasher import AttributeHasher
from model_traits.hashing.domain.hash_strategy import HashStrategy
from model_traits.hashing.driving_adapter.hashing_model_observer import observe_hashing
from model_traits.platform.config.di import container


class HashingModelMixin:
    """
    Hash sensitive attributes of a mapped model before it is inserted or updated.

    Declare the attribute names on the model type:

        class User(HashingModelMixin, Base):
            __tablename__ = 'user'
            __hashable__ = ('password',)

    A hashable name may be a mapped column or a hybrid_property with a setter.
    Every mapped subclass is observed automatically. The strategy defaults to
    the container's hash_strategy; a model type may pin one with __hasher__
    and a single instance may swap its own with set_hasher().
    """

    __hashable__: ClassVar[Sequence[str]] = ()
    __hashing__: ClassVar[bool] = True
    __hasher__: ClassVar[HashStrategy | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Only mapped classes take listeners; abstract intermediates are skipped
        if sa_inspect(cls, raiseerr=False) is not None:
            observe_hashing(cls)

    # Hashing flag

    def get_hashing(self) -> bool:
        return self.__dict__.get('_hashing_enabled', type(self).__hashing__)

    def set_hashing(self, value: bool) -> None:
        self._hashing_enabled = bool(value)

    # Hashable attributes

    def get_hashable(self) -> list[str]:
        hashable = self.__dict__.get('_hashable', type(self).__hashable__)
        return list(hashable)

    def set_hashable(self, names: str | Sequence[str]) -> None:
        if isinstance(names, str):
            names = [names]
        self._hashable = tuple(dict.fromkeys(names))

    # Strategy

    def get_hasher(self) -> HashStrategy:
        hasher = self.__dict__.get('_hasher') or type(self).__hasher__
        return hasher if hasher is not None else container.hash_strategy()

    def set_hasher(self, hasher: HashStrategy) -> None:
        self._hasher = hasher

    # Attribute access used by the hashing pass

    def _hybrid(self, name: str) -> hybrid_property[Any] | None:
        descriptors = sa_inspect(type(self)).all_orm_descriptors
        if name not in descriptors:
            return None
        descriptor = descriptors[name]
        if descriptor.extension_type is HybridExtensionType.HYBRID_PROPERTY:
            return descriptor
        return None

    def has_attribute(self, name: str) -> bool:
        return name in sa_inspect(self).attrs or self._hybrid(name) is not None

    def get_attribute(self, name: str) -> Any:
        return getattr(self, name)

    def set_attribute(self, name: str, value: Any) -> None:
        setattr(self, name, value)

    def is_dirty(self, name: str) -> bool:
        state = sa_inspect(self)
        if name in state.attrs:
            return state.attrs[name].history.has_changes()
        if self._hybrid(name) is None:
            return False
        # Columns behind a hybrid are opaque: any unsaved change counts
        return state.key is None or any(attr.history.has_changes() for attr in state.attrs)

    # Public hashing API

    def is_hashable(self, name: str) -> bool:
        return AttributeHasher(self).is_hashable(name)

    def is_hashed(self, name: str) -> bool:
        return AttributeHasher(self).is_hashed(name)

    def hash(self, plain: str) -> str:
        return self.get_hasher().hash(plain)

    def check_hash(self, plain: str, hashed: str) -> bool:
        return self.get_hasher().verify(plain, hashed)

    def needs_rehash(self, name: str) -> bool:
        if not self.is_hashed(name):
            return False
        return self.get_hasher().needs_rehash(self.get_attribute(name))

    def hash_attribute(self, name: str) -> bool:
        return AttributeHasher(self).hash_attribute(name)

    def hash_attributes(self) -> None:
        AttributeHasher(self).hash_attributes()
