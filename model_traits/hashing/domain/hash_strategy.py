from abc import ABC, abstractmethod


class HashStrategy(ABC):
    """Abstract interface for one-way hashing of attribute values"""

    @abstractmethod
    def hash(self, plain: str) -> str:
        """Hash a plain value; raises HashStrategyError when the primitive fails"""
        pass

    @abstractmethod
    def verify(self, plain: str, hashed: str) -> bool:
        """True iff hashed is a valid hash of plain; malformed hashes give False"""
        pass

    def looks_hashed(self, value: str) -> bool:
        """Whether value already is output of this strategy.

        Falls back to verifying the value against itself; strategies with a
        recognisable format should override this with a structural check.
        """
        return self.verify(value, value)

    def needs_rehash(self, hashed: str) -> bool:
        return False
