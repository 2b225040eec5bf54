import re

import bcrypt

from model_traits.hashing.domain.hash_strategy import HashStrategy
from model_traits.platform.exception.exceptions import HashStrategyError


# $2b$12$ + 22 chars salt + 31 chars checksum
BCRYPT_HASH_PATTERN = re.compile(r'^\$2[abxy]\$(?P<rounds>\d{2})\$[./A-Za-z0-9]{53}$')


class BcryptHashStrategy(HashStrategy):
    """Concrete bcrypt implementation of HashStrategy"""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, plain: str) -> str:
        if not isinstance(plain, str):
            raise HashStrategyError(f'Cannot hash value of type {type(plain).__name__}')
        try:
            hashed = bcrypt.hashpw(plain.encode('utf-8'), bcrypt.gensalt(rounds=self.rounds))
        except ValueError as e:
            # bcrypt rejects NUL bytes and inputs longer than 72 bytes
            raise HashStrategyError(f'bcrypt failed to hash value: {e}') from e
        return hashed.decode('utf-8')

    def verify(self, plain: str, hashed: str) -> bool:
        if not isinstance(plain, str) or not isinstance(hashed, str):
            return False
        try:
            return bcrypt.checkpw(plain.encode('utf-8'), hashed.encode('utf-8'))
        except ValueError:
            # Invalid salt / garbage hash, or a plain value bcrypt refuses
            return False

    def looks_hashed(self, value: str) -> bool:
        return isinstance(value, str) and BCRYPT_HASH_PATTERN.match(value) is not None

    def needs_rehash(self, hashed: str) -> bool:
        match = BCRYPT_HASH_PATTERN.match(hashed) if isinstance(hashed, str) else None
        if match is None:
            return True
        return int(match.group('rounds')) != self.rounds
