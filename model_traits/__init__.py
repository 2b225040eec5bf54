"""Model traits: save-time attribute hashing and validation for SQLAlchemy models"""

from model_traits.hashing.app.hashing_model_mixin import HashingModelMixin
from model_traits.hashing.domain.hash_strategy import HashStrategy
from model_traits.hashing.driven_adapter.bcrypt_hash_strategy import BcryptHashStrategy
from model_traits.model import Model
from model_traits.platform.exception.exceptions import HashStrategyError, ModelValidationError
from model_traits.validating.app.validating_model_mixin import ValidatingModelMixin

__all__ = [
    'BcryptHashStrategy',
    'HashStrategy',
    'HashStrategyError',
    'HashingModelMixin',
    'Model',
    'ModelValidationError',
    'ValidatingModelMixin',
]
