"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from model_traits.hashing.driven_adapter.bcrypt_hash_strategy import BcryptHashStrategy
from model_traits.platform.config.core_setting import Settings


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Default hash strategy for models that install none of their own
    hash_strategy = providers.Singleton(
        BcryptHashStrategy,
        rounds=config_service.provided.BCRYPT_ROUNDS,
    )


container = Container()
