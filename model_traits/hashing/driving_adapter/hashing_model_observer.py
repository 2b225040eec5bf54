from typing import Any

from sqlalchemy.engine import Connection
from sqlalchemy.orm import Mapper

from model_traits.platform.lifecycle.model_lifecycle import ModelObserver, model_lifecycle
from model_traits.platform.logging.loguru_io import Logger


class HashingModelObserver(ModelObserver):
    """Hashes a model's hashable attributes right before its row is inserted or updated"""

    @Logger.io
    def creating(self, mapper: Mapper[Any], connection: Connection, target: Any) -> None:
        target.hash_attributes()

    @Logger.io
    def updating(self, mapper: Mapper[Any], connection: Connection, target: Any) -> None:
        target.hash_attributes()


def observe_hashing(model_cls: type) -> bool:
    return model_lifecycle.observe(model_cls, HashingModelObserver())
