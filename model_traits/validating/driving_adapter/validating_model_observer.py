from typing import Any

from sqlalchemy.engine import Connection
from sqlalchemy.orm import Mapper

from model_traits.platform.lifecycle.model_lifecycle import ModelObserver, model_lifecycle
from model_traits.platform.logging.loguru_io import Logger


class ValidatingModelObserver(ModelObserver):
    """Refuses to insert or update a model whose attributes break its rules"""

    def _validate(self, target: Any) -> None:
        if target.get_validating():
            target.is_valid_or_fail()

    @Logger.io
    def creating(self, mapper: Mapper[Any], connection: Connection, target: Any) -> None:
        self._validate(target)

    @Logger.io
    def updating(self, mapper: Mapper[Any], connection: Connection, target: Any) -> None:
        self._validate(target)


def observe_validating(model_cls: type) -> bool:
    return model_lifecycle.observe(model_cls, ValidatingModelObserver())
