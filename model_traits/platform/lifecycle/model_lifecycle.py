"""
Model lifecycle observers

A ModelObserver receives the mapper's pre-insert and pre-update hooks for a
model type. ModelLifecycle attaches an observer to a type exactly once:
attaching the same observer type again, or to a subclass of a type it
already observes, is a no-op. Listeners use propagate=True, so mapped
subclasses inherit the hooks of their observed parent.

An exception raised by a hook propagates out of Session.flush() and the
session rolls the transaction back.
"""

from enum import StrEnum
import threading
from typing import Any, Callable

from sqlalchemy import event
from sqlalchemy.engine import Connection
from sqlalchemy.orm import Mapper

from model_traits.platform.logging.loguru_io import Logger


class ModelEvent(StrEnum):
    CREATING = 'before_insert'
    UPDATING = 'before_update'


class ModelObserver:
    """Base observer; subclasses override the hooks they care about"""

    def creating(self, mapper: Mapper[Any], connection: Connection, target: Any) -> None:
        pass

    def updating(self, mapper: Mapper[Any], connection: Connection, target: Any) -> None:
        pass

    def hooks(self) -> dict[ModelEvent, Callable[[Mapper[Any], Connection, Any], None]]:
        return {
            ModelEvent.CREATING: self.creating,
            ModelEvent.UPDATING: self.updating,
        }


class ModelLifecycle:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._observed: dict[type[ModelObserver], dict[type, ModelObserver]] = {}

    def is_observed(self, model_cls: type, observer_cls: type[ModelObserver]) -> bool:
        with self._lock:
            return self._find_observed(model_cls, observer_cls) is not None

    def _find_observed(self, model_cls: type, observer_cls: type[ModelObserver]) -> type | None:
        for observed_cls in self._observed.get(observer_cls, {}):
            if issubclass(model_cls, observed_cls):
                return observed_cls
        return None

    def observe(self, model_cls: type, observer: ModelObserver) -> bool:
        """Register observer hooks on model_cls; False when already covered"""
        observer_cls = type(observer)
        with self._lock:
            if self._find_observed(model_cls, observer_cls) is not None:
                return False
            for model_event, hook in observer.hooks().items():
                event.listen(model_cls, model_event.value, hook, propagate=True)
            self._observed.setdefault(observer_cls, {})[model_cls] = observer

        Logger.base.debug(f'{observer_cls.__name__} observing {model_cls.__name__}')
        return True

    def forget(self, model_cls: type, observer_cls: type[ModelObserver]) -> bool:
        with self._lock:
            observer = self._observed.get(observer_cls, {}).pop(model_cls, None)
            if observer is None:
                return False
            for model_event, hook in observer.hooks().items():
                event.remove(model_cls, model_event.value, hook)
        return True

    def reset(self) -> None:
        """Detach every registered observer"""
        with self._lock:
            observed = [
                (model_cls, observer)
                for observers in self._observed.values()
                for model_cls, observer in observers.items()
            ]
            self._observed.clear()
        for model_cls, observer in observed:
            for model_event, hook in observer.hooks().items():
                event.remove(model_cls, model_event.value, hook)


model_lifecycle = ModelLifecycle()
