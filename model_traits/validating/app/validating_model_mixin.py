from typing import Any, ClassVar

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect

from model_traits.platform.exception.exceptions import ModelValidationError
from model_traits.validating.domain.model_validator import ModelValidator, ValidationErrorDetail
from model_traits.validating.driving_adapter.validating_model_observer import observe_validating


class ValidatingModelMixin:
    r"""
    Validate a mapped model against a pydantic rule set before it is inserted or updated.

        class UserRules(BaseModel):
            email: str = Field(pattern=r'^[^@\s]+@[^@\s]+$')
            name: str = Field(min_length=1)

        class User(ValidatingModelMixin, Base):
            __tablename__ = 'user'
            __rules__ = UserRules

    Attributes that are None are left out, so required rules report them as missing.
    """

    __rules__: ClassVar[type[BaseModel] | None] = None
    __validating__: ClassVar[bool] = True

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if sa_inspect(cls, raiseerr=False) is not None:
            observe_validating(cls)

    def get_validating(self) -> bool:
        return self.__dict__.get('_validating_enabled', type(self).__validating__)

    def set_validating(self, value: bool) -> None:
        self._validating_enabled = bool(value)

    def get_rules(self) -> type[BaseModel] | None:
        if '_rules' in self.__dict__:
            return self._rules
        return type(self).__rules__

    def set_rules(self, rules: type[BaseModel] | None) -> None:
        self._rules = rules

    def get_errors(self) -> list[ValidationErrorDetail]:
        return list(self.__dict__.get('_validation_errors', []))

    def _rule_attributes(self, validator: ModelValidator) -> dict[str, Any]:
        attributes = {}
        for name in validator.fields:
            value = getattr(self, name, None)
            if value is not None:
                attributes[name] = value
        return attributes

    def is_valid(self) -> bool:
        rules = self.get_rules()
        if rules is None:
            self._validation_errors = []
            return True
        validator = ModelValidator(rules)
        self._validation_errors = validator.validate(self._rule_attributes(validator))
        return not self._validation_errors

    def is_invalid(self) -> bool:
        return not self.is_valid()

    def is_valid_or_fail(self) -> None:
        if not self.is_valid():
            fields = ', '.join(dict.fromkeys(error['field'] for error in self._validation_errors))
            raise ModelValidationError(
                f'{type(self).__name__} failed validation: {fields}',
                errors=self.get_errors(),
            )
