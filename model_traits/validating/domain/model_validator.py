from typing import Any, Mapping, TypedDict

from pydantic import BaseModel, ValidationError


class ValidationErrorDetail(TypedDict):
    field: str
    message: str
    type: str


class ModelValidator:
    """Validate attribute values against a pydantic rule set"""

    def __init__(self, rules: type[BaseModel]) -> None:
        self.rules = rules

    @property
    def fields(self) -> list[str]:
        return list(self.rules.model_fields)

    def validate(self, attributes: Mapping[str, Any]) -> list[ValidationErrorDetail]:
        """Return one detail per broken rule; empty list means valid"""
        try:
            self.rules.model_validate(dict(attributes))
        except ValidationError as e:
            return [
                ValidationErrorDetail(
                    field='.'.join(str(loc) for loc in error['loc']) or '__root__',
                    message=error['msg'],
                    type=error['type'],
                )
                for error in e.errors()
            ]
        return []
