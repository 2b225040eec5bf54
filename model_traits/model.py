from model_traits.hashing.app.hashing_model_mixin import HashingModelMixin
from model_traits.validating.app.validating_model_mixin import ValidatingModelMixin


class Model(HashingModelMixin, ValidatingModelMixin):
    """
    Both traits at once. Combine with the declarative base:

        class User(Model, Base):
            __tablename__ = 'user'
            __hashable__ = ('password',)
            __rules__ = UserRules

    Validation is attached before hashing, so rules see the plain values.
    """
