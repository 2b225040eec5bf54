"""
Unit tests for HashingModelMixin

Transient (never flushed) mapped instances: SQLAlchemy still tracks
attribute history, which is what the dirty check reads.
"""

import pytest

from model_traits.hashing.driven_adapter.bcrypt_hash_strategy import BcryptHashStrategy
from test.stub_models import HybridPasswordStub, ModelHashingStub
from test.stub_strategies import ReversingHashStrategy


@pytest.fixture
def model() -> ModelHashingStub:
    return ModelHashingStub()


@pytest.mark.unit
class TestHashingConfiguration:
    def test_hashing_enabled_by_default(self, model: ModelHashingStub) -> None:
        assert model.get_hashing() is True

    def test_setting_hashing(self, model: ModelHashingStub) -> None:
        model.set_hashing(False)
        assert model.get_hashing() is False

        model.set_hashing(True)
        assert model.get_hashing() is True

    def test_getting_hashable_attributes(self, model: ModelHashingStub) -> None:
        assert model.get_hashable() == ['foo']

    def test_setting_hashable_attributes(self, model: ModelHashingStub) -> None:
        model.set_hashable(['bar'])

        assert model.get_hashable() == ['bar']
        # Type default untouched for other instances
        assert ModelHashingStub().get_hashable() == ['foo']

    def test_setting_hashable_attributes_deduplicates(self, model: ModelHashingStub) -> None:
        model.set_hashable(['x', 'y', 'x'])

        assert model.get_hashable() == ['x', 'y']

    def test_setting_single_hashable_attribute_name(self, model: ModelHashingStub) -> None:
        model.set_hashable('password')

        assert model.get_hashable() == ['password']

    def test_getting_default_hasher(
        self, model: ModelHashingStub, fast_hash_strategy: BcryptHashStrategy
    ) -> None:
        assert isinstance(model.get_hasher(), BcryptHashStrategy)
        assert model.get_hasher() is fast_hash_strategy

    def test_setting_hasher(self, model: ModelHashingStub) -> None:
        hasher = ReversingHashStrategy()
        model.set_hasher(hasher)

        assert model.get_hasher() is hasher
        assert ModelHashingStub().get_hasher() is not hasher


@pytest.mark.unit
class TestHashingGateAndDetector:
    def test_is_hashable_returns_true(self, model: ModelHashingStub) -> None:
        assert model.is_hashable('foo') is True

    def test_is_hashable_returns_false_when_not_set(self, model: ModelHashingStub) -> None:
        model.set_hashable(['bar'])

        assert model.is_hashable('foo') is False

    def test_is_hashable_returns_false_when_disabled(self, model: ModelHashingStub) -> None:
        model.set_hashing(False)

        assert model.is_hashable('foo') is False

    def test_is_hashed_returns_true(self, model: ModelHashingStub) -> None:
        model.foo = model.hash('plain text')

        assert model.is_hashed('foo') is True

    def test_is_hashed_returns_false(self, model: ModelHashingStub) -> None:
        # No value yet
        assert model.is_hashed('foo') is False

        model.foo = 'plain text'
        assert model.is_hashed('foo') is False

        # Not an attribute of the model at all
        assert model.is_hashed('bar') is False


@pytest.mark.unit
class TestHashingPrimitives:
    def test_hash(self, model: ModelHashingStub) -> None:
        assert model.hash('plain text') != 'plain text'

    def test_check_hash(self, model: ModelHashingStub) -> None:
        hashed = model.hash('plain text')

        assert model.check_hash('plain text', hashed) is True
        assert model.check_hash('plain text', 'foo') is False
        assert model.check_hash('plain text', 'garbage') is False

    def test_needs_rehash(self, model: ModelHashingStub) -> None:
        assert model.needs_rehash('foo') is False

        model.foo = BcryptHashStrategy(rounds=5).hash('plain text')
        assert model.needs_rehash('foo') is True

        model.foo = model.hash('plain text')
        assert model.needs_rehash('foo') is False


@pytest.mark.unit
class TestHashAttributes:
    def test_dirty_plain_value_is_hashed(self) -> None:
        model = ModelHashingStub(foo='secret')

        model.hash_attributes()

        assert model.foo != 'secret'
        assert model.is_hashed('foo') is True
        assert model.check_hash('secret', model.foo) is True

    def test_second_pass_leaves_hash_unchanged(self) -> None:
        model = ModelHashingStub(foo='secret')

        model.hash_attributes()
        first = model.foo
        model.hash_attributes()

        assert model.foo == first

    def test_previous_hash_is_kept_byte_for_byte(self) -> None:
        hashed = BcryptHashStrategy(rounds=4).hash('secret')
        model = ModelHashingStub(foo=hashed)

        model.hash_attributes()

        assert model.foo == hashed

    def test_disabled_hashing_leaves_value(self) -> None:
        model = ModelHashingStub(foo='secret')
        model.set_hashing(False)

        model.hash_attributes()

        assert model.foo == 'secret'

    def test_undeclared_attribute_is_skipped_and_not_created(self) -> None:
        model = ModelHashingStub(foo='secret')
        model.set_hashable(['foo', 'bar'])

        model.hash_attributes()

        assert model.is_hashed('foo') is True
        assert not hasattr(model, 'bar')

    def test_only_hashable_attributes_are_hashed(self) -> None:
        model = ModelHashingStub(foo='fighter', name='soap')
        model.set_hasher(ReversingHashStrategy())

        model.hash_attributes()

        assert model.foo == 'rev$rethgif'
        assert model.name == 'soap'

    def test_hash_attribute_single(self) -> None:
        model = ModelHashingStub(foo='secret')
        model.set_hasher(ReversingHashStrategy())

        assert model.hash_attribute('foo') is True
        assert model.foo == 'rev$terces'


@pytest.mark.unit
class TestHybridPropertyAttribute:
    def test_hybrid_counts_as_present(self) -> None:
        model = HybridPasswordStub(password='secret')

        assert model.has_attribute('password') is True
        assert model.has_attribute('missing') is False

    def test_unsaved_hybrid_is_dirty(self) -> None:
        model = HybridPasswordStub(password='secret')

        assert model.is_dirty('password') is True

    def test_hybrid_value_is_hashed_through_setter(self) -> None:
        model = HybridPasswordStub(password='secret')
        model.set_hasher(ReversingHashStrategy())

        model.hash_attributes()

        assert model.password == 'rev$terces'
        assert model._password == 'rev$terces'
