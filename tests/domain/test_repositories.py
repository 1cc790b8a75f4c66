"""Tests for the entity repositories over an in-memory store."""

from uuid import uuid4

import pytest

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.domain.model.cart import Cart
from shopfront.domain.model.order import Order
from shopfront.domain.model.product import Product
from shopfront.domain.model.user import User
from shopfront.domain.repository.cart_repository import CartRepository
from shopfront.domain.repository.product_repository import ProductRepository
from shopfront.domain.repository.user_repository import UserRepository
from tests.fakes import InMemoryCollectionStore


def _products(*products: Product) -> tuple[ProductRepository, InMemoryCollectionStore]:
    store = InMemoryCollectionStore(list(products))
    return ProductRepository(store), store


class TestEntityRepository:

    def test_get_by_id_returns_first_match(self):
        shared = uuid4()
        repo, _ = _products(
            Product(id=shared, name="First", price=1.0),
            Product(id=shared, name="Second", price=2.0),
        )
        assert repo.get_by_id(shared).name == "First"

    def test_get_unknown_returns_none(self):
        repo, _ = _products()
        assert repo.get_by_id(uuid4()) is None

    def test_add_tolerates_duplicate_ids(self):
        p = Product.create("Widget", 1.0)
        repo, _ = _products(p)
        repo.add(Product(id=p.id, name="Clone", price=2.0))
        assert len(repo.list_all()) == 2

    def test_delete_removes_every_match(self):
        shared = uuid4()
        keep = Product.create("Keep", 3.0)
        repo, _ = _products(
            Product(id=shared, name="A", price=1.0),
            keep,
            Product(id=shared, name="B", price=2.0),
        )
        assert repo.delete_by_id(shared) is True
        assert repo.list_all() == [keep]

    def test_delete_unknown_does_not_rewrite(self):
        keep = Product.create("Keep", 3.0)
        repo, store = _products(keep)
        assert repo.delete_by_id(uuid4()) is False
        assert store.writes == 0
        assert repo.list_all() == [keep]

    def test_no_caching_between_calls(self):
        repo, store = _products()
        p = Product.create("Widget", 1.0)
        store.overwrite_all([p])
        assert repo.get_by_id(p.id) == p


class TestProductRepository:

    def test_partial_update_keeps_omitted_fields(self):
        p = Product.create("Widget", 10.0)
        repo, _ = _products(p)
        repo.update(p.id, name="Renamed")
        saved = repo.get_by_id(p.id)
        assert saved.name == "Renamed"
        assert saved.price == 10.0

    def test_explicit_zero_price_is_applied(self):
        p = Product.create("Widget", 10.0)
        repo, _ = _products(p)
        repo.update(p.id, price=0.0)
        assert repo.get_by_id(p.id).price == 0.0

    def test_update_unknown_raises(self):
        repo, _ = _products()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            repo.update(uuid4(), name="X")

    def test_discount_touches_only_listed_products(self):
        a = Product.create("A", 100.0)
        b = Product.create("B", 200.0)
        c = Product.create("C", 50.0)
        repo, store = _products(a, b, c)

        changed = repo.apply_discount(20, [a.id, b.id, uuid4()])

        assert changed == 2
        assert store.writes == 1
        assert repo.get_by_id(a.id).price == pytest.approx(80.0, abs=0.01)
        assert repo.get_by_id(b.id).price == pytest.approx(160.0, abs=0.01)
        assert repo.get_by_id(c.id).price == 50.0


class TestCartRepository:

    def _setup(self):
        user_id = uuid4()
        cart = Cart.create(user_id)
        store = InMemoryCollectionStore([cart])
        return CartRepository(store), store, cart, user_id

    def test_get_by_user_id(self):
        repo, _, cart, user_id = self._setup()
        assert repo.get_by_user_id(user_id).id == cart.id
        assert repo.get_by_user_id(uuid4()) is None

    def test_add_product_persists_nested_list(self):
        repo, _, cart, _ = self._setup()
        p = Product.create("Widget", 10.0)
        assert repo.add_product(cart.id, p) is True
        assert repo.add_product(cart.id, p) is True
        assert len(repo.get_by_id(cart.id).products) == 2

    def test_add_product_unknown_cart_is_silent(self):
        repo, store, _, _ = self._setup()
        assert repo.add_product(uuid4(), Product.create("Widget", 1.0)) is False
        assert store.writes == 0

    def test_remove_product(self):
        repo, _, cart, _ = self._setup()
        p = Product.create("Widget", 10.0)
        repo.add_product(cart.id, p)
        repo.remove_product(cart.id, p.id)
        assert repo.get_by_id(cart.id).products == []


class TestUserRepository:

    def test_orders_of_unknown_user_is_empty(self):
        repo = UserRepository(InMemoryCollectionStore())
        assert repo.get_orders(uuid4()) == []

    def test_add_and_remove_nested_order(self):
        user = User.create("Alice")
        repo = UserRepository(InMemoryCollectionStore([user]))
        order = Order.create(user.id)

        assert repo.add_order(user.id, order) is True
        assert [o.id for o in repo.get_orders(user.id)] == [order.id]

        assert repo.remove_order(user.id, order.id) is True
        assert repo.get_orders(user.id) == []

    def test_nested_mutation_on_unknown_user_is_silent(self):
        store = InMemoryCollectionStore([User.create("Alice")])
        repo = UserRepository(store)
        assert repo.add_order(uuid4(), Order.create(uuid4())) is False
        assert repo.remove_order(uuid4(), uuid4()) is False
        assert store.writes == 0

    def test_modify_moves_user_to_end_and_collapses_duplicates(self):
        alice = User.create("Alice")
        bob = User.create("Bob")
        clone = User(id=alice.id, name="Alice again")
        repo = UserRepository(InMemoryCollectionStore([alice, bob, clone]))

        repo.add_order(alice.id, Order.create(alice.id))

        users = repo.list_all()
        assert [u.name for u in users] == ["Bob", "Alice"]
        assert len(users[1].orders) == 1
