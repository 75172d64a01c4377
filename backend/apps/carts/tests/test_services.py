import types
import unittest
from decimal import Decimal
from unittest.mock import patch

from apps.carts.commands import AddToCartCommand, UpdateCartItemCommand
from apps.carts.services import CartService

BASE_URL = "http://testserver/images/jewelry"


class DummyAtomic:
    def __call__(self, *args, **kwargs):
        return self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class FakeCartRepository:
    def __init__(self):
        self.carts = {}
        self.touched = 0

    def get_or_create_for_user(self, user_id):
        if user_id in self.carts:
            return self.carts[user_id], False
        cart = types.SimpleNamespace(id=len(self.carts) + 1, user_id=user_id)
        self.carts[user_id] = cart
        return cart, True

    def get_for_user(self, user_id, *, lock=False):
        return self.carts.get(user_id)

    def touch(self, cart):
        self.touched += 1


class FakeCartItemRepository:
    def __init__(self, jewellery):
        self.jewellery = jewellery
        self.rows = {}
        self._pk = 1

    def list_for_cart(self, cart_id):
        return [r for r in self.rows.values() if r.cart_id == cart_id]

    def get_for_cart(self, cart_id, item_id):
        row = self.rows.get(item_id)
        return row if row and row.cart_id == cart_id else None

    def get_by_jewellery(self, cart_id, jewellery_id):
        for row in self.rows.values():
            if row.cart_id == cart_id and row.jewellery_id == jewellery_id:
                return row
        return None

    def create(self, **data):
        row = types.SimpleNamespace(id=self._pk, added_at=None, **data)
        row.jewellery = self.jewellery.get(id=data["jewellery_id"])
        self.rows[row.id] = row
        self._pk += 1
        return row

    def increment(self, item, quantity):
        item.quantity += quantity
        return item

    def update(self, item, **data):
        for key, value in data.items():
            setattr(item, key, value)
        return item

    def delete(self, item):
        self.rows.pop(item.id, None)

    def clear(self, cart_id):
        doomed = [r.id for r in self.rows.values() if r.cart_id == cart_id]
        for row_id in doomed:
            self.rows.pop(row_id)
        return len(doomed)


class FakeJewelleryRepository:
    def __init__(self, *items):
        self.items = {i.id: i for i in items}

    def get(self, **filters):
        return self.items.get(filters.get("id"))


def make_jewellery(jewellery_id, price, name="Piece"):
    return types.SimpleNamespace(
        id=jewellery_id,
        name=name,
        description="",
        price=Decimal(price),
        image_url=f"{jewellery_id}.jpg",
    )


class CartServiceTests(unittest.TestCase):
    def setUp(self):
        self.jewellery = FakeJewelleryRepository(
            make_jewellery(1, "100.00", "Ring"), make_jewellery(2, "49.50", "Studs")
        )
        self.carts = FakeCartRepository()
        self.items = FakeCartItemRepository(self.jewellery)
        self.atomic_patcher = patch("apps.carts.services.transaction.atomic", DummyAtomic())
        self.atomic_patcher.start()
        self.service = CartService(self.carts, self.items, self.jewellery)

    def tearDown(self):
        self.atomic_patcher.stop()

    def test_get_cart_creates_empty_cart_lazily(self):
        dto = self.service.get_cart(7, base_url=BASE_URL)
        self.assertEqual(dto.items, [])
        self.assertEqual(dto.total_items, 0)
        self.assertEqual(dto.total_amount, "0.00")
        self.assertIn(7, self.carts.carts)

    def test_add_same_jewellery_twice_merges_lines(self):
        self.service.add_item(7, AddToCartCommand(jewellery_id=1, quantity=2), base_url=BASE_URL)
        dto, error = self.service.add_item(
            7, AddToCartCommand(jewellery_id=1, quantity=3), base_url=BASE_URL
        )
        self.assertIsNone(error)
        self.assertEqual(len(dto.items), 1)
        self.assertEqual(dto.items[0].quantity, 5)
        self.assertEqual(dto.total_items, 5)
        self.assertEqual(dto.total_amount, "500.00")
        self.assertEqual(self.carts.touched, 2)

    def test_totals_use_quantity_times_price(self):
        self.service.add_item(7, AddToCartCommand(jewellery_id=1, quantity=1), base_url=BASE_URL)
        dto, _ = self.service.add_item(
            7, AddToCartCommand(jewellery_id=2, quantity=2), base_url=BASE_URL
        )
        self.assertEqual(dto.total_items, 3)
        self.assertEqual(dto.total_amount, "199.00")
        self.assertEqual(dto.items[1].image_url, f"{BASE_URL}/2.jpg")

    def test_add_unknown_jewellery_is_not_found(self):
        dto, error = self.service.add_item(
            7, AddToCartCommand(jewellery_id=99), base_url=BASE_URL
        )
        self.assertIsNone(dto)
        self.assertEqual(error[:2], ("NOT_FOUND", "Jewellery not found"))
        self.assertEqual(self.items.rows, {})

    def test_update_sets_quantity(self):
        added, _ = self.service.add_item(
            7, AddToCartCommand(jewellery_id=1, quantity=4), base_url=BASE_URL
        )
        item_id = added.items[0].id
        dto, error = self.service.update_item(
            7, UpdateCartItemCommand(item_id=item_id, quantity=1), base_url=BASE_URL
        )
        self.assertIsNone(error)
        self.assertEqual(dto.items[0].quantity, 1)

    def test_update_with_zero_quantity_removes_item(self):
        added, _ = self.service.add_item(
            7, AddToCartCommand(jewellery_id=1), base_url=BASE_URL
        )
        dto, error = self.service.update_item(
            7, UpdateCartItemCommand(item_id=added.items[0].id, quantity=0), base_url=BASE_URL
        )
        self.assertIsNone(error)
        self.assertEqual(dto.items, [])

    def test_update_item_in_someone_elses_cart_is_not_found(self):
        added, _ = self.service.add_item(
            7, AddToCartCommand(jewellery_id=1), base_url=BASE_URL
        )
        dto, error = self.service.update_item(
            8, UpdateCartItemCommand(item_id=added.items[0].id, quantity=3), base_url=BASE_URL
        )
        self.assertIsNone(dto)
        self.assertEqual(error[1], "Cart item not found")
        self.assertEqual(self.items.rows[added.items[0].id].quantity, 1)

    def test_remove_item(self):
        added, _ = self.service.add_item(
            7, AddToCartCommand(jewellery_id=1), base_url=BASE_URL
        )
        dto, error = self.service.remove_item(7, added.items[0].id, base_url=BASE_URL)
        self.assertIsNone(error)
        self.assertEqual(dto.items, [])
        _, error = self.service.remove_item(7, added.items[0].id, base_url=BASE_URL)
        self.assertEqual(error[0], "NOT_FOUND")

    def test_clear_is_idempotent(self):
        self.service.add_item(7, AddToCartCommand(jewellery_id=1), base_url=BASE_URL)
        self.service.add_item(7, AddToCartCommand(jewellery_id=2), base_url=BASE_URL)
        first = self.service.clear_cart(7, base_url=BASE_URL)
        second = self.service.clear_cart(7, base_url=BASE_URL)
        self.assertEqual(first.items, [])
        self.assertEqual(second.total_items, 0)


class CommandTests(unittest.TestCase):
    def test_add_defaults_quantity_to_one(self):
        command = AddToCartCommand.from_validated({"jewellery_id": "3"})
        self.assertEqual(command, AddToCartCommand(jewellery_id=3, quantity=1))

    def test_non_positive_update_removes(self):
        self.assertTrue(UpdateCartItemCommand(item_id=1, quantity=0).removes_item)
        self.assertTrue(UpdateCartItemCommand(item_id=1, quantity=-2).removes_item)
        self.assertFalse(UpdateCartItemCommand(item_id=1, quantity=1).removes_item)
