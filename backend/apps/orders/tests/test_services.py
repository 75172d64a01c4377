import types
import unittest
from decimal import Decimal
from unittest.mock import patch

from django.db import DatabaseError

from apps.orders.commands import CreateOrderCommand
from apps.orders.services import OrderService

BASE_URL = "http://testserver/images/jewelry"


class DummyAtomic:
    def __call__(self, *args, **kwargs):
        return self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class ItemManager:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return list(self._rows)


class FakeOrderRepository:
    def __init__(self, jewellery, addresses):
        self.jewellery = jewellery
        self.addresses = addresses
        self.orders = {}
        self.fail_on_items = False

    def create(self, **data):
        order = types.SimpleNamespace(id=len(self.orders) + 1, **data)
        order.address = self.addresses.rows[data["address_id"]]
        order.items = ItemManager([])
        self.orders[order.id] = order
        return order

    def add_items(self, order, lines):
        if self.fail_on_items:
            raise DatabaseError("disk full")
        order.items = ItemManager(
            [
                types.SimpleNamespace(
                    id=idx + 1, jewellery=self.jewellery[line["jewellery_id"]], **line
                )
                for idx, line in enumerate(lines)
            ]
        )

    def list_for_user(self, user_id):
        mine = [o for o in self.orders.values() if o.user_id == user_id]
        return sorted(mine, key=lambda o: (o.order_date, o.id), reverse=True)

    def get_for_user(self, order_id, user_id):
        order = self.orders.get(order_id)
        return order if order and order.user_id == user_id else None


class FakeCartRepository:
    def __init__(self):
        self.carts = {}
        self.locked = []

    def get_for_user(self, user_id, *, lock=False):
        if lock:
            self.locked.append(user_id)
        return self.carts.get(user_id)

    def get_or_create_for_user(self, user_id):
        cart = self.carts.setdefault(user_id, types.SimpleNamespace(id=user_id))
        return cart, False

    def touch(self, cart):
        cart.touched = True


class FakeCartItemRepository:
    def __init__(self):
        self.rows = []

    def list_for_cart(self, cart_id):
        return [r for r in self.rows if r.cart_id == cart_id]

    def clear(self, cart_id):
        before = len(self.rows)
        self.rows = [r for r in self.rows if r.cart_id != cart_id]
        return before - len(self.rows)


class FakeAddressRepository:
    def __init__(self):
        self.rows = {}

    def add(self, address_id, user_id):
        self.rows[address_id] = types.SimpleNamespace(
            id=address_id,
            user_id=user_id,
            street="Bagdat Cd. 1",
            city="Istanbul",
            state="Marmara",
            postal_code="34000",
            country="Turkey",
        )

    def get(self, **filters):
        row = self.rows.get(filters.get("id"))
        if row is None or row.user_id != filters.get("user_id"):
            return None
        return row


def make_jewellery(jewellery_id, price):
    return types.SimpleNamespace(
        id=jewellery_id,
        name=f"Piece {jewellery_id}",
        description="",
        price=Decimal(price),
        image_url=f"{jewellery_id}.jpg",
    )


class OrderServiceTests(unittest.TestCase):
    def setUp(self):
        self.jewellery = {5: make_jewellery(5, "100.00"), 6: make_jewellery(6, "35.25")}
        self.addresses = FakeAddressRepository()
        self.addresses.add(1, user_id=7)
        self.addresses.add(2, user_id=8)
        self.carts = FakeCartRepository()
        self.cart_items = FakeCartItemRepository()
        self.orders = FakeOrderRepository(self.jewellery, self.addresses)
        self.atomic_patcher = patch("apps.orders.services.transaction.atomic", DummyAtomic())
        self.atomic_patcher.start()
        self.service = OrderService(self.orders, self.carts, self.cart_items, self.addresses)

    def tearDown(self):
        self.atomic_patcher.stop()

    def put_in_cart(self, user_id, jewellery_id, quantity):
        cart, _ = self.carts.get_or_create_for_user(user_id)
        self.cart_items.rows.append(
            types.SimpleNamespace(
                cart_id=cart.id,
                jewellery_id=jewellery_id,
                jewellery=self.jewellery[jewellery_id],
                quantity=quantity,
            )
        )

    def command(self, address_id=1):
        return CreateOrderCommand(address_id=address_id, payment_method="CreditCard")

    def test_two_of_one_piece_at_one_hundred(self):
        self.put_in_cart(7, 5, 2)
        dto, error = self.service.create_order(7, self.command(), base_url=BASE_URL)
        self.assertIsNone(error)
        self.assertEqual(dto.total_amount, "200.00")
        self.assertEqual(dto.status, "Confirmed")
        self.assertEqual(len(dto.items), 1)
        item = dto.items[0]
        self.assertEqual((item.jewellery_id, item.quantity, item.price), (5, 2, "100.00"))
        self.assertEqual(self.cart_items.list_for_cart(7), [])
        self.assertTrue(self.carts.carts[7].touched)
        self.assertEqual(self.carts.locked, [7])

    def test_total_is_sum_of_lines(self):
        self.put_in_cart(7, 5, 1)
        self.put_in_cart(7, 6, 4)
        dto, _ = self.service.create_order(7, self.command(), base_url=BASE_URL)
        line_sum = sum(Decimal(i.price) * i.quantity for i in dto.items)
        self.assertEqual(Decimal(dto.total_amount), line_sum)
        self.assertEqual(dto.total_amount, "241.00")

    def test_prices_are_snapshotted(self):
        self.put_in_cart(7, 5, 1)
        dto, _ = self.service.create_order(7, self.command(), base_url=BASE_URL)
        self.jewellery[5].price = Decimal("999.00")
        again, _ = self.service.get_order(7, dto.id, base_url=BASE_URL)
        self.assertEqual(again.items[0].price, "100.00")

    def test_empty_cart_is_rejected(self):
        dto, error = self.service.create_order(7, self.command(), base_url=BASE_URL)
        self.assertIsNone(dto)
        self.assertEqual(error, ("CART_EMPTY", "Cart is empty", None))
        self.assertEqual(self.orders.orders, {})

    def test_foreign_address_is_rejected_and_cart_kept(self):
        self.put_in_cart(7, 5, 2)
        dto, error = self.service.create_order(7, self.command(address_id=2), base_url=BASE_URL)
        self.assertIsNone(dto)
        self.assertEqual(error, ("INVALID_ADDRESS", "Invalid address", None))
        self.assertEqual(len(self.cart_items.list_for_cart(7)), 1)
        self.assertEqual(self.orders.orders, {})

    def test_database_error_maps_to_server_error(self):
        self.put_in_cart(7, 5, 2)
        self.orders.fail_on_items = True
        dto, error = self.service.create_order(7, self.command(), base_url=BASE_URL)
        self.assertIsNone(dto)
        self.assertEqual(error, ("SERVER_ERROR", "Internal server error", None))

    def test_get_order_is_scoped_to_owner(self):
        self.put_in_cart(7, 5, 1)
        dto, _ = self.service.create_order(7, self.command(), base_url=BASE_URL)
        other, error = self.service.get_order(8, dto.id, base_url=BASE_URL)
        self.assertIsNone(other)
        self.assertEqual(error[1], "Order not found")

    def test_list_orders_only_returns_own(self):
        self.put_in_cart(7, 5, 1)
        self.service.create_order(7, self.command(), base_url=BASE_URL)
        self.assertEqual(len(self.service.list_orders(7, base_url=BASE_URL)), 1)
        self.assertEqual(self.service.list_orders(8, base_url=BASE_URL), [])
