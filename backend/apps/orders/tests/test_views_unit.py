import types
import unittest
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory, force_authenticate

from apps.orders.dtos import OrderAddressDTO, OrderDTO, OrderItemDTO
from apps.orders.views import OrderCreateView, OrderDetailView, OrderListView


def make_order(order_id=1):
    return OrderDTO(
        id=order_id,
        total_amount="200.00",
        status="Confirmed",
        order_date="2025-05-01T10:00:00+00:00",
        payment_method="PayPal",
        address=OrderAddressDTO(
            id=1, street="Main St 1", city="Izmir", state="Aegean",
            postal_code="35000", country="Turkey",
        ),
        items=[
            OrderItemDTO(
                id=1, jewellery_id=5, name="Heart Pendant", description="",
                image_url="", quantity=2, price="100.00",
            )
        ],
    )


class OrderViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.user = types.SimpleNamespace(id=7, is_authenticated=True, is_staff=False)

    def dispatch(self, request, view_cls, **kwargs):
        force_authenticate(request, user=self.user)
        return view_cls.as_view()(request, **kwargs)

    def test_create_returns_201_with_message(self):
        service = Mock()
        service.create_order.return_value = (make_order(), None)
        with patch.object(OrderCreateView, "service", service):
            request = self.factory.post(
                "/api/order/create", {"addressId": 1, "paymentMethod": "PayPal"}, format="json"
            )
            response = self.dispatch(request, OrderCreateView)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["message"], "Order created successfully")
        self.assertEqual(response.data["order"]["address"]["postalCode"], "35000")
        command = service.create_order.call_args[0][1]
        self.assertEqual((command.address_id, command.payment_method), (1, "PayPal"))

    def test_create_rejects_unknown_payment_method(self):
        service = Mock()
        with patch.object(OrderCreateView, "service", service):
            request = self.factory.post(
                "/api/order/create", {"addressId": 1, "paymentMethod": "Barter"}, format="json"
            )
            response = self.dispatch(request, OrderCreateView)
        self.assertEqual(response.status_code, 400)
        service.create_order.assert_not_called()

    def test_create_maps_cart_empty(self):
        service = Mock()
        service.create_order.return_value = (None, ("CART_EMPTY", "Cart is empty", None))
        with patch.object(OrderCreateView, "service", service):
            request = self.factory.post(
                "/api/order/create", {"addressId": 1, "paymentMethod": "PayPal"}, format="json"
            )
            response = self.dispatch(request, OrderCreateView)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "CART_EMPTY")

    def test_create_maps_server_error(self):
        service = Mock()
        service.create_order.return_value = (
            None,
            ("SERVER_ERROR", "Internal server error", None),
        )
        with patch.object(OrderCreateView, "service", service):
            request = self.factory.post(
                "/api/order/create", {"addressId": 1, "paymentMethod": "PayPal"}, format="json"
            )
            response = self.dispatch(request, OrderCreateView)
        self.assertEqual(response.status_code, 500)

    def test_list(self):
        service = Mock()
        service.list_orders.return_value = [make_order(2), make_order(1)]
        with patch.object(OrderListView, "service", service):
            response = self.dispatch(self.factory.get("/api/order"), OrderListView)
        self.assertEqual([o["id"] for o in response.data], [2, 1])
        self.assertEqual(response.data[0]["items"][0]["jewelleryId"], 5)

    def test_detail_not_found(self):
        service = Mock()
        service.get_order.return_value = (
            None,
            ("NOT_FOUND", "Order not found", {"id": "9"}),
        )
        with patch.object(OrderDetailView, "service", service):
            response = self.dispatch(self.factory.get("/api/order/9"), OrderDetailView, order_id=9)
        self.assertEqual(response.status_code, 404)
