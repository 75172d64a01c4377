import types
import unittest
from unittest.mock import Mock, patch

from rest_framework import status
from rest_framework.test import APIRequestFactory, force_authenticate

from apps.users.dtos import AddressDTO, UserDTO
from apps.users.views import AddressDetailView, AddressListView, UserDetailView


def make_address(address_id=1, *, is_default=False):
    return AddressDTO(
        id=address_id,
        street="Main St 1",
        city="Istanbul",
        state="Marmara",
        postal_code="34000",
        country="Turkey",
        is_default=is_default,
        created_at="2025-01-01T00:00:00",
        updated_at="2025-01-01T00:00:00",
    )


ADDRESS_PAYLOAD = {
    "street": "Main St 1",
    "city": "Istanbul",
    "state": "Marmara",
    "postalCode": "34000",
    "country": "Turkey",
    "isDefault": True,
}


class UsersViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.user = types.SimpleNamespace(id=1, is_authenticated=True, is_staff=False)

    def dispatch(self, request, view_cls, **kwargs):
        force_authenticate(request, user=self.user)
        return view_cls.as_view()(request, **kwargs)

    def test_get_profile_renders_user(self):
        service = Mock()
        service.get_profile.return_value = (
            UserDTO(id=1, username="alice", email="a@example.com", phone=None, date_joined=None),
            None,
        )
        with patch.object(UserDetailView, "service", service):
            request = self.factory.get("/api/user/1")
            response = self.dispatch(request, UserDetailView, user_id=1)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["username"], "alice")
        service.get_profile.assert_called_once_with(1, 1)

    def test_get_other_profile_is_forbidden(self):
        service = Mock()
        service.get_profile.return_value = (None, ("FORBIDDEN", "nope", None))
        with patch.object(UserDetailView, "service", service):
            request = self.factory.get("/api/user/2")
            response = self.dispatch(request, UserDetailView, user_id=2)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"]["code"], "FORBIDDEN")

    def test_put_profile_conflict(self):
        service = Mock()
        service.update_profile.return_value = (
            None,
            ("CONFLICT", "Username or Email already taken by another user", None),
        )
        with patch.object(UserDetailView, "service", service):
            request = self.factory.put(
                "/api/user/1",
                {"username": "alice", "email": "b@example.com"},
                format="json",
            )
            response = self.dispatch(request, UserDetailView, user_id=1)
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        command = service.update_profile.call_args[0][2]
        self.assertEqual(command.email, "b@example.com")

    def test_put_profile_validation_error(self):
        service = Mock()
        with patch.object(UserDetailView, "service", service):
            request = self.factory.put("/api/user/1", {"username": "alice"}, format="json")
            response = self.dispatch(request, UserDetailView, user_id=1)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        service.update_profile.assert_not_called()

    def test_list_addresses(self):
        service = Mock()
        service.list_addresses.return_value = [make_address(1, is_default=True), make_address(2)]
        with patch.object(AddressListView, "service", service):
            request = self.factory.get("/api/address")
            response = self.dispatch(request, AddressListView)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([a["id"] for a in response.data], [1, 2])
        self.assertTrue(response.data[0]["isDefault"])
        self.assertEqual(response.data[0]["postalCode"], "34000")

    def test_create_address_returns_201(self):
        service = Mock()
        service.create_address.return_value = (make_address(5, is_default=True), None)
        with patch.object(AddressListView, "service", service):
            request = self.factory.post("/api/address", ADDRESS_PAYLOAD, format="json")
            response = self.dispatch(request, AddressListView)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Address created successfully")
        self.assertEqual(response.data["address"]["id"], 5)
        user_id, command = service.create_address.call_args[0]
        self.assertEqual(user_id, 1)
        self.assertTrue(command.is_default)

    def test_update_missing_address(self):
        service = Mock()
        service.update_address.return_value = (None, ("NOT_FOUND", "Address not found", None))
        with patch.object(AddressDetailView, "service", service):
            request = self.factory.put("/api/address/9", ADDRESS_PAYLOAD, format="json")
            response = self.dispatch(request, AddressDetailView, address_id=9)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["message"], "Address not found")

    def test_delete_address(self):
        service = Mock()
        service.delete_address.return_value = (True, None)
        with patch.object(AddressDetailView, "service", service):
            request = self.factory.delete("/api/address/3")
            response = self.dispatch(request, AddressDetailView, address_id=3)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Address deleted successfully")
        service.delete_address.assert_called_once_with(1, 3)

    def test_delete_address_conflict(self):
        service = Mock()
        service.delete_address.return_value = (
            False,
            ("CONFLICT", "Address is used by an existing order", None),
        )
        with patch.object(AddressDetailView, "service", service):
            request = self.factory.delete("/api/address/3")
            response = self.dispatch(request, AddressDetailView, address_id=3)
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_unauthenticated_request_is_rejected(self):
        request = self.factory.get("/api/address")
        response = AddressListView.as_view()(request)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
