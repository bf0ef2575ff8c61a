import unittest
from unittest.mock import Mock, patch
from rest_framework.test import APIRequestFactory
from apps.users.dtos import UserDTO
from apps.users.views import (
    UserListView,
    UserCreateView,
    UserDetailView,
    UserChangePasswordView,
)


def make_user_dto(user_id=1, name="Ada", email="ada@example.com"):
    return UserDTO(id=user_id, name=name, email=email)


class UsersViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def dispatch(self, request, view_cls, **kwargs):
        return view_cls.as_view()(request, **kwargs)

    def test_list_passes_sort_through(self):
        service_mock = Mock()
        service_mock.list_users.return_value = [make_user_dto(1), make_user_dto(2, "Bo")]
        with patch.object(UserListView, "service", service_mock):
            request = self.factory.get("/api/users", {"sort": "email"})
            response = self.dispatch(request, UserListView)
        self.assertEqual(response.status_code, 200)
        self.assertEqual([u["id"] for u in response.data], [1, 2])
        service_mock.list_users.assert_called_once_with("email")

    def test_list_without_sort(self):
        service_mock = Mock()
        service_mock.list_users.return_value = []
        with patch.object(UserListView, "service", service_mock):
            response = self.dispatch(self.factory.get("/api/users"), UserListView)
        self.assertEqual(response.data, [])
        service_mock.list_users.assert_called_once_with(None)

    def test_create_returns_201_without_password(self):
        service_mock = Mock()
        service_mock.create_user.return_value = (make_user_dto(7), None)
        with patch.object(UserCreateView, "service", service_mock):
            request = self.factory.post(
                "/api/users/create",
                {"name": "Ada", "email": "ada@example.com", "password": "pw"},
                format="json",
            )
            response = self.dispatch(request, UserCreateView)
        self.assertEqual(response.status_code, 201)
        self.assertNotIn("password", response.data)
        self.assertTrue(response["Location"].endswith("/api/users/7"))
        args, _ = service_mock.create_user.call_args
        self.assertEqual(args[0]["password"], "pw")

    def test_create_missing_field(self):
        service_mock = Mock()
        with patch.object(UserCreateView, "service", service_mock):
            request = self.factory.post("/api/users/create", {"name": "Ada"}, format="json")
            response = self.dispatch(request, UserCreateView)
        self.assertEqual(response.status_code, 400)
        self.assertIn("email", response.data["error"]["details"])
        service_mock.create_user.assert_not_called()

    def test_detail_get_not_found(self):
        service_mock = Mock()
        service_mock.get_user.return_value = None
        with patch.object(UserDetailView, "service", service_mock):
            response = self.dispatch(self.factory.get("/api/users/3"), UserDetailView, user_id=3)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"]["details"], {"id": "3"})

    def test_detail_put_success(self):
        service_mock = Mock()
        service_mock.update_user.return_value = (make_user_dto(3, "Grace"), None)
        with patch.object(UserDetailView, "service", service_mock):
            request = self.factory.put(
                "/api/users/3", {"name": "Grace", "email": "g@x"}, format="json"
            )
            response = self.dispatch(request, UserDetailView, user_id=3)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["name"], "Grace")
        args, _ = service_mock.update_user.call_args
        self.assertEqual(args[0], 3)
        self.assertNotIn("password", args[1])

    def test_detail_delete_not_found(self):
        service_mock = Mock()
        service_mock.delete_user.return_value = (
            False,
            ("NOT_FOUND", "User not found", {"id": "3"}),
        )
        with patch.object(UserDetailView, "service", service_mock):
            response = self.dispatch(self.factory.delete("/api/users/3"), UserDetailView, user_id=3)
        self.assertEqual(response.status_code, 404)

    def test_change_password_unauthorized(self):
        service_mock = Mock()
        service_mock.change_password.return_value = (
            False,
            ("UNAUTHORIZED", "Old password does not match", None),
        )
        with patch.object(UserChangePasswordView, "service", service_mock):
            request = self.factory.post(
                "/api/users/5/change-password",
                {"oldPassword": "wrong", "newPassword": "new"},
                format="json",
            )
            response = self.dispatch(request, UserChangePasswordView, user_id=5)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["error"]["code"], "UNAUTHORIZED")

    def test_change_password_success(self):
        service_mock = Mock()
        service_mock.change_password.return_value = (True, None)
        with patch.object(UserChangePasswordView, "service", service_mock):
            request = self.factory.post(
                "/api/users/5/change-password",
                {"oldPassword": "old", "newPassword": "new"},
                format="json",
            )
            response = self.dispatch(request, UserChangePasswordView, user_id=5)
        self.assertEqual(response.status_code, 204)
        service_mock.change_password.assert_called_once()
        args, _ = service_mock.change_password.call_args
        self.assertEqual(args[0], 5)
        self.assertEqual(args[1]["oldPassword"], "old")
