from django.urls import path
from .views import UserListView, UserCreateView, UserDetailView, UserChangePasswordView

urlpatterns = [
    path("users", UserListView.as_view(), name="api-users-list"),
    path("users/create", UserCreateView.as_view(), name="api-users-create"),
    path("users/<rowid:user_id>", UserDetailView.as_view(), name="api-users-detail"),
    path(
        "users/<rowid:user_id>/change-password",
        UserChangePasswordView.as_view(),
        name="api-users-change-password",
    ),
]
