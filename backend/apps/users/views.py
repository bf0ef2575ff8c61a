from django.urls import reverse
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.common import get_logger
from .container import build_user_service
from .serializers import (
    ChangePasswordSerializer,
    RegisterUserSerializer,
    UpdateUserSerializer,
    UserSerializer,
)

logger = get_logger(__name__).bind(component="users", layer="view")

USER_ID_PARAM = OpenApiParameter("user_id", int, OpenApiParameter.PATH)


@extend_schema(tags=["Users"])
class UserListView(APIView):
    service = build_user_service()
    log = logger.bind(view="UserListView")

    @extend_schema(
        operation_id="users_list",
        summary="List users",
        parameters=[
            OpenApiParameter(
                name="sort",
                description="Sort key: 'name' or 'email'. Anything else sorts by name.",
                required=False,
                type=str,
            )
        ],
        responses={200: UserSerializer(many=True)},
    )
    def get(self, request):
        sort = request.query_params.get("sort")
        self.log.debug("Listing users via API", sort=sort)
        data = self.service.list_users(sort)
        return Response(UserSerializer(data, many=True).data)


@extend_schema(tags=["Users"])
class UserCreateView(APIView):
    service = build_user_service()
    log = logger.bind(view="UserCreateView")

    @extend_schema(
        operation_id="users_create",
        summary="Create user",
        request=RegisterUserSerializer,
        responses={
            201: UserSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = RegisterUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Creating user via API", email=serializer.validated_data.get("email"))
        dto, error = self.service.create_user(serializer.validated_data)
        if error:
            code, message, details = error
            return error_response(code, message, details)
        location = request.build_absolute_uri(reverse("api-users-detail", args=[dto.id]))
        return Response(
            UserSerializer(dto).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )


@extend_schema(tags=["Users"])
class UserDetailView(APIView):
    service = build_user_service()
    log = logger.bind(view="UserDetailView")

    @extend_schema(
        operation_id="users_retrieve",
        summary="Get user",
        parameters=[USER_ID_PARAM],
        responses={
            200: UserSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, user_id: int):
        self.log.debug("Fetching user detail", user_id=user_id)
        dto = self.service.get_user(user_id)
        if not dto:
            return error_response("NOT_FOUND", "User not found", {"id": str(user_id)})
        return Response(UserSerializer(dto).data)

    @extend_schema(
        summary="Replace user",
        parameters=[USER_ID_PARAM],
        request=UpdateUserSerializer,
        responses={
            200: UserSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, user_id: int):
        serializer = UpdateUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Replacing user", user_id=user_id)
        dto, error = self.service.update_user(user_id, serializer.validated_data)
        if error:
            code, message, details = error
            return error_response(code, message, details)
        return Response(UserSerializer(dto).data)

    @extend_schema(
        summary="Delete user",
        parameters=[USER_ID_PARAM],
        responses={204: None, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request, user_id: int):
        self.log.info("Deleting user", user_id=user_id)
        deleted, error = self.service.delete_user(user_id)
        if error:
            code, message, details = error
            return error_response(code, message, details)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Users"])
class UserChangePasswordView(APIView):
    service = build_user_service()
    log = logger.bind(view="UserChangePasswordView")

    @extend_schema(
        operation_id="users_change_password",
        summary="Change password",
        parameters=[USER_ID_PARAM],
        request=ChangePasswordSerializer,
        responses={
            204: None,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request, user_id: int):
        serializer = ChangePasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Changing password via API", user_id=user_id)
        changed, error = self.service.change_password(user_id, serializer.validated_data)
        if error:
            code, message, details = error
            return error_response(code, message, details)
        return Response(status=status.HTTP_204_NO_CONTENT)
