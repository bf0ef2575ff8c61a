from rest_framework import serializers

from .dtos import UserDTO


class UserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.CharField()

    def to_representation(self, instance):
        if isinstance(instance, UserDTO):
            return {"id": instance.id, "name": instance.name, "email": instance.email}
        return super().to_representation(instance)


class RegisterUserSerializer(serializers.Serializer):
    # No format checks on email; any string is accepted
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    email = serializers.CharField(allow_blank=True, trim_whitespace=False)
    password = serializers.CharField(
        allow_blank=True, trim_whitespace=False, write_only=True
    )


class UpdateUserSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    email = serializers.CharField(allow_blank=True, trim_whitespace=False)


class ChangePasswordSerializer(serializers.Serializer):
    oldPassword = serializers.CharField(allow_blank=True, trim_whitespace=False)
    newPassword = serializers.CharField(allow_blank=True, trim_whitespace=False)
