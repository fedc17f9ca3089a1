"""Serializers for user profiles."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Profile representation. Email and role are not editable here."""

    is_admin = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = (
            "id", "email", "username", "first_name", "last_name", "phone",
            "role", "is_admin", "created_at", "updated_at",
        )
        read_only_fields = ("id", "email", "role", "created_at", "updated_at")

    def get_is_admin(self, obj) -> bool:  # type: ignore
        return obj.is_admin()


class UserShortSerializer(serializers.ModelSerializer):
    """Public identity of a host, guest or review author."""

    class Meta:
        model = User
        fields = ("id", "username", "first_name", "last_name")


class RoleSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=User.RoleChoices.choices)
