# apps/core/serializers.py

from rest_framework import serializers
from django.contrib.auth import get_user_model

User = get_user_model()


# ------------------------------------
# User Base
# ------------------------------------

class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "name",
            "email",
            "avatar",
        ]


# ------------------------------------
# Me (프로필 + 활동 카운트)
# ------------------------------------

class MeSerializer(UserSerializer):
    quizzes_count = serializers.IntegerField(read_only=True)
    surveys_count = serializers.IntegerField(read_only=True)
    quizzes_taken = serializers.IntegerField(read_only=True)
    surveys_taken = serializers.IntegerField(read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + [
            "quizzes_count",
            "surveys_count",
            "quizzes_taken",
            "surveys_taken",
        ]
