"""Account field rules, applied to every create / replace / merge body."""

from __future__ import annotations

from rest_framework import serializers


class AccountValidator(serializers.Serializer):
    name = serializers.CharField(min_length=3, max_length=255)
