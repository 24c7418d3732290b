"""
Bullets app serializers

Serializers for Bullet model.
"""
from rest_framework import serializers

from rolepilot.normalize import to_optional_string, to_skills_list

from .models import DEFAULT_CATEGORY, Bullet


class SkillListField(serializers.Field):
    """
    Skills as a list of strings.

    Accepts either a JSON list or the comma separated text the app form
    submits. Blank entries are dropped and order is kept.
    """

    default_error_messages = {
        'invalid': 'Expected a list of strings or comma separated text.',
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            return to_skills_list(data)
        if isinstance(data, list) and all(isinstance(item, str) for item in data):
            return [item.strip() for item in data if item.strip()]
        self.fail('invalid')

    def to_representation(self, value):
        return list(value or [])


class BulletSerializer(serializers.ModelSerializer):
    """
    Serializer for Bullet.

    Owner is set from the authenticated user, never from the payload.
    """

    category = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    skills = SkillListField(required=False)

    class Meta:
        model = Bullet
        fields = [
            'id',
            'category',
            'bullet',
            'impact',
            'role_title',
            'company',
            'skills',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate_category(self, value):
        return to_optional_string(value) or DEFAULT_CATEGORY

    def validate(self, attrs):
        for field in ('impact', 'role_title', 'company'):
            if field in attrs:
                attrs[field] = to_optional_string(attrs[field])
        return attrs
