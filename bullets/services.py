"""
Bullet bank mutation handlers.
"""
from typing import Dict, Mapping, Optional

from rolepilot.mutations import MutationResult, run_write, skip_invalid
from rolepilot.normalize import to_optional_string, to_record_id, to_skills_list

from .models import DEFAULT_CATEGORY, Bullet


class BulletService:
    """Create, update and delete bank bullets on behalf of a signed-in user."""

    @staticmethod
    def clean_bullet(data: Mapping) -> Optional[Dict]:
        """
        Normalize submitted bullet fields.

        Returns None when the bullet text is missing. A blank category
        becomes "general".
        """
        bullet = to_optional_string(data.get('bullet'))
        if not bullet:
            return None

        return {
            'category': to_optional_string(data.get('category')) or DEFAULT_CATEGORY,
            'bullet': bullet,
            'impact': to_optional_string(data.get('impact')),
            'role_title': to_optional_string(data.get('role_title')),
            'company': to_optional_string(data.get('company')),
            'skills': to_skills_list(data.get('skills')),
        }

    @staticmethod
    def create_bullet(user, data: Mapping) -> MutationResult:
        if user is None:
            return MutationResult.SKIPPED_UNAUTHENTICATED

        fields = BulletService.clean_bullet(data)
        if fields is None:
            return skip_invalid(user, "create_bullet")

        def write():
            Bullet.objects.create(user_id=user.id, **fields)
            return 1

        return run_write(user, "create_bullet", write)

    @staticmethod
    def update_bullet(user, data: Mapping) -> MutationResult:
        if user is None:
            return MutationResult.SKIPPED_UNAUTHENTICATED

        bullet_id = to_record_id(data.get('id'))
        fields = BulletService.clean_bullet(data)
        if bullet_id is None or fields is None:
            return skip_invalid(user, "update_bullet")

        return run_write(
            user,
            "update_bullet",
            lambda: Bullet.objects.update_owned(user.id, bullet_id, **fields),
        )

    @staticmethod
    def delete_bullet(user, data: Mapping) -> MutationResult:
        if user is None:
            return MutationResult.SKIPPED_UNAUTHENTICATED

        bullet_id = to_record_id(data.get('id'))
        if bullet_id is None:
            return skip_invalid(user, "delete_bullet")

        return run_write(
            user,
            "delete_bullet",
            lambda: Bullet.objects.delete_owned(user.id, bullet_id),
        )
