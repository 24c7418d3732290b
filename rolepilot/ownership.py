"""
Ownership-scoped access to user rows.

Every row in the tracker belongs to exactly one user. Updates and deletes
always filter on both the row id and the owner id, so a forged id belonging
to someone else matches nothing.
"""
import uuid

from django.db import models


class OwnedQuerySet(models.QuerySet):
    """QuerySet for models carrying a `user_id` owner column."""

    def owned_by(self, user_id):
        return self.filter(user_id=user_id)

    def guarded(self, user_id, record_id):
        """Rows matching `record_id` only if owned by `user_id`."""
        return self.filter(id=record_id, user_id=user_id)

    def update_owned(self, user_id, record_id, **fields) -> int:
        """
        Update one owned row.

        Returns the number of rows changed; zero when the id does not exist
        or belongs to another user.
        """
        return self.guarded(user_id, record_id).update(**fields)

    def delete_owned(self, user_id, record_id) -> int:
        deleted, _ = self.guarded(user_id, record_id).delete()
        return deleted


class OwnedModel(models.Model):
    """
    Abstract base for user-owned rows.

    The owner is the auth provider's user id and is never read from
    submitted input.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.UUIDField(db_index=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = OwnedQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ['-created_at']
