"""
Bullets app models

Bullet model for the user's bank of reusable resume bullet points.
"""
from django.db import models

from rolepilot.ownership import OwnedModel

DEFAULT_CATEGORY = 'general'


class Bullet(OwnedModel):
    """
    A reusable accomplishment statement.

    `skills` holds a JSON list of skill names in the order they were
    entered, e.g. ["Python", "SQL", "Airflow"].
    """

    category = models.CharField(max_length=100, default=DEFAULT_CATEGORY)
    bullet = models.TextField()
    impact = models.TextField(null=True, blank=True)
    role_title = models.CharField(max_length=255, null=True, blank=True)
    company = models.CharField(max_length=255, null=True, blank=True)
    skills = models.JSONField(default=list, blank=True)

    def __str__(self):
        text = self.bullet if len(self.bullet) <= 60 else f"{self.bullet[:57]}..."
        return f"[{self.category}] {text}"

    class Meta(OwnedModel.Meta):
        db_table = 'bullet_bank'
        verbose_name = 'Bullet'
        verbose_name_plural = 'Bullet Bank'
