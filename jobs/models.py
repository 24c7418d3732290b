"""
Jobs app models

Job model for tracking applications a user is working on.
"""
from typing import Any

from django.db import models

from rolepilot.ownership import OwnedModel


class JobStatus(models.TextChoices):
    SAVED = 'saved', 'Saved'
    APPLIED = 'applied', 'Applied'
    INTERVIEWING = 'interviewing', 'Interviewing'
    OFFER = 'offer', 'Offer'
    REJECTED = 'rejected', 'Rejected'
    ARCHIVED = 'archived', 'Archived'

    @classmethod
    def parse(cls, value: Any) -> 'JobStatus':
        """
        Return the status named by `value`, or SAVED.

        Anything other than an exact status token falls back silently;
        an unknown status never blocks a write.
        """
        if isinstance(value, str) and value in cls.values:
            return cls(value)
        return cls.SAVED


class Job(OwnedModel):
    """
    A tracked job application.

    `archived` is a user-set marker; deleting a job removes the row.
    """

    company = models.CharField(max_length=255)
    role_title = models.CharField(max_length=255)
    status = models.CharField(
        max_length=20,
        choices=JobStatus.choices,
        default=JobStatus.SAVED,
    )
    location = models.CharField(max_length=255, null=True, blank=True)
    job_url = models.TextField(null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    archived = models.BooleanField(default=False)

    def __str__(self):
        return f"{self.role_title} at {self.company}"

    class Meta(OwnedModel.Meta):
        db_table = 'jobs'
        verbose_name = 'Job'
        verbose_name_plural = 'Jobs'
