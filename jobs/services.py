"""
Job mutation handlers.

Each handler performs at most one write, scoped to the calling user, and
reports what happened as a MutationResult.
"""
from typing import Dict, Mapping, Optional

from rolepilot.mutations import MutationResult, run_write, skip_invalid
from rolepilot.normalize import to_flag, to_optional_string, to_record_id

from .models import Job, JobStatus


class JobService:
    """Create, update and delete jobs on behalf of a signed-in user."""

    @staticmethod
    def clean_job(data: Mapping) -> Optional[Dict]:
        """
        Normalize submitted job fields.

        Returns None when company or role title is missing.
        """
        company = to_optional_string(data.get('company'))
        role_title = to_optional_string(data.get('role_title'))
        if not company or not role_title:
            return None

        return {
            'company': company,
            'role_title': role_title,
            'status': JobStatus.parse(data.get('status')),
            'location': to_optional_string(data.get('location')),
            'job_url': to_optional_string(data.get('job_url')),
            'notes': to_optional_string(data.get('notes')),
            'archived': to_flag(data.get('archived')),
        }

    @staticmethod
    def create_job(user, data: Mapping) -> MutationResult:
        if user is None:
            return MutationResult.SKIPPED_UNAUTHENTICATED

        fields = JobService.clean_job(data)
        if fields is None:
            return skip_invalid(user, "create_job")

        def write():
            Job.objects.create(user_id=user.id, **fields)
            return 1

        return run_write(user, "create_job", write)

    @staticmethod
    def update_job(user, data: Mapping) -> MutationResult:
        if user is None:
            return MutationResult.SKIPPED_UNAUTHENTICATED

        job_id = to_record_id(data.get('id'))
        fields = JobService.clean_job(data)
        if job_id is None or fields is None:
            return skip_invalid(user, "update_job")

        return run_write(
            user,
            "update_job",
            lambda: Job.objects.update_owned(user.id, job_id, **fields),
        )

    @staticmethod
    def delete_job(user, data: Mapping) -> MutationResult:
        if user is None:
            return MutationResult.SKIPPED_UNAUTHENTICATED

        job_id = to_record_id(data.get('id'))
        if job_id is None:
            return skip_invalid(user, "delete_job")

        return run_write(
            user,
            "delete_job",
            lambda: Job.objects.delete_owned(user.id, job_id),
        )
