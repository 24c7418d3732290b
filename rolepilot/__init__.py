"""
RolePilot

Job application tracker: jobs and a reusable resume bullet bank, with
sign-in delegated to a hosted auth API.
"""
