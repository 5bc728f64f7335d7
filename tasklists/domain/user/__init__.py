"""User domain module.

Users are created by sign-up and never updated or deleted by this service.
"""
