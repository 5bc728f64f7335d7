"""Task lists GraphQL backend.

Users sign up, sign in and share task lists stored in MongoDB.
"""

__version__ = "0.1.0"
