"""GraphQL API layer (Strawberry)."""
