"""GraphQL API (strawberry) for macro calculation and administration."""
