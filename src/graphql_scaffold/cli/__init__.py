"""CLI entry points for graphql-scaffold."""
