"""Service layer: completion API, chat relay, contact and portfolio data."""
