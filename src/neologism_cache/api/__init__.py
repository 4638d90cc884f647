"""HTTP API exposing the session-scoped entity cache."""
