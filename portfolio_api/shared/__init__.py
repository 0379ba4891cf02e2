"""Cross-cutting helpers (logging, timestamps, identifiers). No business logic."""
