"""Top-level foundry-markup commands (auto-discovered)."""
