"""Runtime services shared across prompt_handoff."""
