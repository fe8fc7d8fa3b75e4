"""Host line-editor adapters."""
