"""Fixed constants for bundle naming, configuration, validation codes and output."""
