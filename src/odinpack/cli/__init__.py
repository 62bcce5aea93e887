"""Command-line interface for Odinpack."""
