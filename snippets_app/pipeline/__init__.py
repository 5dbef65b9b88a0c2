"""Command pipeline: dispatcher and click entry point."""
