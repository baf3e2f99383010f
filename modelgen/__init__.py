"""Shared plumbing for database-model-to-code generators."""
