"""Adapters – concrete document-store integrations."""
