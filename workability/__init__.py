"""Workspace workability scoring, ranking and recommendations."""
