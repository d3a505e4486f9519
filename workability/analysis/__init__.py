"""LLM-backed workspace analysis."""
