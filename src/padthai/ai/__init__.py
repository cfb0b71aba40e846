"""Evaluation and search."""
