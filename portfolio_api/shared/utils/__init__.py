"""Timestamp and identifier helpers."""
