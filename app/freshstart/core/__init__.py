"""Core phases and helpers for freshstart."""
