"""Tests for promise data types and errors."""
