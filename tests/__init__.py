"""Test suite for jsonprep."""
