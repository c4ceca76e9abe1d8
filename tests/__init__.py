"""Tests for the words transformer dictionary engine and its command line front end."""
