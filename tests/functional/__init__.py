"""Functional tests: the jsonesc CLI from the outside (stdout, stderr, exit code)."""
