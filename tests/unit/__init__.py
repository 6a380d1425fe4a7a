"""Unit tests.

Domain functions are pure; adapters and the panel get fakes instead of a real
clipboard or subprocess.
"""
