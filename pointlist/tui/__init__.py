"""Textual presentation shell for Pointlist."""
