"""Assemble project facts into ready-to-paste assistant prompts."""

__version__ = "0.1.0"
