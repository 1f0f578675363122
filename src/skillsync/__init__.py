"""Installer for Claude skill and command documents."""
