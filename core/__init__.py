"""Wizard internals: vendor catalog, OpenClaw boundary, config stores, menus."""
