"""Helpers for tests: a local HTTP server and an emoji log formatter."""