"""
Unit test package for the Blog API.

These tests exercise the model, schemas, store and server hooks
directly, without the HTTP layer in between.
"""
