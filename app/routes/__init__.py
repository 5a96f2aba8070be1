"""
Routes package for the Blog API.

This package contains the route blueprint:
- api: REST endpoints for blog posts
"""
