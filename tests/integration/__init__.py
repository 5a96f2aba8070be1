"""
API test package for the Blog API.

This package contains tests for the REST API endpoints.
Tests use the Flask test client and demonstrate:
- CRUD operation testing
- Input validation testing
- Error handling testing
- Comparing responses with stored records
"""
