"""
Transmission medium catalog.

Responsibilities:
- Define the medium record schema and its closed value sets.
- Load the catalog from CSV into an in-memory DataFrame.
- Answer the read-only queries used by the recommendation engine and the API.
"""
