"""Application layer: DTOs returned by repositories, access gate, admin API operations.

Depends only on domain definitions and the admin API client.
"""
