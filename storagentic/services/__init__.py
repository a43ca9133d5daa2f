"""
Service layer modules for storage and conversation support.

This module contains service implementations for:
- Dual-mode Supabase storage gateway and seed data
- FAQ knowledge base
- Inquiry logging and connection health checks
- Collection bookings
- The assistant facade and its HTTP service
"""

# Submodules are imported directly to avoid circular imports
