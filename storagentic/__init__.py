"""
Stor-a-gentic Package

Customer-support chat assistant for a storage-rental business:
- Ordered response resolution (FAQ, completion service, canned rules)
- Dual-mode Supabase persistence with a built-in mock fallback
- Fire-and-forget inquiry logging
- Startup connection health checks
"""

__version__ = "1.0.0"
__author__ = "Stor-a-gentic Team"

# Submodules are imported on demand so the HTTP stack stays optional for library use
