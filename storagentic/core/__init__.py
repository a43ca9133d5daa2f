"""
Response resolution for the assistant.

This module contains:
- Rule-based canned replies
- Completion service client
- Ordered response resolver
"""
