"""Service Adapters.

Available adapters:
- sendgrid: SendGrid v3 API (mail send, templates, contacts, lists, stats)
"""

__all__ = ["sendgrid"]
