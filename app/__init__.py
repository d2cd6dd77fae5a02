"""Health Hub inbox service: notification generation and the inbox API."""
