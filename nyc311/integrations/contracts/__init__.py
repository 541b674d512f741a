"""
Contracts (data models).

This folder defines the request/response shapes exchanged with the NYC 311 gateway:
- interfaces.py: enums and the CreateServiceRequest payload (contact, add-on problems)
- service_requests.py: creation result, status record and call outcomes

Why this exists:
- Keeps wire names (camelCase, PascalCase, lowercase) in one place
- Enumerated fields only ever carry their declared gateway codes
- Callers build typed payloads instead of ad-hoc dicts
"""
