"""
Real HTTP integration clients.

These clients talk to the NYC 311 API gateway over HTTPS:
- CreateServiceRequest (create-sr profile)
- GetServiceRequest (public profile)

Important:
- Must return data shaped according to nyc311/integrations/contracts/*
- Every request carries the Ocp-Apim-Subscription-Key header
"""
