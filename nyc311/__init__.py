"""NYC 311 service-request client for HPD complaints."""

__version__ = "0.1.0"
