"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler receives an HTTP request, delegates to the
appropriate Service, and returns the response body.
No business logic lives here.
"""
