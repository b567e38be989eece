"""
Shared module package.

Contains cross-cutting concerns used by the HTTP boundary:
- Error classification and handlers
- Security middleware (headers, CORS)
- Rate limiting
- Logging configuration
"""
