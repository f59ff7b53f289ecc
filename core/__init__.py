# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the routes:
# - models/: Pydantic schemas for request/response validation
# - services/: Feedback, speech, messaging and asset services
#
# Code in this package should NOT import from FastAPI directly.
# Services receive plain values (and a SQLAlchemy Session for messaging)
# so they can be tested without an HTTP client.
# =============================================================================
