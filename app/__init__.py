# =============================================================================
# app/ - HTTP Layer
# =============================================================================
# Everything that knows about FastAPI lives here:
# - main.py: builds the app (lifespan, CORS, error handlers, routers)
# - config.py: settings from the environment and .env
# - exceptions.py: AmeoException subclasses and their JSON handlers
# - dependencies.py: the messaging database session dependency
# - routers/: one module per feature; assets.py is mounted last
#
# Routes stay thin and hand the work to core/services.
# =============================================================================
