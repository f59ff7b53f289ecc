# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - feedback.py: Design feedback for Figma frames
# - speech.py: Mascot speech lines (ad hoc and daily)
# - messages.py: Cat-to-cat direct messaging
# - assets.py: Sprite listing and file serving (catch-all, mounted last)
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import feedback
from . import speech
from . import messages
from . import assets

__all__ = [
    "health",
    "feedback",
    "speech",
    "messages",
    "assets",
]
