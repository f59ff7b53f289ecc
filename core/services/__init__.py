# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .asset_service import AssetService
from .feedback_service import FeedbackService
from .messaging_service import MessagingService
from .speech_service import DailySpeechCache, SpeechService, daily_speech_cache

__all__ = [
    "AssetService",
    "FeedbackService",
    "MessagingService",
    "SpeechService",
    "DailySpeechCache",
    "daily_speech_cache",
]
