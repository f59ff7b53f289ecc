# =============================================================================
# app/routers/speech.py - Mascot Speech API
# =============================================================================
# Short lines for the cat mascot: ad hoc batches, and one speech per day.
# =============================================================================

from fastapi import APIRouter

from core.models.speech import DailySpeechResponse, SpeechRequest, SpeechResponse
from core.services.speech_service import SpeechService

router = APIRouter()


@router.post("/speech", response_model=SpeechResponse)
def generate_speech(request: SpeechRequest | None = None):
    """
    Generate a batch of speech lines.

    - **count**: how many lines (1-10, default 3)
    - **context**: optional hint about what the designer is doing

    Falls back to canned lines when the model is unavailable.
    """
    return SpeechService.generate(request or SpeechRequest())


@router.get("/speech/daily", response_model=DailySpeechResponse)
def daily_speech():
    """
    Get the speech of the day.

    Generated once per UTC day and then served from memory.
    """
    return SpeechService.get_daily()
