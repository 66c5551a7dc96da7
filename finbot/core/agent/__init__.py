"""
Conversational agent: persona, prompt assembly and the turn pipeline.
"""

from finbot.core.agent.orchestrator import ProfileStore, TurnOrchestrator, TurnResult
from finbot.core.agent.persona import SYSTEM_PERSONA
from finbot.core.agent.prompt_builder import build_system_prompt, render_turn
from finbot.core.agent.temperature import TemperaturePolicy

__all__ = [
    "ProfileStore",
    "SYSTEM_PERSONA",
    "TemperaturePolicy",
    "TurnOrchestrator",
    "TurnResult",
    "build_system_prompt",
    "render_turn",
]
