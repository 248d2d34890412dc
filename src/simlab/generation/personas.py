"""
System-prompt personas for the prompt engineering demo.

The reply depends only on which markers appear in the active system prompt,
so a custom prompt mentioning "pirate" talks like the pirate persona.
"""

import json
import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from ..catalog.agents import DEFAULT_PERSONA, DEFAULT_REPLY, PERSONA_REPLIES, PERSONAS

logger = logging.getLogger(__name__)


def system_prompt(persona: str, personas: Optional[Mapping[str, str]] = None) -> str:
    """
    Look up the system prompt for a persona key.
    
    Raises:
        ValueError: If the persona is unknown
    """
    personas = personas if personas is not None else PERSONAS
    try:
        return personas[persona]
    except KeyError:
        raise ValueError(
            f"Unknown persona: {persona} (expected one of {', '.join(sorted(personas))})"
        ) from None


def persona_reply(
    prompt: str,
    message: str,
    replies: Optional[Sequence[Tuple[str, str]]] = None,
) -> str:
    """Reply to ``message`` under the system prompt ``prompt``."""
    replies = replies if replies is not None else PERSONA_REPLIES
    response = DEFAULT_REPLY
    for marker, template in replies:
        if marker in prompt:
            response = template.format(message=json.dumps(message))
    return response


class PersonaChat:
    """
    A chat transcript bound to one system prompt.
    
    Changing the persona clears the transcript.
    
    Example:
        >>> chat = PersonaChat("pirate")
        >>> chat.send("hello")
        'Aye matey! That be a fine thing to say.'
    """
    
    def __init__(
        self,
        persona: str = DEFAULT_PERSONA,
        personas: Optional[Mapping[str, str]] = None,
        replies: Optional[Sequence[Tuple[str, str]]] = None,
    ):
        self.personas = personas if personas is not None else PERSONAS
        self.replies = replies
        self.history: List[Tuple[str, str]] = []
        self.set_persona(persona)
    
    def set_persona(self, persona: str) -> str:
        """Switch persona and return its system prompt."""
        self.prompt = system_prompt(persona, self.personas)
        self.persona = persona
        self.history = []
        logger.debug(f"System prompt updated for persona '{persona}'")
        return self.prompt
    
    def send(self, message: str) -> str:
        """Record a user message and the persona's reply."""
        response = persona_reply(self.prompt, message, self.replies)
        self.history.append(("user", message))
        self.history.append(("assistant", response))
        return response
