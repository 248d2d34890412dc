"""
Tool routes, scanned documents, personas and latency figures for the agent demos.
"""

from typing import Dict, Tuple

# (keywords, tool call, canned result); the first route with a keyword in
# the lowercased query wins.
TOOL_ROUTES: Tuple[Tuple[Tuple[str, ...], str, str], ...] = (
    (("weather",), "get_weather('London')", "Temp: 15°C, Rain: None"),
    (("email",), "send_email('Admin')", "Email sent successfully."),
    (("db", "user"), "query_db('SELECT *')", "User found: ID 101"),
)

NO_TOOL = "none"
NO_TOOL_RESULT = "I don't understand that command."
TOOL_THOUGHT = "Identified intent. Routing to external tool."
NO_TOOL_THOUGHT = "No tools required for this query."

# doc type -> (title, content); an empty title means the document has none.
OCR_DOCUMENTS: Dict[str, Tuple[str, str]] = {
    "invoice": ("INVOICE #99", "Item: Jetpack\nCost: $9000"),
    "idcard": ("ID CARD", "Name: Alice\nRole: Pilot"),
    "note": ("", "Don't forget\nto feed the\nAI model!"),
}

OCR_CONFIDENCE = 0.98

PERSONAS: Dict[str, str] = {
    "assistant": "You are a helpful assistant.",
    "pirate": "You are a pirate. Arrr!",
    "robot": "Output only JSON.",
    "therapy": "I am here to listen. How does that feel?",
}

DEFAULT_PERSONA = "assistant"
DEFAULT_REPLY = "I can help."

# (marker in the system prompt, reply template). Checked in order and a
# later match overrides an earlier one. {message} is the JSON-quoted input.
PERSONA_REPLIES: Tuple[Tuple[str, str], ...] = (
    ("pirate", "Aye matey! That be a fine thing to say."),
    ("JSON", '{{"user_input": {message}, "status": "received"}}'),
    ("listen", "I hear you. Tell me more about why you said that."),
)

LOCAL_LATENCY_LABEL = "< 1 ms"

# Inclusive bounds for the simulated cloud round trip, in milliseconds.
CLOUD_LATENCY_MS: Tuple[int, int] = (100, 149)
