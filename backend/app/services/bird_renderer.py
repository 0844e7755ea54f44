"""
Aviary Backend — Bird Payload Rendering
=========================================

What:  Turns a list of birds into the payload GET /birds returns, and into
       the text body GET /birds/plain returns.
Why:   The payload shape is a configuration choice (render mode); keeping it
       in plain functions means the route only picks a mode and the shapes
       can be tested without HTTP.

Render modes:
    flat             → [bird, ...]
    envelope         → {"birds": [bird, ...], "messages": MESSAGES}
    wrapped_envelope → [{"birds": [bird, ...], "messages": MESSAGES}]

The serializer is injectable. The default, serialize_bird, emits exactly
id, name, species, created_at, updated_at.
"""

from typing import Any, Callable, Dict, List, Sequence, Union

from app.models.bird import Bird
from app.schemas.bird import BirdResponse

FLAT = "flat"
ENVELOPE = "envelope"
WRAPPED_ENVELOPE = "wrapped_envelope"

RENDER_MODES = (FLAT, ENVELOPE, WRAPPED_ENVELOPE)

MESSAGES = ("Hello birds", "Goodbye birds")

BirdSerializer = Callable[[Bird], Dict[str, Any]]
Payload = Union[List[Any], Dict[str, Any]]


def serialize_bird(bird: Bird) -> Dict[str, Any]:
    """
    Map a Bird row to its JSON-ready dict.

    How:   Validates through BirdResponse, so the output holds exactly id, name,
           species, created_at and updated_at. Timestamps come out as ISO-8601
           UTC strings with millisecond precision and a trailing Z.

    Args:
        bird: A loaded Bird row (or any object with the same attributes)

    Returns:
        Dict safe to pass straight to json.dumps
    """
    return BirdResponse.model_validate(bird).model_dump(mode="json")


def render_birds(
    birds: Sequence[Bird],
    mode: str = ENVELOPE,
    serializer: BirdSerializer = serialize_bird,
) -> Payload:
    """
    Build the GET /birds payload.

    How:   Every bird goes through the serializer once, in input order. The
           envelope modes attach a fresh copy of MESSAGES, also when there
           are no birds.

    Args:
        birds: Rows in the order they should appear
        mode: One of RENDER_MODES
        serializer: Maps one Bird to a JSON-ready dict

    Returns:
        A list for flat and wrapped_envelope, a dict for envelope

    Raises:
        ValueError: Unknown mode
    """
    if mode not in RENDER_MODES:
        raise ValueError(f"Unknown render mode '{mode}'. Must be one of: {RENDER_MODES}")

    records = [serializer(bird) for bird in birds]
    if mode == FLAT:
        return records

    envelope = {"birds": records, "messages": list(MESSAGES)}
    if mode == WRAPPED_ENVELOPE:
        return [envelope]
    return envelope


def render_plain(birds: Sequence[Bird]) -> str:
    """
    Build the GET /birds/plain body.

    How:   One line per message, then "<id>. <name> (<species>)" per bird.
           A missing name or species renders as an empty string. Lines are
           joined with "\\n" and there is no trailing newline.

    Args:
        birds: Rows in the order they should appear

    Returns:
        The text body; independent of BIRDS_RENDER_MODE
    """
    lines = list(MESSAGES)
    lines.extend(
        f"{bird.id}. {bird.name or ''} ({bird.species or ''})" for bird in birds
    )
    return "\n".join(lines)
