"""Turn a raw completion of unknown shape into plain text.

Provider SDK response objects are not stable across model versions, so the
text is located by probing shapes in a fixed order and taking the first hit:

    1. the completion is already a string
    2. response.text is a callable accessor
    3. response.text is a string
    4. outputText / output_text is a string
    5. outputs is a non-empty sequence -> first element as JSON
    6. text is a callable accessor or a string (google-genai responses)
    7. anything else -> str(completion), or repr, or the type name

Members are looked up as mapping keys or attributes.
"""

import json
import logging
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_MISSING = object()


def _member(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, _MISSING)
    try:
        return getattr(obj, name, _MISSING)
    except Exception as e:
        # SDK properties can raise when the response has no candidates
        logger.debug("Accessor %s raised: %s", name, e)
        return _MISSING


def _read_text(holder: Any, *, allow_call: bool, allow_str: bool) -> str | None:
    if holder is _MISSING or holder is None:
        return None
    text = _member(holder, "text")
    if allow_call and callable(text):
        try:
            value = text()
        except Exception as e:
            logger.debug("text() accessor raised: %s", e)
            return None
        return value if isinstance(value, str) else None
    if allow_str and isinstance(text, str):
        return text
    return None


def _jsonable(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return value


def _from_string(raw: Any) -> str | None:
    return raw if isinstance(raw, str) else None


def _from_response_text_call(raw: Any) -> str | None:
    return _read_text(_member(raw, "response"), allow_call=True, allow_str=False)


def _from_response_text_str(raw: Any) -> str | None:
    return _read_text(_member(raw, "response"), allow_call=False, allow_str=True)


def _from_text(raw: Any) -> str | None:
    return _read_text(raw, allow_call=True, allow_str=True)


def _from_output_text(raw: Any) -> str | None:
    for name in ("outputText", "output_text"):
        value = _member(raw, name)
        if isinstance(value, str):
            return value
    return None


def _from_outputs(raw: Any) -> str | None:
    outputs = _member(raw, "outputs")
    if isinstance(outputs, Sequence) and not isinstance(outputs, str) and len(outputs) > 0:
        try:
            return json.dumps(_jsonable(outputs[0]), default=str)
        except Exception as e:
            logger.debug("outputs[0] not serializable: %s", e)
    return None


_PROBES: tuple[Callable[[Any], str | None], ...] = (
    _from_string,
    _from_response_text_call,
    _from_response_text_str,
    _from_output_text,
    _from_outputs,
    _from_text,
)


def extract_text(raw: Any) -> str:
    """Return the text carried by a raw completion, before fence stripping."""
    for probe in _PROBES:
        text = probe(raw)
        if text is not None:
            return text
    return _stringify(raw)


def _stringify(raw: Any) -> str:
    for render in (str, repr):
        try:
            return render(raw)
        except Exception as e:
            logger.debug("%s() of completion raised: %s", render.__name__, e)
    return type(raw).__name__


def strip_code_fences(text: str) -> str:
    """Remove Markdown code-fence markers and surrounding whitespace."""
    return _FENCE_RE.sub("", text).strip()


def normalize(raw: Any) -> str:
    """Plain text payload of a raw completion. Never raises."""
    return strip_code_fences(extract_text(raw))
