"""Format context: decides between text and raw-bytes representations."""

from dataclasses import dataclass

HUMAN_READABLE_MODES = frozenset({"json", "strings"})


@dataclass(frozen=True)
class FormatContext:
    """Format context for driving the serialization hooks outside pydantic."""

    human_readable: bool

    def is_human_readable(self) -> bool:
        return self.human_readable


TEXT = FormatContext(human_readable=True)
BINARY = FormatContext(human_readable=False)


def is_human_readable(context) -> bool:
    """
    Return True if the target format declares itself human readable.

    Accepts a FormatContext-like object exposing ``is_human_readable``, or a
    pydantic ``SerializationInfo`` / ``ValidationInfo``. For pydantic, a
    ``"human_readable"`` key in the user context overrides the mode, and the
    ``json`` and ``strings`` modes are human readable.

    Raises:
        TypeError: If context is neither of those, e.g. ``None``
    """
    flag = getattr(context, "is_human_readable", None)
    if flag is not None:
        return bool(flag() if callable(flag) else flag)

    user_context = getattr(context, "context", None)
    if isinstance(user_context, dict) and "human_readable" in user_context:
        return bool(user_context["human_readable"])

    mode = getattr(context, "mode", None)
    if mode is None:
        raise TypeError(f"Expected a format context or pydantic info object, got {type(context)}")
    return mode in HUMAN_READABLE_MODES
