"""Forward-only status machine shared by orders and delivery assignments."""

from protean.exceptions import ValidationError


def resolve_transition(status_enum, valid_transitions, current, requested):
    """Return the status to move to, or raise ``ValidationError``.

    Requesting the current status is accepted and returns it unchanged, so
    callers can treat repeated requests as no-ops.
    """
    try:
        requested = status_enum(requested)
    except ValueError:
        raise ValidationError({"status": [f"Unknown status: {requested}"]}) from None

    current = status_enum(current)
    if requested == current:
        return requested
    if requested not in valid_transitions.get(current, set()):
        raise ValidationError({"status": [f"Cannot transition from {current.value} to {requested.value}"]})
    return requested


def next_status(valid_transitions, current):
    """The single forward step from ``current``, or None at the end of the line."""
    return next(iter(valid_transitions.get(current, set())), None)
