"""Parse frame sequence strings into lists of frame numbers.

A frame spec is a comma separated list of clauses. Each clause is either a
single frame or an inclusive range, optionally followed by a step:

individual frames:  "1,2,3,5,8,13"  -> [1, 2, 3, 5, 8, 13]
range:              "10-15"         -> [10, 11, 12, 13, 14, 15]
range with step:    "10-20@2"       -> [10, 12, 14, 16, 18, 20]
backwards:          "42-33@3"       -> [42, 39, 36, 33]
binary split:       "10-20@b"       -> [10, 20, 15, 12, 17, 11, 13, 16, 18, 14, 19]

The step is always positive. The direction of a range comes from the order of
its bounds, and the last frame is left out if the step does not land on it:
"80-70@4" -> [80, 76, 72].

Binary splitting renders both ends first, then the midpoints of each interval,
breadth first. This is useful for seeing the whole shot early, and filling in
detail as more frames come back.

Frames are emitted in the order they are written, and duplicates are kept
unless unique=True is given.
"""
import collections
import re

from frameseq.lib.exceptions import InvalidInteger, InvalidStep, InvalidSyntax

MIN_FRAME = -(2 ** 63)
MAX_FRAME = 2 ** 63 - 1

CLAUSE_SEP = ","
BINARY_STEP = "b"

INTEGER_REGEX = re.compile(r"^-?[0-9]+$")

# The first "-" after an optional leading sign separates the bounds. Each bound
# may carry its own sign, so "-5--1" is a valid range.
RANGE_SPEC_REGEX = re.compile(
    r"^(?P<first>-?[^-@]*)-(?P<last>\s*-?[^-@]*)(@(?P<step>[^@]*))?$"
)


def _to_frame(token):
    """Convert a token to an int frame number, or raise InvalidInteger."""
    if not INTEGER_REGEX.match(token):
        raise InvalidInteger(token)
    value = int(token)
    if not MIN_FRAME <= value <= MAX_FRAME:
        raise InvalidInteger(token)
    return value


def _to_step(token):
    """Convert a step token to a positive int, or raise InvalidStep."""
    if not INTEGER_REGEX.match(token):
        raise InvalidStep(token)
    value = int(token)
    if value < 1 or value > MAX_FRAME:
        raise InvalidStep(token)
    return value


def stride_sequence(first, last, step=1):
    """Return the frames from first towards last, step apart.

    The sign of the step comes from the direction of the range. last is only
    included if the step lands on it exactly.
    """
    if step < 1:
        raise InvalidStep(str(step))
    if first == last:
        return [first]
    direction = 1 if first < last else -1
    return list(range(first, last + direction, step * direction))


def _midpoint(lo, hi):
    # Truncate towards lo, whichever way the interval runs.
    half = abs(hi - lo) // 2
    return lo + half if hi > lo else lo - half


def binary_sequence(first, last):
    """Return the frames of a range in binary split order.

    Emits first and last, then repeatedly bisects the open intervals in
    breadth first order. A worklist is used so deep ranges don't hit the
    recursion limit.
    """
    if first == last:
        return [first]

    result = [first, last]
    intervals = collections.deque([(first, last)])
    while intervals:
        lo, hi = intervals.popleft()
        mid = _midpoint(lo, hi)
        if mid in (lo, hi):
            continue
        result.append(mid)
        intervals.append((lo, mid))
        intervals.append((mid, hi))
    return result


def split_clauses(spec):
    """Split a frame spec on commas and strip each clause.

    Raises InvalidSyntax if any clause is empty.
    """
    clauses = [clause.strip() for clause in spec.split(CLAUSE_SEP)]
    for clause in clauses:
        if not clause:
            raise InvalidSyntax(clause)
    return clauses


def parse_clause(clause):
    """Expand a single clause, i.e. one frame or one range."""
    clause = clause.strip()
    if not clause:
        raise InvalidSyntax(clause)

    # A "-" at position 0 is the sign of a single frame.
    if "-" not in clause[1:]:
        if "@" in clause or clause == "-":
            raise InvalidSyntax(clause)
        return [_to_frame(clause)]

    match = RANGE_SPEC_REGEX.match(clause)
    if not match:
        raise InvalidSyntax(clause)

    first_token = match.group("first").strip()
    last_token = match.group("last").strip()
    # a bound that is empty or only a sign means a "-" too many or too few
    if first_token in ("", "-") or last_token in ("", "-"):
        raise InvalidSyntax(clause)

    first = _to_frame(first_token)
    last = _to_frame(last_token)

    step_token = match.group("step")
    if step_token is None:
        return stride_sequence(first, last)

    step_token = step_token.strip()
    if not step_token:
        raise InvalidSyntax(clause)
    if step_token == BINARY_STEP:
        return binary_sequence(first, last)
    return stride_sequence(first, last, _to_step(step_token))


def _unique(frames):
    seen = set()
    result = []
    for frame in frames:
        if frame not in seen:
            seen.add(frame)
            result.append(frame)
    return result


def parse(spec, unique=False):
    """Parse a frame spec string into a list of ints.

    Clauses are expanded in the order given and concatenated. The first bad
    clause raises one of InvalidSyntax, InvalidInteger or InvalidStep, and
    nothing is returned.

    If unique is True, repeated frames are dropped, keeping the first.
    """
    frames = []
    for clause in split_clauses(spec):
        frames += parse_clause(clause)
    if unique:
        return _unique(frames)
    return frames


def is_valid(spec):
    """Is this a frame spec that parse() accepts."""
    try:
        parse(spec)
    except (InvalidSyntax, InvalidInteger, InvalidStep):
        return False
    return True
