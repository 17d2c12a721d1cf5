import re

from src.common.exceptions import InvalidTaskIdException

TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MIN_TASK_ID = -(2**63)
MAX_TASK_ID = 2**63 - 1


def parse_task_id(path: str) -> int:
    """
    Parse a task id from the final segment of a request path.

    A trailing slash leaves an empty final segment, which is treated the same
    as a missing id. Only an optional sign followed by ASCII digits is accepted,
    and the value must fit a signed 64-bit integer.
    """
    segment = path.split("/")[-1]
    if not segment:
        raise InvalidTaskIdException("id parameter is missing")

    if not TASK_ID_PATTERN.fullmatch(segment):
        raise InvalidTaskIdException("invalid id parameter")

    task_id = int(segment)
    if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
        raise InvalidTaskIdException("invalid id parameter")

    return task_id
