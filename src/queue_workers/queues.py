from enum import Enum
from typing import Mapping


class Queue(str, Enum):
    """Queues a worker process can be started for.

    The member name is the queue role key read from the `QUEUE` environment
    variable; the value is the queue name used in log output.
    """
    FILE_UPLOAD = "file-upload"


QUEUES: Mapping[str, Queue] = Queue.__members__
